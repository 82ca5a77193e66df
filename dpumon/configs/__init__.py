"""Configuration load/save and defaults."""

from .config import DEFAULT_CONFIG, SIMULATION_ENV_VAR, Config, ConfigManager, simulation_forced_by_env
from .config_io import (
    ensure_parent_dir,
    load_json_file,
    load_yaml_file,
    save_json_file,
    save_yaml_file,
)

__all__ = [
    "load_yaml_file",
    "load_json_file",
    "save_yaml_file",
    "save_json_file",
    "ensure_parent_dir",
    "DEFAULT_CONFIG",
    "SIMULATION_ENV_VAR",
    "simulation_forced_by_env",
    "Config",
    "ConfigManager",
]
