"""Configuration management for dpumon."""

import copy
import os
from typing import Any

from dpumon.configs.config_io import (
    ensure_parent_dir,
    load_json_file,
    load_yaml_file,
    save_json_file,
    save_yaml_file,
)
from dpumon.hardware.ranks import DPU_RANK_ROOT
from dpumon.utils.errors import ConfigError

# Environment variable forcing simulation mode ("1", "true", "yes")
SIMULATION_ENV_VAR = "DPUMON_SIMULATION"

DEFAULT_CONFIG: dict[str, Any] = {
    "dpu": {
        "root": DPU_RANK_ROOT,
        "simulation": False,
    },
    "collection": {
        "interval_seconds": 1.0,
        "runtime_metrics": True,
    },
    "logging": {
        "level": "INFO",
    },
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def simulation_forced_by_env() -> bool:
    """Return True if the environment forces simulation mode."""
    return os.environ.get(SIMULATION_ENV_VAR, "").strip().lower() in ("1", "true", "yes")


class Config:
    """Configuration container for dpumon, layered over DEFAULT_CONFIG."""

    def __init__(self, config_dict: dict[str, Any] | None = None):
        """Initialize configuration.

        Args:
            config_dict: Optional dictionary of overrides applied on top of defaults
        """
        self.config = copy.deepcopy(DEFAULT_CONFIG)
        if config_dict:
            self.update(config_dict)

    def update(self, config_dict: dict[str, Any]) -> None:
        """Update configuration with provided values.

        Args:
            config_dict: Dictionary with configuration overrides
        """
        for key, value in config_dict.items():
            if key in self.config and isinstance(self.config[key], dict) and isinstance(value, dict):
                self.config[key] = {**self.config[key], **value}
            else:
                self.config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key.

        Args:
            key: Configuration key (e.g., 'dpu.root')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
        return value if value is not None else default

    def validate(self) -> None:
        """Check value types and ranges.

        Raises:
            ConfigError: If a value is invalid
        """
        root = self.get("dpu.root")
        if not isinstance(root, str) or not root:
            raise ConfigError(f"dpu.root must be a non-empty path, got {root!r}")
        simulation = self.get("dpu.simulation")
        if not isinstance(simulation, bool):
            raise ConfigError(f"dpu.simulation must be a boolean, got {simulation!r}")
        interval = self.get("collection.interval_seconds")
        if isinstance(interval, bool) or not isinstance(interval, (int, float)) or interval <= 0:
            raise ConfigError(f"collection.interval_seconds must be a positive number, got {interval!r}")
        runtime = self.get("collection.runtime_metrics")
        if not isinstance(runtime, bool):
            raise ConfigError(f"collection.runtime_metrics must be a boolean, got {runtime!r}")
        level = str(self.get("logging.level", "")).upper()
        if level not in _LOG_LEVELS:
            raise ConfigError(f"logging.level must be one of {', '.join(_LOG_LEVELS)}, got {level!r}")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return copy.deepcopy(self.config)


class ConfigManager:
    """Manages loading and saving configuration files."""

    @staticmethod
    def load_yaml(filepath: str) -> Config:
        """Load configuration from YAML file."""
        return Config(load_yaml_file(filepath))

    @staticmethod
    def load_json(filepath: str) -> Config:
        """Load configuration from JSON file."""
        return Config(load_json_file(filepath))

    @staticmethod
    def save_yaml(config: Config, filepath: str) -> None:
        """Save configuration to YAML file."""
        ensure_parent_dir(filepath)
        save_yaml_file(filepath, config.to_dict())

    @staticmethod
    def save_json(config: Config, filepath: str) -> None:
        """Save configuration to JSON file."""
        ensure_parent_dir(filepath)
        save_json_file(filepath, config.to_dict())

    @staticmethod
    def load_or_default(filepath: str | None = None) -> Config:
        """Load and validate configuration from file, or return validated defaults.

        Args:
            filepath: Optional path to a .yaml/.yml/.json configuration file

        Returns:
            Config object

        Raises:
            ConfigError: If the file is missing, has an unknown extension or invalid values
        """
        if filepath:
            if not os.path.exists(filepath):
                raise ConfigError(f"Config file not found: {filepath}")
            if filepath.endswith((".yaml", ".yml")):
                config = ConfigManager.load_yaml(filepath)
            elif filepath.endswith(".json"):
                config = ConfigManager.load_json(filepath)
            else:
                raise ConfigError(f"Unsupported config file type: {filepath}")
        else:
            config = Config()
        config.validate()
        return config
