"""UPMEM DPU rank discovery and metrics collection.

Provides:
- schema (Rank, RankMetrics, HardwareKind)
- hardware (rank discovery, driver classification, sysfs attribute readers)
- collectors (CollectorBase, DpuCollector)
- configs (Config, ConfigManager)
"""

from dpumon.collectors import CollectorBase, CollectorExport, CollectorSample, DpuCollector
from dpumon.configs import DEFAULT_CONFIG, Config, ConfigManager
from dpumon.hardware import (
    DIMM_DRIVER_NAME,
    DPU_RANK_ROOT,
    classify_driver,
    list_rank_paths,
    resolve_driver,
)
from dpumon.schema import UNKNOWN_VALUE, HardwareKind, Rank, RankMetrics
from dpumon.utils.errors import ConfigError, DpumonError, HardwareNotFoundError

__version__ = "0.1.0"

__all__ = [
    # Schema
    "HardwareKind",
    "Rank",
    "RankMetrics",
    "UNKNOWN_VALUE",
    # Discovery
    "DPU_RANK_ROOT",
    "DIMM_DRIVER_NAME",
    "list_rank_paths",
    "resolve_driver",
    "classify_driver",
    # Collectors
    "CollectorBase",
    "CollectorSample",
    "CollectorExport",
    "DpuCollector",
    # Config
    "DEFAULT_CONFIG",
    "Config",
    "ConfigManager",
    # Errors
    "DpumonError",
    "HardwareNotFoundError",
    "ConfigError",
]
