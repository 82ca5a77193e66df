"""Shared utilities for dpumon."""

from .errors import ConfigError, DpumonError, HardwareNotFoundError

__all__ = [
    "DpumonError",
    "HardwareNotFoundError",
    "ConfigError",
]
