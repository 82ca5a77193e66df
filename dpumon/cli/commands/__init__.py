"""CLI commands for dpumon."""

from .devices import run_devices_list
from .export import run_export
from .watch import run_watch

__all__ = [
    "run_devices_list",
    "run_watch",
    "run_export",
]
