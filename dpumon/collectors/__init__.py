"""Collectors module for dpumon."""

from .base import CollectorBase, CollectorExport, CollectorSample
from .dpu_collector import DpuCollector

__all__ = [
    "CollectorBase",
    "CollectorSample",
    "CollectorExport",
    "DpuCollector",
]
