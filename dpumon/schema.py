"""Rank inventory schema for dpumon.

This module defines the data shapes shared by the collectors, the CLI and any
dashboard reading rank snapshots: the hardware kind of the attached ranks, the
static identity of one rank and its per-tick runtime metrics.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

# Value shown for static attributes that could not be read
UNKNOWN_VALUE = "Unknown"

# Runtime metric name -> sysfs attribute file under the rank directory
RUNTIME_METRIC_FILES: Dict[str, str] = {
    "is_owned": "is_owned",
    "usage_count": "usage_count",
    "nr_dpus": "nr_dpus",
    "fck_frequency": "fck_frequency",
    "clock_division": "clock_division",
}


class HardwareKind(str, Enum):
    """Deployment form of the attached DPU ranks."""

    DIMM = "dimm"
    FPGA = "fpga"
    SIMULATED = "simulated"
    UNKNOWN = "unknown"


@dataclass
class RankMetrics:
    """Runtime metrics of one rank.

    Every metric is ``None`` when unsupported by the driver or unreadable
    on the last tick.

    Attributes:
        timestamp: Unix timestamp of the pass that produced these values
        is_owned: 1 when a host process currently owns the rank
        usage_count: Number of open handles on the rank
        nr_dpus: Number of enabled DPUs in the rank
        fck_frequency: DPU clock frequency in MHz
        clock_division: Clock divider applied to the DPU clock
    """

    timestamp: Optional[float] = None
    is_owned: Optional[int] = None
    usage_count: Optional[int] = None
    nr_dpus: Optional[int] = None
    fck_frequency: Optional[int] = None
    clock_division: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Export as dict for JSON and UI."""
        return asdict(self)


@dataclass
class Rank:
    """One physical or simulated DPU rank.

    Attributes:
        name: Directory name under the rank root (e.g. "dpu_rank0")
        path: Rank directory path
        part_number: Part number token, or UNKNOWN_VALUE
        mem_total: MRAM size as integer text, or UNKNOWN_VALUE
        supported_functions: Runtime metric name -> readable at init
        metrics: Last runtime metrics pass
    """

    name: str = ""
    path: Optional[Path] = None
    part_number: str = UNKNOWN_VALUE
    mem_total: str = UNKNOWN_VALUE
    supported_functions: Dict[str, bool] = field(default_factory=dict)
    metrics: RankMetrics = field(default_factory=RankMetrics)

    @property
    def mem_total_bytes(self) -> Optional[int]:
        """MRAM size as an integer, or None when unknown."""
        if self.mem_total == UNKNOWN_VALUE:
            return None
        return int(self.mem_total)

    def to_dict(self) -> Dict[str, Any]:
        """Export as dict for JSON and UI."""
        return {
            "name": self.name,
            "path": str(self.path) if self.path is not None else None,
            "part_number": self.part_number,
            "mem_total": self.mem_total,
            "supported_functions": dict(self.supported_functions),
            "metrics": self.metrics.to_dict(),
        }


__all__ = [
    "UNKNOWN_VALUE",
    "RUNTIME_METRIC_FILES",
    "HardwareKind",
    "RankMetrics",
    "Rank",
]
