"""DPU rank discovery for dpumon.

Enumerates rank directories under the sysfs rank class, resolves the kernel
driver bound to the ranks and maps it to a HardwareKind. Read-only; nothing
here keeps state between calls.
"""

import logging
import re
from pathlib import Path
from typing import List, Optional, Union

from dpumon.schema import HardwareKind

LOGGER = logging.getLogger(__name__)

# sysfs class directory holding one entry per rank
DPU_RANK_ROOT = "/sys/class/dpu_rank"
# Substring every rank directory name carries
RANK_NAME_MARKER = "dpu_rank"
# Driver bound to ranks on DIMM modules; FPGA boards use any other driver
DIMM_DRIVER_NAME = "dpu_region_mem"

PathLike = Union[str, Path]

_DIGITS_RE = re.compile(r"([0-9]+)")


def _natural_key(path: Path) -> list:
    """Sort key placing dpu_rank2 before dpu_rank10."""
    # Odd indexes are the captured ASCII digit runs
    return [int(part) if index % 2 else part for index, part in enumerate(_DIGITS_RE.split(path.name))]


def rank_root_present(root: PathLike = DPU_RANK_ROOT) -> bool:
    """Return True if the rank class directory exists (DPU module loaded)."""
    return Path(root).is_dir()


def is_rank_path(path: PathLike) -> bool:
    """Return True if the entry name marks a rank device."""
    return RANK_NAME_MARKER in Path(path).name


def list_rank_paths(root: PathLike = DPU_RANK_ROOT) -> List[Path]:
    """List candidate rank directories under root.

    Entries whose name does not carry the rank marker are logged and skipped.

    Args:
        root: Rank class directory

    Returns:
        Rank directory paths in natural rank order
    """
    ranks: List[Path] = []
    for entry in Path(root).iterdir():
        if is_rank_path(entry):
            ranks.append(entry)
        else:
            LOGGER.warning("Invalid device: %s", entry)
    ranks.sort(key=_natural_key)
    return ranks


def driver_link(rank_path: PathLike) -> Path:
    """Path of the driver symlink for a rank directory."""
    return Path(rank_path) / "device" / "driver"


def resolve_driver(rank_paths: List[Path]) -> Optional[Path]:
    """Resolve the driver of the first rank whose driver link canonicalizes.

    Args:
        rank_paths: Candidate rank directories, tried in order

    Returns:
        Fully dereferenced driver path, or None if no candidate resolves
    """
    for rank_path in rank_paths:
        link = driver_link(rank_path)
        try:
            return link.resolve(strict=True)
        except (OSError, RuntimeError) as e:
            # RuntimeError: symlink loop on older interpreters
            LOGGER.warning("Failed to get %s canonical path: %s", link, e)
    return None


def classify_driver(driver_name: str) -> HardwareKind:
    """Map a driver name to the hardware kind it serves."""
    if driver_name == DIMM_DRIVER_NAME:
        return HardwareKind.DIMM
    return HardwareKind.FPGA


__all__ = [
    "DPU_RANK_ROOT",
    "RANK_NAME_MARKER",
    "DIMM_DRIVER_NAME",
    "rank_root_present",
    "is_rank_path",
    "list_rank_paths",
    "driver_link",
    "resolve_driver",
    "classify_driver",
]
