"""DPU rank discovery and sysfs attribute readers."""

from .attributes import (
    attribute_readable,
    read_int,
    read_mem_total,
    read_part_number,
    read_token,
)
from .ranks import (
    DIMM_DRIVER_NAME,
    DPU_RANK_ROOT,
    RANK_NAME_MARKER,
    classify_driver,
    driver_link,
    is_rank_path,
    list_rank_paths,
    rank_root_present,
    resolve_driver,
)

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
    "read_token",
    "read_int",
    "read_part_number",
    "read_mem_total",
    "attribute_readable",
]
