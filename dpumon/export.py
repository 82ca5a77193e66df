"""Rank inventory export helpers shared by the CLI and host monitors."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

import pandas as pd

from dpumon.configs.config_io import ensure_parent_dir
from dpumon.schema import RUNTIME_METRIC_FILES, HardwareKind, Rank

INVENTORY_COLUMNS = ["rank", "hardware_kind", "part_number", "mem_total", "timestamp", *RUNTIME_METRIC_FILES]


def rank_rows(ranks: Iterable[Rank], hardware_kind: HardwareKind) -> list[dict[str, Any]]:
    """Flatten ranks into one row per rank with static and runtime columns."""
    rows: list[dict[str, Any]] = []
    for rank in ranks:
        row: dict[str, Any] = {
            "rank": rank.name,
            "hardware_kind": hardware_kind.value,
            "part_number": rank.part_number,
            "mem_total": rank.mem_total,
            "timestamp": rank.metrics.timestamp,
        }
        for metric in RUNTIME_METRIC_FILES:
            row[metric] = getattr(rank.metrics, metric)
        rows.append(row)
    return rows


def ranks_to_dataframe(ranks: Iterable[Rank], hardware_kind: HardwareKind) -> pd.DataFrame:
    """Build a DataFrame with one row per rank.

    Runtime metric columns use the pandas nullable integer dtype so a
    missing metric stays distinguishable from zero.
    """
    df = pd.DataFrame(rank_rows(ranks, hardware_kind), columns=INVENTORY_COLUMNS)
    for metric in RUNTIME_METRIC_FILES:
        df[metric] = df[metric].astype("Int64")
    return df


def write_inventory_csv(ranks: Iterable[Rank], hardware_kind: HardwareKind, path: str | Path) -> int:
    """Write the inventory to CSV. Returns the number of rows written."""
    df = ranks_to_dataframe(ranks, hardware_kind)
    ensure_parent_dir(str(path))
    df.to_csv(path, index=False)
    return len(df)


def write_inventory_json(ranks: Iterable[Rank], hardware_kind: HardwareKind, path: str | Path) -> int:
    """Write the inventory to JSON. Returns the number of ranks written."""
    payload = {
        "hardware_kind": hardware_kind.value,
        "ranks": [rank.to_dict() for rank in ranks],
    }
    ensure_parent_dir(str(path))
    with Path(path).open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)
    return len(payload["ranks"])


__all__ = [
    "INVENTORY_COLUMNS",
    "rank_rows",
    "ranks_to_dataframe",
    "write_inventory_csv",
    "write_inventory_json",
]
