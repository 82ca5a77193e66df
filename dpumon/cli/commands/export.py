"""Export command: write the rank inventory to CSV or JSON."""

import argparse

from dpumon.cli.utils import open_collector
from dpumon.export import write_inventory_csv, write_inventory_json


def run_export(args: argparse.Namespace, config) -> int:
    """Initialize, run one runtime pass and write the inventory."""
    collector = open_collector(config)
    try:
        collector.collect()
        ranks = collector.snapshot()
        fmt = args.format or ("json" if args.output.endswith(".json") else "csv")
        if fmt == "json":
            count = write_inventory_json(ranks, collector.hardware_kind, args.output)
        else:
            count = write_inventory_csv(ranks, collector.hardware_kind, args.output)
    finally:
        collector.shutdown()
    print(f"Wrote {count} rank(s) to {args.output}")
    return 0
