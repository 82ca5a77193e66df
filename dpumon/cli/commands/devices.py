"""Devices command for the dpumon CLI."""

import argparse
import json

from dpumon.cli.utils import open_collector


def run_devices_list(args: argparse.Namespace, config) -> int:
    """List detected DPU ranks with their static attributes."""
    collector = open_collector(config)
    try:
        ranks = collector.snapshot()
        if args.json:
            payload = {
                "hardware_kind": collector.hardware_kind.value,
                "device_count": collector.device_count,
                "ranks": [rank.to_dict() for rank in ranks],
            }
            print(json.dumps(payload, indent=2))
            return 0
        print(f"Detected DPU ranks ({collector.hardware_kind.value}):")
        print("=" * 72)
        for rank in ranks:
            supported = [name for name, ok in rank.supported_functions.items() if ok]
            parts = [rank.name, f"part={rank.part_number}", f"mram={rank.mem_total}"]
            if supported:
                parts.append(f"metrics={','.join(supported)}")
            print("  " + "  ".join(parts))
        print("=" * 72)
        print(f"Total: {collector.device_count} rank(s)")
        return 0
    finally:
        collector.shutdown()
