"""Command-line interface for dpumon."""

import argparse
import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version

from dpumon.utils.errors import ConfigError, HardwareNotFoundError

from .commands import run_devices_list, run_export, run_watch
from .utils import load_config, open_collector, setup_logging

try:
    DPUMON_CLI_VERSION = package_version("dpumon")
except PackageNotFoundError:
    DPUMON_CLI_VERSION = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="dpumon",
        description="Discover UPMEM DPU ranks and collect their metrics.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"dpumon {DPUMON_CLI_VERSION}",
        help="Show CLI version and exit",
    )
    parser.add_argument("--config", help="YAML or JSON configuration file")
    parser.add_argument("--root", help="Rank class directory (default: /sys/class/dpu_rank)")
    parser.add_argument(
        "--simulation",
        action="store_true",
        help="Force simulation mode (no hardware access)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: from config, INFO)",
    )
    sub = parser.add_subparsers(dest="command")

    devices = sub.add_parser("devices", help="List detected DPU ranks")
    devices.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    devices.set_defaults(func=run_devices_list)

    watch = sub.add_parser("watch", help="Print runtime metrics once per tick")
    watch.add_argument(
        "--interval",
        type=float,
        help="Seconds between ticks (default: collection.interval_seconds)",
    )
    watch.add_argument("--count", type=int, help="Stop after this many ticks")
    watch.set_defaults(func=run_watch)

    export = sub.add_parser("export", help="Write the rank inventory to a file")
    export.add_argument("--output", "-o", default="output/dpu_ranks.csv", help="Output path")
    export.add_argument(
        "--format",
        choices=["csv", "json"],
        help="Output format (default: from the output extension)",
    )
    export.set_defaults(func=run_export)

    return parser


def main(argv=None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "command", None):
        parser.print_help()
        return 0
    try:
        config = load_config(args)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    setup_logging(config)
    try:
        return int(args.func(args, config))
    except HardwareNotFoundError as e:
        print(str(e), file=sys.stderr)
        return 1


__all__ = [
    "build_parser",
    "main",
    "load_config",
    "setup_logging",
    "open_collector",
    "run_devices_list",
    "run_watch",
    "run_export",
]
