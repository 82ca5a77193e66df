"""Watch command: poll runtime metrics once per tick."""

import argparse
import time

from dpumon.cli.utils import open_collector
from dpumon.schema import RUNTIME_METRIC_FILES


def _format_value(value) -> str:
    return "-" if value is None else str(value)


def run_watch(args: argparse.Namespace, config) -> int:
    """Print one line per rank per tick until --count ticks or Ctrl-C."""
    interval = float(config.get("collection.interval_seconds", 1.0))
    collector = open_collector(config)
    tick = 0
    try:
        while args.count is None or tick < args.count:
            if tick:
                time.sleep(interval)
            collector.collect()
            for rank in collector.snapshot():
                fields = "  ".join(
                    f"{metric}={_format_value(getattr(rank.metrics, metric))}" for metric in RUNTIME_METRIC_FILES
                )
                print(f"[{tick}] {rank.name}  {fields}", flush=True)
            tick += 1
    except KeyboardInterrupt:
        pass
    finally:
        collector.shutdown()
    return 0
