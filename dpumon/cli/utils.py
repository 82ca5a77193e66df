"""CLI utility functions for dpumon."""

import argparse
import logging

from dpumon.collectors import DpuCollector
from dpumon.configs import Config, ConfigManager
from dpumon.utils.errors import HardwareNotFoundError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def load_config(args: argparse.Namespace) -> Config:
    """Load the config file named by --config and apply command-line overrides."""
    config = ConfigManager.load_or_default(getattr(args, "config", None))
    overrides: dict = {}
    if getattr(args, "root", None):
        overrides.setdefault("dpu", {})["root"] = args.root
    if getattr(args, "simulation", False):
        overrides.setdefault("dpu", {})["simulation"] = True
    if getattr(args, "log_level", None):
        overrides["logging"] = {"level": args.log_level}
    if getattr(args, "interval", None) is not None:
        overrides["collection"] = {"interval_seconds": args.interval}
    if overrides:
        config.update(overrides)
        config.validate()
    return config


def setup_logging(config: Config) -> None:
    """Configure root logging from the logging.level config value."""
    level = str(config.get("logging.level", "INFO")).upper()
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT)


def open_collector(config: Config) -> DpuCollector:
    """Build a collector from config and initialize it.

    Raises:
        HardwareNotFoundError: If no DPU rank could be registered
    """
    collector = DpuCollector.from_config(config)
    if not collector.init():
        collector.shutdown()
        raise HardwareNotFoundError(f"No DPU ranks found under {collector.root}")
    return collector
