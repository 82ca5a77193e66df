"""DPU rank collector.

Discovers the UPMEM DPU ranks exposed under ``/sys/class/dpu_rank``, reads
their static identity once and refreshes their runtime metrics on every
monitoring tick. The collector owns the rank registry; dashboards read
copies through ``snapshot()``.

Lifecycle:
    init() discovers ranks, classifies the hardware and runs the static pass.
    collect() runs one runtime pass per tick.
    shutdown() clears the initialized flag only; the last inventory stays
    readable until the next init() replaces it.

Nothing in here raises on missing hardware or unreadable attributes: every
failure is logged and reported as a False return or a sentinel value.

Example usage:
    from dpumon.collectors import DpuCollector

    collector = DpuCollector()
    if collector.init():
        while running:
            collector.collect()
            draw(collector.snapshot())
            time.sleep(1.0)
    collector.shutdown()
"""

import copy
import logging
import time
from pathlib import Path
from typing import Any

from dpumon.configs import Config, simulation_forced_by_env
from dpumon.hardware.attributes import attribute_readable, read_int, read_mem_total, read_part_number
from dpumon.hardware.ranks import (
    DPU_RANK_ROOT,
    classify_driver,
    list_rank_paths,
    rank_root_present,
    resolve_driver,
)
from dpumon.schema import RUNTIME_METRIC_FILES, HardwareKind, Rank, RankMetrics

from .base import CollectorBase, CollectorExport

LOGGER = logging.getLogger(__name__)


class DpuCollector(CollectorBase):
    """Collector for UPMEM DPU ranks read from sysfs.

    Attributes:
        root: Rank class directory scanned by init()
        runtime_metrics: Check for and read runtime metric files
        _initialized: Module initialized flag
        _device_count: Number of ranks found by the last init()
        _hardware_kind: Kind of the attached ranks
        _ranks: Rank registry, aligned with _rank_paths
        _rank_paths: Rank directories in discovery order
        _unreadable: Runtime attribute paths already reported as unreadable
    """

    def __init__(
        self,
        root: str | Path = DPU_RANK_ROOT,
        simulation: bool = False,
        runtime_metrics: bool = True,
        config: dict[str, Any] | None = None,
        name: str = "DpuCollector",
    ):
        """Initialize the collector.

        Args:
            root: Rank class directory
            simulation: Force simulation mode; init() then never touches sysfs
            runtime_metrics: Read runtime metrics on collect()
            config: Optional configuration dictionary recorded in exports
            name: Name for this collector instance
        """
        super().__init__(name, config)
        self.root = Path(root)
        self.runtime_metrics = runtime_metrics

        self._initialized = False
        self._device_count = 0
        self._hardware_kind = HardwareKind.UNKNOWN
        self._ranks: list[Rank] = []
        self._rank_paths: list[Path] = []
        self._unreadable: set[Path] = set()

        if simulation or simulation_forced_by_env():
            self._hardware_kind = HardwareKind.SIMULATED

    @classmethod
    def from_config(cls, config: Config) -> "DpuCollector":
        """Build a collector from a validated Config."""
        return cls(
            root=config.get("dpu.root", DPU_RANK_ROOT),
            simulation=bool(config.get("dpu.simulation", False)),
            runtime_metrics=bool(config.get("collection.runtime_metrics", True)),
            config=config.to_dict(),
        )

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def device_count(self) -> int:
        return self._device_count

    @property
    def hardware_kind(self) -> HardwareKind:
        return self._hardware_kind

    @property
    def ranks(self) -> list[Rank]:
        """Copy of the rank registry."""
        return self.snapshot()

    def snapshot(self) -> list[Rank]:
        """Return deep copies of the registered ranks, in discovery order."""
        return [copy.deepcopy(rank) for rank in self._ranks]

    def force_simulation(self) -> bool:
        """Force simulation mode for the next init().

        Returns:
            False if the collector is already initialized, True otherwise
        """
        if self._initialized:
            return False
        self._hardware_kind = HardwareKind.SIMULATED
        return True

    def init(self) -> bool:
        """Discover ranks, classify the hardware and read static attributes.

        Returns:
            True if at least one rank was found and registered. False when
            already initialized, when the DPU module is not loaded, in
            simulation mode, or when no usable rank exists (the collector is
            then initialized with zero devices).
        """
        if self._initialized:
            return False

        if not rank_root_present(self.root):
            LOGGER.info("DPU module is not loaded")
            return False

        if self._hardware_kind is HardwareKind.SIMULATED:
            LOGGER.info("DPU module is in simulation mode")
            return False

        self._hardware_kind = HardwareKind.UNKNOWN
        self._ranks = []
        self._rank_paths = []
        self._device_count = 0
        self._unreadable.clear()

        try:
            rank_paths = list_rank_paths(self.root)
        except OSError as e:
            LOGGER.warning("Failed to list %s: %s", self.root, e)
            rank_paths = []

        if not rank_paths:
            LOGGER.info("No actual hardware present")
            self._initialized = True
            return False

        driver = resolve_driver(rank_paths)
        if driver is None:
            LOGGER.info("No actual hardware present")
            self._initialized = True
            return False

        self._hardware_kind = classify_driver(driver.name)
        self._rank_paths = rank_paths
        self._ranks = [Rank(name=path.name, path=path) for path in rank_paths]
        self._device_count = len(self._ranks)
        self._initialized = True
        LOGGER.info(
            "Found %d DPU rank(s), driver %s, hardware kind %s",
            self._device_count,
            driver.name,
            self._hardware_kind.value,
        )
        self.collect_static()
        return True

    def shutdown(self) -> bool:
        """Clear the initialized flag.

        Returns:
            False if not initialized, True otherwise
        """
        if not self._initialized:
            return False
        self._initialized = False
        return True

    def collect(self) -> bool:
        """Run one monitoring tick."""
        return self.collect_runtime()

    def collect_static(self) -> bool:
        """Read part number and MRAM size of every rank and check which runtime files read.

        The Nth rank directory fills the Nth registry entry.

        Returns:
            False if not initialized, True otherwise
        """
        if not self._initialized:
            return False

        for rank, rank_path in zip(self._ranks, self._rank_paths):
            rank.part_number = read_part_number(rank_path)

        for rank, rank_path in zip(self._ranks, self._rank_paths):
            rank.mem_total = read_mem_total(rank_path)

        for rank, rank_path in zip(self._ranks, self._rank_paths):
            rank.supported_functions = {
                metric: self.runtime_metrics and attribute_readable(rank_path / filename)
                for metric, filename in RUNTIME_METRIC_FILES.items()
            }
        return True

    def collect_runtime(self) -> bool:
        """Refresh runtime metrics of every rank.

        All ranks are read before any registry entry is replaced.

        Returns:
            False if not initialized or no rank is registered, True otherwise
        """
        if not self._initialized or not self._ranks:
            return False

        now = time.time()
        fresh = [self._read_runtime(rank, rank_path, now) for rank, rank_path in zip(self._ranks, self._rank_paths)]
        for rank, metrics in zip(self._ranks, fresh):
            rank.metrics = metrics
        return True

    def _read_runtime(self, rank: Rank, rank_path: Path, timestamp: float) -> RankMetrics:
        values: dict[str, int | None] = {}
        for metric, filename in RUNTIME_METRIC_FILES.items():
            if not rank.supported_functions.get(metric, False):
                continue
            path = rank_path / filename
            value = read_int(path)
            if value is None:
                # Report once until the attribute reads again
                if path not in self._unreadable:
                    LOGGER.warning("Failed to read %s", path)
                    self._unreadable.add(path)
            else:
                self._unreadable.discard(path)
            values[metric] = value
        return RankMetrics(timestamp=timestamp, **values)

    def start(self) -> bool:
        """Initialize the collector for a sampling session.

        Returns:
            Result of init(); False without side effects if already running
        """
        if self._is_running:
            return False
        found = self.init()
        self._is_running = self._initialized
        if self._is_running:
            self._start_time = time.time()
            self._end_time = None
            self._samples.clear()
        return found

    def sample(self, timestamp: float) -> dict[str, Any] | None:
        """Collect runtime metrics and store them as one sample.

        Args:
            timestamp: Unix timestamp for this sample

        Returns:
            Flat dict keyed "<rank>.<metric>", or None when nothing was collected
        """
        if not self.collect():
            return None

        metrics: dict[str, Any] = {}
        for rank in self._ranks:
            for metric in RUNTIME_METRIC_FILES:
                metrics[f"{rank.name}.{metric}"] = getattr(rank.metrics, metric)

        metadata = {
            "sample_index": len(self._samples),
            "device_count": self._device_count,
            "hardware_kind": self._hardware_kind.value,
        }
        self._store_sample(timestamp, metrics, metadata)
        return metrics

    def stop(self) -> None:
        """Shut the collector down. Safe to call multiple times."""
        self.shutdown()
        if self._is_running:
            self._is_running = False
            self._end_time = time.time()

    def export(self) -> CollectorExport:
        """Export samples together with the current rank inventory."""
        return CollectorExport(
            collector_name=self.name,
            start_time=self._start_time,
            end_time=self._end_time,
            samples=list(self._samples),
            summary={
                "initialized": self._initialized,
                "device_count": self._device_count,
                "hardware_kind": self._hardware_kind.value,
                "ranks": [rank.to_dict() for rank in self._ranks],
            },
            config={
                **self._config,
                "root": str(self.root),
                "runtime_metrics": self.runtime_metrics,
            },
        )


__all__ = ["DpuCollector"]
