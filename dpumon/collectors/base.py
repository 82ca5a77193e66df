"""Base collector interface for dpumon.

A collector owns one hardware source. The host monitor calls ``start()``
once, ``sample()`` on every tick, then ``stop()``, and reads everything back
with ``export()``.

Example usage:
    class MyCollector(CollectorBase):
        def start(self):
            return True  # hardware found

        def sample(self, timestamp):
            return {"dpu_rank0.usage_count": 1}

        def stop(self):
            pass

        def export(self):
            return CollectorExport(collector_name=self.name, samples=self._samples)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class CollectorSample:
    """Metrics read on one tick.

    Attributes:
        timestamp: Unix time of the tick
        metrics: Metric name -> value, None for a missing value
        metadata: Tick bookkeeping (sample index, device count, ...)
    """

    timestamp: float
    metrics: dict[str, Any]
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "metrics": self.metrics,
            "metadata": self.metadata,
        }


@dataclass
class CollectorExport:
    """Everything a collector gathered during one session.

    Attributes:
        collector_name: Name of the collector instance
        start_time: Unix time start() succeeded, None if it never did
        end_time: Unix time stop() ended the session
        samples: Samples in tick order
        summary: Device inventory at export time
        config: Settings the collector ran with
    """

    collector_name: str
    start_time: float | None = None
    end_time: float | None = None
    samples: list[CollectorSample] = field(default_factory=list)
    summary: dict[str, Any] = field(default_factory=dict)
    config: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready form, with a sample_count field added."""
        return {
            "collector_name": self.collector_name,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "sample_count": len(self.samples),
            "samples": [s.to_dict() for s in self.samples],
            "summary": self.summary,
            "config": self.config,
        }


class CollectorBase(ABC):
    """Session bookkeeping shared by hardware collectors.

    Subclasses implement the four lifecycle methods; the base keeps the
    sample buffer and the running flag.
    """

    def __init__(self, name: str, config: dict[str, Any] | None = None):
        self.name = name
        self._samples: list[CollectorSample] = []
        self._is_running: bool = False
        self._start_time: float | None = None
        self._end_time: float | None = None
        self._config = config or {}

    @abstractmethod
    def start(self) -> bool:
        """Open a session; False when there is nothing to sample."""

    @abstractmethod
    def sample(self, timestamp: float) -> dict[str, Any] | None:
        """Read one tick; None when nothing was read."""

    @abstractmethod
    def stop(self) -> None:
        """Close the session."""

    @abstractmethod
    def export(self) -> CollectorExport:
        """Return the session's samples and summary."""

    def _store_sample(self, timestamp: float, metrics: dict[str, Any], metadata: dict[str, Any] | None = None) -> None:
        self._samples.append(CollectorSample(timestamp=timestamp, metrics=metrics, metadata=metadata or {}))

    def get_sample_count(self) -> int:
        return len(self._samples)

    def is_running(self) -> bool:
        return self._is_running


__all__ = ["CollectorBase", "CollectorSample", "CollectorExport"]
