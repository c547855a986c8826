#!filepath: gdlogit/observability/instrumentation.py
from __future__ import annotations

import time
from collections import OrderedDict
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict

from gdlogit.utils.logger import logs


@dataclass
class MetricRecorder:
    enabled: bool = True
    metrics: Dict[str, Any] = field(default_factory=dict)

    def record(self, name: str, value: Any):
        if not self.enabled:
            return
        self.metrics[name] = value
        logs.debug(f"[Metric] {name} = {value}")


@dataclass
class Instrumentation:
    """
    Training instrumentation.

    - timer(name): context manager, elapsed seconds go into ``timeline``
      (insertion ordered, a name timed twice keeps the last value)
    - metrics: MetricRecorder for scalar run results
    - nothing here logs on the hot path; report() is the cold path
    """

    enabled: bool = True

    def __post_init__(self):
        self.metrics = MetricRecorder(enabled=self.enabled)
        self.timeline: Dict[str, float] = OrderedDict()

    def timer(self, name: str):
        inst = self

        @contextmanager
        def _ctx():
            if not inst.enabled:
                yield
                return

            start = time.perf_counter()
            try:
                yield
            finally:
                inst.timeline[name] = time.perf_counter() - start

        return _ctx()

    def report(self, title: str):
        logs.info(f"[Timeline] ===== {title} =====")

        total = 0.0
        for name, sec in self.timeline.items():
            logs.info(f"[Timeline] {name:<30} {sec:>8.3f}s")
            total += sec

        logs.info(f"[Timeline] Total{'':<27} {total:>8.3f}s")


class NoOpInstrumentation:
    """Used when instrumentation is disabled or not injected."""

    def __init__(self):
        self.metrics = MetricRecorder(enabled=False)
        self.timeline: Dict[str, float] = {}

    def timer(self, name: str):
        return _NoOpTimer()

    def report(self, title: str):
        pass


class _NoOpTimer:
    def __enter__(self):
        pass

    def __exit__(self, exc_type, exc, tb):
        pass
