"""Timing helpers for retrieval and API latency reporting."""

from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass(slots=True)
class Timer:
    """Wall-clock stopwatch for a `with` block, reported in milliseconds."""

    elapsed_ms: float = 0.0
    _started_ns: int = field(default=0, repr=False)

    def __enter__(self) -> Timer:
        self._started_ns = time.perf_counter_ns()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.elapsed_ms = (time.perf_counter_ns() - self._started_ns) / 1_000_000
