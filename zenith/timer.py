"""A simple stopwatch."""

from __future__ import annotations

import time

__all__ = ["Timer"]


class Timer:
    """Measures time since creation or the last reset."""

    def __init__(self):
        self._start = time.perf_counter_ns()

    def reset(self) -> None:
        self._start = time.perf_counter_ns()

    def elapsed_ns(self) -> int:
        return time.perf_counter_ns() - self._start

    def elapsed_ms(self) -> float:
        return self.elapsed_ns() / 1000.0 / 1000.0

    def elapsed_s(self) -> float:
        return self.elapsed_ms() / 1000.0