"""Wall-clock timing of host work and derived throughput figures."""

from __future__ import annotations

import math
import time

from moketensor.result import PerformanceResult


def _per_us_scaled(amount: float, time_us: float) -> float:
    if time_us == 0:
        return math.nan if amount == 0 else math.inf
    return amount / time_us * 1e-3


class HostProfiler:
    """Measures elapsed time between ``start`` and ``finalize``; usable as a context manager."""

    def __init__(self) -> None:
        self._begin: int | None = None
        self._end: int | None = None

    def start(self) -> None:
        """Record the start time."""
        self._begin = time.perf_counter_ns()
        self._end = None

    def finalize(self) -> None:
        """Record the end time."""
        if self._begin is None:
            raise RuntimeError("profiler was finalized before it was started")
        self._end = time.perf_counter_ns()

    def get(self, ops: int, io_bytes: int, loops: int = 1) -> PerformanceResult:
        """Time per loop in microseconds, with GFLOPS and GB/s for the given work."""
        if self._begin is None or self._end is None:
            raise RuntimeError("profiler has no complete measurement")
        if loops <= 0:
            raise ValueError(f"loops must be positive, got {loops}")
        time_us = (self._end - self._begin) * 1e-3
        if loops != 1:
            time_us /= loops
        return PerformanceResult(
            kernel_time=time_us,
            compute_force=_per_us_scaled(ops, time_us),
            bandwidth=_per_us_scaled(io_bytes, time_us),
        )

    def __enter__(self) -> HostProfiler:
        self.start()
        return self

    def __exit__(self, *args) -> None:
        self.finalize()