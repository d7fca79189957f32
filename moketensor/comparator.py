"""Element-wise comparison of a result against a baseline."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

from moketensor.result import AccuracyResult


def _max_error(
    result: Sequence[float],
    baseline: Sequence[float],
    error: Callable[[float, float], float],
) -> tuple[float, int]:
    if len(result) != len(baseline):
        raise ValueError(
            f"result has {len(result)} elements but baseline has {len(baseline)}"
        )
    max_error = 0.0
    index = 0
    for i, (r, b) in enumerate(zip(result, baseline)):
        current = error(r, b)
        if current > max_error:
            max_error = current
            index = i
    return max_error, index


def _relative(r: float, b: float) -> float:
    diff = r - b
    if b == 0:
        return math.nan if diff == 0 or math.isnan(diff) else math.inf
    return abs(diff / float(b))


class AbsoluteErrorComparator:
    """Finds the largest absolute difference between result and baseline."""

    def __init__(self, threshold: float = 1e-6) -> None:
        self.threshold = threshold

    def __call__(self, result: Sequence[float], baseline: Sequence[float]) -> AccuracyResult:
        max_error, index = _max_error(result, baseline, lambda r, b: abs(r - b))
        return AccuracyResult(self.threshold, max_error, index)


class RelativeErrorComparator:
    """Finds the largest difference between result and baseline, relative to the baseline."""

    def __init__(self, threshold: float = 1e-6) -> None:
        self.threshold = threshold

    def __call__(self, result: Sequence[float], baseline: Sequence[float]) -> AccuracyResult:
        max_error, index = _max_error(result, baseline, _relative)
        return AccuracyResult(self.threshold, max_error, index)