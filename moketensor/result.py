"""Accuracy and performance results, with their printed summaries."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from decimal import Decimal
from typing import TextIO


def _format_double(x: float) -> str:
    """Shortest round-trip text of ``x``, choosing fixed or scientific, whichever is shorter."""
    x = float(x)
    if math.isnan(x):
        return "nan"
    if math.isinf(x):
        return "-inf" if x < 0 else "inf"
    if x == 0:
        return "-0" if math.copysign(1.0, x) < 0 else "0"
    sign = "-" if x < 0 else ""
    _, digit_tuple, exp = Decimal(repr(abs(x))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    count = len(digits)
    point = count + exp
    if exp >= 0:
        fixed = digits + "0" * exp
    elif point > 0:
        fixed = f"{digits[:point]}.{digits[point:]}"
    else:
        fixed = "0." + "0" * (-point) + digits
    sci_exp = point - 1
    mantissa = digits[0] + (f".{digits[1:]}" if count > 1 else "")
    sci = f"{mantissa}e{'-' if sci_exp < 0 else '+'}{abs(sci_exp):02d}"
    return sign + (fixed if len(fixed) <= len(sci) else sci)


def _println(out: TextIO, text: str) -> None:
    out.write(text + "\n")


@dataclass
class AccuracyResult:
    """Largest error found by a comparison, where it occurred, and the allowed threshold."""

    threshold: float
    max_error: float
    index: int

    def __bool__(self) -> bool:
        return self.max_error <= self.threshold

    def print(self, out: TextIO | None = None) -> None:
        """Write a summary of the comparison to ``out`` (standard output by default)."""
        out = sys.stdout if out is None else out
        _println(out, f"[ACCU] accuracy comparison {'PASS' if self else 'FAILED'}:")
        if self.max_error == 0:
            _println(out, "[ACCU]     result exactly the same.")
        elif self.max_error <= self.threshold:
            _println(out, "[ACCU]     error not reaches threshold.")
        _println(out, f"[ACCU]     threshold: {_format_double(self.threshold)}")
        _println(out, f"[ACCU]     max error: {_format_double(self.max_error)}")
        _println(out, f"[ACCU]      at index: {self.index}")


@dataclass
class PerformanceResult:
    """Kernel time in microseconds, throughput in GFLOPS and bandwidth in GB/s."""

    kernel_time: float
    compute_force: float
    bandwidth: float

    def print(self, out: TextIO | None = None) -> None:
        """Write a summary of the measurement to ``out`` (standard output by default)."""
        out = sys.stdout if out is None else out
        _println(out, f"[PERF]   kernel_time: {self.kernel_time:.3f}us")
        _println(out, f"[PERF] compute_force: {self.compute_force:.3f}GFLOPS")
        _println(out, f"[PERF]     bandwidth: {self.bandwidth:.3f}GB/s")