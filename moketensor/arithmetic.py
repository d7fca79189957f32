"""Integer helpers for sizes, alignment and launch-grid dimensions."""

from __future__ import annotations

from dataclasses import dataclass


def _require_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, not {type(value).__name__}")
    return value


def is_pow2(n: int) -> bool:
    """Return True if ``n`` has at most one bit set (zero counts as a power of two)."""
    _require_int("n", n)
    return (n & (n - 1)) == 0


def ceil_div(m, n):
    """Return ceil(m / n); works on integers and element-wise on ``Dim3``."""
    if isinstance(m, Dim3) and isinstance(n, Dim3):
        return Dim3(ceil_div(m.x, n.x), ceil_div(m.y, n.y), ceil_div(m.z, n.z))
    _require_int("m", m)
    _require_int("n", n)
    return (m + n - 1) // n


def pad_down(size: int, align: int) -> int:
    """Round ``size`` down to a multiple of ``align``."""
    _require_int("size", size)
    _require_int("align", align)
    return size // align * align


def pad_up(size: int, align: int) -> int:
    """Round ``size`` up to a multiple of ``align``."""
    _require_int("size", size)
    _require_int("align", align)
    return (size + align - 1) // align * align


def _require_pow2_align(align: int) -> int:
    _require_int("align", align)
    if align <= 0 or not is_pow2(align):
        raise ValueError(f"alignment must be a positive power of two, got {align}")
    return align


def pad_down_pow2(size: int, align: int) -> int:
    """Round ``size`` down to ``align``, which must be a power of two."""
    _require_int("size", size)
    _require_pow2_align(align)
    return size & ~(align - 1)


def pad_up_pow2(size: int, align: int) -> int:
    """Round ``size`` up to ``align``, which must be a power of two."""
    _require_int("size", size)
    _require_pow2_align(align)
    return (size + align - 1) & ~(align - 1)


@dataclass(frozen=True)
class Dim3:
    """Three-component grid or block dimension; unset components default to 1."""

    x: int = 1
    y: int = 1
    z: int = 1

    def __add__(self, other: Dim3) -> Dim3:
        if not isinstance(other, Dim3):
            return NotImplemented
        return Dim3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __mul__(self, other: Dim3) -> Dim3:
        if not isinstance(other, Dim3):
            return NotImplemented
        return Dim3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __floordiv__(self, other: Dim3) -> Dim3:
        if not isinstance(other, Dim3):
            return NotImplemented
        return Dim3(self.x // other.x, self.y // other.y, self.z // other.z)