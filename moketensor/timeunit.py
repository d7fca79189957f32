"""Time units and conversion between them."""

from __future__ import annotations

from enum import IntEnum


class TimeUnit(IntEnum):
    """A time unit, valued as the number of its ticks in one second."""

    SEC = 1
    MSEC = 1_000
    USEC = 1_000_000
    NSEC = 1_000_000_000


def time_convert(value: float, src: TimeUnit, dest: TimeUnit) -> float:
    """Convert ``value`` expressed in ``src`` units into ``dest`` units."""
    src = TimeUnit(src)
    dest = TimeUnit(dest)
    if dest == src:
        return value
    if dest > src:
        return value * (dest // src)
    return value / (src // dest)