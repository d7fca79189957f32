"""Reproducible pseudo-random filling of host tensors."""

from __future__ import annotations

from array import array
from itertools import product

from moketensor.tensor import DEFAULT_TYPECODE, HostTensor

RAND_MAX = 2147483647
_MASK32 = 0xFFFFFFFF
_INTEGER_TYPECODES = frozenset("bBhHiIlLqQ")


def _step(state: int) -> int:
    return (state * 1103515245 + 12345) & _MASK32


class HostRandomGenerator:
    """A seeded generator of doubles in [0, 1], scaled on request."""

    def __init__(self, seed: int = 0) -> None:
        self._state = seed & _MASK32

    def _rand(self) -> int:
        state = _step(self._state)
        value = (state >> 16) % 2048
        state = _step(state)
        value = (value << 10) ^ ((state >> 16) % 1024)
        state = _step(state)
        value = (value << 10) ^ ((state >> 16) % 1024)
        self._state = state
        return value

    def one(self, *args: float) -> float:
        """One value: in [0, 1] with no bounds, [0, max] with one, [min, max] with two."""
        if not args:
            return self._rand() / float(RAND_MAX)
        if len(args) == 1:
            return self.one() * args[0]
        if len(args) == 2:
            low, high = args
            return low + self.one(high - low)
        raise TypeError(f"one() takes at most 2 bounds, got {len(args)}")

    def fill(self, tensor, *args: float) -> None:
        """Fill a host tensor, view, array or list in place with generated values."""
        typecode = getattr(tensor, "typecode", None)
        convert = int if typecode in _INTEGER_TYPECODES else (lambda v: v)

        if isinstance(tensor, (list, array)):
            tensor[:] = type(tensor)(
                *((typecode,) if isinstance(tensor, array) else ()),
                [convert(self.one(*args)) for _ in range(len(tensor))],
            )
            return

        for idx in product(*(range(extent) for extent in tensor.shape)):
            target = tensor
            for i in idx[:-1]:
                target = target[i]
            target[idx[-1]] = convert(self.one(*args))

    def make_tensor(
        self, low: float, high: float, *args: int, typecode: str = DEFAULT_TYPECODE
    ) -> HostTensor:
        """A new host tensor of the given shape, filled with values in [low, high]."""
        tensor = HostTensor(*args, typecode=typecode)
        self.fill(tensor, low, high)
        return tensor