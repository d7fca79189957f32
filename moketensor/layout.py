"""Row-major shape and stride bookkeeping for dense tensors."""

from __future__ import annotations

from collections.abc import Iterable


class TensorLayout:
    """Shape, contiguous row-major strides and element size of a tensor."""

    def __init__(self, shape: Iterable[int], elem_size: int) -> None:
        dims = tuple(shape)
        if not dims:
            raise ValueError("a tensor layout needs at least one dimension")
        for d in dims:
            if isinstance(d, bool) or not isinstance(d, int):
                raise TypeError(f"dimensions must be integers, got {d!r}")
            if d < 0:
                raise ValueError(f"dimensions must be non-negative, got {d}")
        if isinstance(elem_size, bool) or not isinstance(elem_size, int) or elem_size <= 0:
            raise ValueError(f"element size must be a positive integer, got {elem_size!r}")

        strides = []
        running = 1
        for d in reversed(dims):
            strides.append(running)
            running *= d
        self._shape = dims
        self._strides = tuple(reversed(strides))
        self._elem_size = elem_size

    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def strides(self) -> tuple[int, ...]:
        return self._strides

    @property
    def elem_size(self) -> int:
        return self._elem_size

    def rank(self) -> int:
        """Number of dimensions."""
        return len(self._shape)

    def size(self) -> int:
        """Number of elements."""
        return self._shape[0] * self._strides[0]

    def nbytes(self) -> int:
        """Number of bytes the elements occupy."""
        return self.size() * self._elem_size

    def dim(self, index: int = 0) -> int:
        """Extent of dimension ``index``."""
        return self._shape[index]

    def stride(self, index: int = 0) -> int:
        """Stride, in elements, of dimension ``index``."""
        return self._strides[index]

    def empty(self) -> bool:
        """True when the layout holds no elements."""
        return self._shape[0] == 0 or self._strides[0] == 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shape={self._shape}, elem_size={self._elem_size})"