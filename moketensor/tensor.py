"""Dense tensors in host and device memory, with views and sub-tensor iterators.

Device tensors live in storage that is not indexable from the host; their
contents are moved with ``load`` and ``store``, as with a memory copy.
"""

from __future__ import annotations

from array import array
from collections.abc import Iterator
from typing import Any

from moketensor.layout import TensorLayout

DEFAULT_TYPECODE = "f"


def _normalize(index: Any, extent: int) -> int:
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"tensor indices must be integers, not {type(index).__name__}")
    if index < 0:
        index += extent
    if not 0 <= index < extent:
        raise IndexError(f"index out of range for dimension of extent {extent}")
    return index


def _subscript(storage: array, offset: int, shape: tuple, strides: tuple, index: Any):
    pos = offset + _normalize(index, shape[0]) * strides[0]
    if len(shape) == 1:
        return storage[pos]
    return TensorIterator(storage, pos, shape[1:], strides[1:])


def _assign(storage: array, offset: int, shape: tuple, strides: tuple, index: Any, value) -> None:
    pos = offset + _normalize(index, shape[0]) * strides[0]
    if len(shape) == 1:
        storage[pos] = value
        return
    sub = TensorIterator(storage, pos, shape[1:], strides[1:])
    items = list(value)
    if len(items) != shape[1]:
        raise ValueError(f"expected {shape[1]} items for sub-tensor, got {len(items)}")
    for j, item in enumerate(items):
        sub[j] = item


def _copy(dest, src, count: int) -> None:
    if dest._storage.typecode != src._storage.typecode:
        raise TypeError(
            f"element types differ: {src._storage.typecode!r} -> {dest._storage.typecode!r}"
        )
    if src.size() < count:
        raise ValueError(f"source holds {src.size()} elements, {count} needed")
    if dest.size() < count:
        raise ValueError(f"destination holds {dest.size()} elements, {count} needed")
    dest._storage[dest._offset:dest._offset + count] = src._storage[
        src._offset:src._offset + count
    ]


def _shape_from_args(args: tuple) -> tuple:
    if len(args) == 1 and not isinstance(args[0], int):
        return tuple(args[0])
    return args


class TensorIterator:
    """A sub-tensor: a window into shared storage with its own shape and strides."""

    def __init__(self, storage: array, offset: int, shape, strides) -> None:
        shape = tuple(shape)
        strides = tuple(strides)
        if not shape or len(shape) != len(strides):
            raise ValueError("shape and strides must be non-empty and of equal length")
        self._storage = storage
        self._offset = offset
        self._shape = shape
        self._strides = strides

    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def strides(self) -> tuple[int, ...]:
        return self._strides

    def dim(self, index: int = 0) -> int:
        return self._shape[index]

    def stride(self, index: int = 0) -> int:
        return self._strides[index]

    def size(self) -> int:
        """Number of elements covered."""
        return self._shape[0] * self._strides[0]

    def nbytes(self) -> int:
        return self.size() * self._storage.itemsize

    def values(self) -> list:
        """The covered elements, flattened."""
        return list(self._storage[self._offset:self._offset + self.size()])

    def __len__(self) -> int:
        return self._shape[0]

    def __iter__(self) -> Iterator:
        return (self[i] for i in range(self._shape[0]))

    def __getitem__(self, index):
        return _subscript(self._storage, self._offset, self._shape, self._strides, index)

    def __setitem__(self, index, value) -> None:
        _assign(self._storage, self._offset, self._shape, self._strides, index, value)

    def __repr__(self) -> str:
        return f"TensorIterator(shape={self._shape}, offset={self._offset})"


class TensorView(TensorLayout):
    """A non-owning, indexable tensor over existing storage."""

    def __init__(self, storage: array, shape, offset: int = 0) -> None:
        super().__init__(shape, storage.itemsize)
        if offset < 0 or offset + self.size() > len(storage):
            raise ValueError("view does not fit inside its storage")
        self._storage = storage
        self._offset = offset

    @property
    def typecode(self) -> str:
        return self._storage.typecode

    def __len__(self) -> int:
        return self.dim(0)

    def __iter__(self) -> Iterator:
        return (self[i] for i in range(self.dim(0)))

    def __getitem__(self, index):
        return _subscript(self._storage, self._offset, self.shape, self.strides, index)

    def __setitem__(self, index, value) -> None:
        _assign(self._storage, self._offset, self.shape, self.strides, index, value)

    def load(self, other) -> None:
        """Copy this view's worth of elements from ``other`` into the view."""
        _copy(self, other, self.size())

    def store(self, other) -> None:
        """Copy the view's elements into ``other``."""
        _copy(other, self, self.size())

    def values(self) -> list:
        """The view's elements, flattened."""
        return list(self._storage[self._offset:self._offset + self.size()])


class HostTensor(TensorLayout):
    """A tensor in host memory that owns zero-initialised storage and is indexable directly."""

    def __init__(self, *args, typecode: str = DEFAULT_TYPECODE) -> None:
        super().__init__(_shape_from_args(args), array(typecode).itemsize)
        self._storage = array(typecode, bytes(self.nbytes()))
        self._offset = 0

    @property
    def typecode(self) -> str:
        return self._storage.typecode

    def __len__(self) -> int:
        return self.dim(0)

    def __iter__(self) -> Iterator:
        return (self[i] for i in range(self.dim(0)))

    def __getitem__(self, index):
        return _subscript(self._storage, 0, self.shape, self.strides, index)

    def __setitem__(self, index, value) -> None:
        _assign(self._storage, 0, self.shape, self.strides, index, value)

    def load(self, other) -> None:
        """Fill this tensor from ``other``, which must hold at least as many elements."""
        _copy(self, other, self.size())

    def store(self, other) -> None:
        """Copy this tensor's elements into ``other``."""
        _copy(other, self, self.size())

    def view(self) -> TensorView:
        """A view sharing this tensor's storage."""
        return TensorView(self._storage, self.shape, 0)

    def values(self) -> list:
        """All elements, flattened."""
        return list(self._storage)


class DeviceTensor(TensorLayout):
    """A tensor in device memory; reach its contents through ``load``, ``store`` or ``view``."""

    def __init__(self, *args, typecode: str = DEFAULT_TYPECODE) -> None:
        super().__init__(_shape_from_args(args), array(typecode).itemsize)
        self._storage = array(typecode, bytes(self.nbytes()))
        self._offset = 0

    @property
    def typecode(self) -> str:
        return self._storage.typecode

    def load(self, other) -> None:
        """Fill this tensor from ``other``, which must hold at least as many elements."""
        _copy(self, other, self.size())

    def store(self, other) -> None:
        """Copy this tensor's elements into ``other``."""
        _copy(other, self, self.size())

    def view(self) -> TensorView:
        """A view sharing this tensor's storage."""
        return TensorView(self._storage, self.shape, 0)


def host_array(length: int, typecode: str = DEFAULT_TYPECODE) -> HostTensor:
    """A one-dimensional host tensor of ``length`` zeros."""
    return HostTensor(length, typecode=typecode)


def device_array(length: int, typecode: str = DEFAULT_TYPECODE) -> DeviceTensor:
    """A one-dimensional device tensor of ``length`` zeros."""
    return DeviceTensor(length, typecode=typecode)