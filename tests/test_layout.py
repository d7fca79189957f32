import math

import pytest

from moketensor.layout import TensorLayout


def test_strides_pinned_for_three_dims():
    assert TensorLayout((2, 3, 4), 4).strides == (12, 4, 1)


@pytest.mark.parametrize("shape", [(5,), (2, 3), (2, 3, 4), (7, 1, 9, 2)])
def test_size_is_product_of_shape(shape):
    layout = TensorLayout(shape, 8)
    assert layout.size() == math.prod(shape)
    assert layout.nbytes() == layout.size() * 8
    assert layout.rank() == len(shape)
    assert layout.shape == shape


@pytest.mark.parametrize("shape", [(5,), (2, 3), (2, 3, 4), (7, 1, 9, 2)])
def test_strides_are_row_major(shape):
    layout = TensorLayout(shape, 4)
    assert layout.stride(layout.rank() - 1) == 1
    for i in range(layout.rank() - 1):
        assert layout.stride(i) == layout.stride(i + 1) * layout.dim(i + 1)


def test_dim_and_stride_default_to_outermost():
    layout = TensorLayout((6, 5), 2)
    assert layout.dim() == 6
    assert layout.stride() == layout.dim(1)


@pytest.mark.parametrize("shape", [(0,), (0, 5), (5, 0), (3, 0, 2)])
def test_zero_extent_is_empty(shape):
    layout = TensorLayout(shape, 4)
    assert layout.empty() is True
    assert layout.size() == 0


def test_non_zero_layout_is_not_empty():
    assert TensorLayout((1, 1), 4).empty() is False


def test_rejects_empty_shape():
    with pytest.raises(ValueError):
        TensorLayout((), 4)


def test_rejects_negative_dimension():
    with pytest.raises(ValueError):
        TensorLayout((3, -1), 4)


def test_rejects_non_integer_dimension():
    with pytest.raises(TypeError):
        TensorLayout((3, 2.5), 4)


@pytest.mark.parametrize("elem_size", [0, -4])
def test_rejects_bad_element_size(elem_size):
    with pytest.raises(ValueError):
        TensorLayout((3,), elem_size)