from array import array

import pytest

from moketensor.generator import HostRandomGenerator
from moketensor.tensor import DeviceTensor, HostTensor, host_array


def test_same_seed_same_sequence():
    a = HostRandomGenerator(42)
    b = HostRandomGenerator(42)
    assert [a.one() for _ in range(20)] == [b.one() for _ in range(20)]


def test_default_seed_is_zero():
    a = HostRandomGenerator()
    b = HostRandomGenerator(0)
    assert [a.one() for _ in range(5)] == [b.one() for _ in range(5)]


def test_unit_interval():
    gen = HostRandomGenerator(7)
    values = [gen.one() for _ in range(500)]
    assert all(0.0 <= v <= 1.0 for v in values)
    assert len(set(values)) > 400


def test_bounds():
    gen = HostRandomGenerator(3)
    assert all(0.0 <= gen.one(5.0) <= 5.0 for _ in range(200))
    assert all(-2.0 <= gen.one(-2.0, 3.0) <= 3.0 for _ in range(200))


def test_too_many_bounds():
    with pytest.raises(TypeError):
        HostRandomGenerator().one(1.0, 2.0, 3.0)


def test_fill_host_array_matches_sequence():
    arr = host_array(16, "d")
    HostRandomGenerator(9).fill(arr)
    ref = HostRandomGenerator(9)
    assert arr.values() == [ref.one() for _ in range(16)]


def test_fill_list_and_array_in_place():
    data = [0.0] * 8
    HostRandomGenerator(1).fill(data, 10.0, 20.0)
    assert len(data) == 8
    assert all(10.0 <= v <= 20.0 for v in data)

    buf = array("d", [0.0] * 8)
    HostRandomGenerator(1).fill(buf, 10.0, 20.0)
    assert list(buf) == data


def test_fill_multidimensional_row_major():
    tensor = HostTensor(2, 3, typecode="d")
    HostRandomGenerator(5).fill(tensor)
    flat = [0.0] * 6
    HostRandomGenerator(5).fill(flat)
    assert tensor.values() == flat


def test_fill_integer_tensor_truncates():
    tensor = HostTensor(50, typecode="i")
    HostRandomGenerator(2).fill(tensor, 0, 10)
    assert all(0 <= v <= 10 for v in tensor.values())
    assert all(isinstance(v, int) for v in tensor.values())


def test_fill_device_tensor_rejected():
    with pytest.raises(TypeError):
        HostRandomGenerator().fill(DeviceTensor(4))


def test_make_tensor():
    tensor = HostRandomGenerator(11).make_tensor(-1.0, 1.0, 4, 5, typecode="d")
    assert tensor.shape == (4, 5)
    assert tensor.size() == 20
    assert all(-1.0 <= v <= 1.0 for v in tensor.values())
    again = HostRandomGenerator(11).make_tensor(-1.0, 1.0, 4, 5, typecode="d")
    assert again.values() == tensor.values()