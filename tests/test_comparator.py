import math

import pytest

from moketensor.comparator import AbsoluteErrorComparator, RelativeErrorComparator
from moketensor.tensor import host_array


def test_default_thresholds():
    assert AbsoluteErrorComparator().threshold == 1e-6
    assert RelativeErrorComparator().threshold == 1e-6


@pytest.mark.parametrize("cls", [AbsoluteErrorComparator, RelativeErrorComparator])
def test_identical_inputs_are_exact(cls):
    data = [1.0, -2.0, 3.5]
    outcome = cls()(data, list(data))
    assert outcome.max_error == 0
    assert outcome.index == 0
    assert bool(outcome)


def test_absolute_finds_largest_difference():
    outcome = AbsoluteErrorComparator(0.1)([1.0, 2.0, 3.0], [1.0, 2.5, 3.25])
    assert outcome.max_error == 0.5
    assert outcome.index == 1
    assert not bool(outcome)
    assert outcome.threshold == 0.1


def test_absolute_first_index_wins_on_tie():
    outcome = AbsoluteErrorComparator()([1.0, 5.0, 9.0], [2.0, 4.0, 8.0])
    assert outcome.index == 0


def test_relative_scales_by_baseline():
    outcome = RelativeErrorComparator(1.0)([11.0, 2.0], [10.0, 1.0])
    assert outcome.index == 1
    assert outcome.max_error == 1.0
    assert bool(outcome)


def test_relative_zero_baseline_with_difference_is_infinite():
    outcome = RelativeErrorComparator()([0.0, 1.0], [0.0, 0.0])
    assert math.isinf(outcome.max_error)
    assert outcome.index == 1
    assert not bool(outcome)


def test_relative_zero_over_zero_is_ignored():
    outcome = RelativeErrorComparator()([0.0, 4.0], [0.0, 4.0])
    assert outcome.max_error == 0
    assert bool(outcome)


def test_accepts_host_tensor_values():
    a = host_array(3)
    b = host_array(3)
    a[2] = 1.0
    outcome = AbsoluteErrorComparator()(a.values(), b.values())
    assert outcome.index == 2


@pytest.mark.parametrize("cls", [AbsoluteErrorComparator, RelativeErrorComparator])
def test_length_mismatch_raises(cls):
    with pytest.raises(ValueError):
        cls()([1.0, 2.0], [1.0])