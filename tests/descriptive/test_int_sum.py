# tests/descriptive/test_int_sum.py
import numpy as np
import pytest

from probstat import INT_MIN, INT_MAX
from probstat.descriptive import IntSum, IntSumOfSquares


def test_sum_of_squares_scenario(sequence):
    s = IntSumOfSquares.of(sequence)
    assert s.get_as_int() == 1422
    assert s.get_as_double() == 1422.0
    assert float(s) == 1422.0


def test_empty_sums_are_zero():
    assert IntSumOfSquares.create().get_as_int() == 0
    assert IntSumOfSquares.create().get_as_double() == 0.0
    assert IntSum.create().get_as_int() == 0


def test_accept_matches_of(sequence):
    s = IntSumOfSquares.create()
    for x in sequence:
        s.accept(x)
    assert s.get_as_int() == IntSumOfSquares.of(sequence).get_as_int()


def test_sum_of_squares_extreme_values():
    values = [INT_MIN, INT_MAX] * 1000
    expected = sum(v * v for v in values)
    s = IntSumOfSquares.of(values)
    assert s.get_as_int() == expected
    assert s.get_as_double() == float(expected)


def test_sum_of_squares_random(rng):
    values = rng.integers(INT_MIN, INT_MAX, size=5000, endpoint=True)
    expected = sum(int(v) * int(v) for v in values)
    s = IntSumOfSquares.of(values)
    assert s.get_as_int() == expected
    assert s.get_as_double() == float(expected)


def test_combine_partitions(rng):
    values = rng.integers(INT_MIN, INT_MAX, size=999, endpoint=True)
    whole = IntSumOfSquares.of(values)
    parts = [IntSumOfSquares.of(chunk) for chunk in np.array_split(values, 4)]
    combined = IntSumOfSquares.create()
    for part in reversed(parts):
        combined.combine(part)
    assert combined.get_as_int() == whole.get_as_int()


def test_combine_with_self_doubles(sequence):
    s = IntSumOfSquares.of(sequence)
    assert s.combine(s) is s
    assert s.get_as_int() == 2 * 1422


def test_combine_rejects_other_statistic(sequence):
    with pytest.raises(TypeError):
        IntSumOfSquares.of(sequence).combine(IntSum.of(sequence))


def test_int_sum_exact(rng):
    values = rng.integers(INT_MIN, INT_MAX, size=5000, endpoint=True)
    s = IntSum.of(values)
    assert s.get_as_int() == sum(int(v) for v in values)
    assert s.get_as_double() == float(sum(int(v) for v in values))


def test_int_sum_negative_and_combine_with_self():
    s = IntSum.of([INT_MIN, INT_MIN, 3])
    assert s.get_as_int() == 2 * INT_MIN + 3
    s.combine(s)
    assert s.get_as_int() == 2 * (2 * INT_MIN + 3)


@pytest.mark.parametrize("bad", [[INT_MAX + 1], [INT_MIN - 1], [1.5], ["a"]])
def test_of_rejects_values_outside_int_range(bad):
    with pytest.raises(ValueError):
        IntSumOfSquares.of(bad)


def test_accept_rejects_out_of_range():
    with pytest.raises(ValueError):
        IntSum.create().accept(2 ** 31)


def test_accepts_integral_floats_and_2d_vectors():
    assert IntSumOfSquares.of(np.array([1.0, 2.0, 3.0])).get_as_int() == 14
    assert IntSumOfSquares.of(np.array([[1, 2, 3]])).get_as_int() == 14
