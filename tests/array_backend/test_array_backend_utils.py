# tests/array_backend/test_array_backend_utils.py
import math

import numpy as np
import pytest

from probstat import INT_MIN, INT_MAX
from probstat.array_backend import utils as U


def test_ensure_real_scalar_from_python_scalar():
    assert U._ensure_real_scalar(3) == 3
    assert U._ensure_real_scalar(3.5) == 3.5


def test_ensure_real_scalar_from_numpy_scalar_and_0d():
    a = np.float32(2.0)
    assert isinstance(U._ensure_real_scalar(a), float)
    assert U._ensure_real_scalar(np.array(4.0)) == 4.0


@pytest.mark.parametrize(
    "non_scalar_input",
    [[1,2], np.arange(2), np.identity(2)]
)
def test_ensure_real_scalar_rejects_multiple_elements(non_scalar_input):
    with pytest.raises(ValueError):
        U._ensure_real_scalar(non_scalar_input)


def test_ensure_real_scalar_rejects_complex():
    with pytest.raises(ValueError):
        U._ensure_real_scalar(1 + 2j)
    with pytest.raises(ValueError):
        U._ensure_real_scalar(np.array(1 + 0j))


@pytest.mark.parametrize("p", [0, 0.0, 0.25, 1, np.float64(0.5), np.array(0.75)])
def test_ensure_probability_accepts_unit_interval(p):
    out = U._ensure_probability(p)
    assert isinstance(out, float)
    assert out == float(np.asarray(p))


@pytest.mark.parametrize("p", [-1e-300, 1.0000001, math.nan, math.inf])
def test_ensure_probability_rejects(p):
    with pytest.raises(ValueError, match="p must be in"):
        U._ensure_probability(p)


def test_ensure_vector_scalar_and_1d_and_2d():
    assert U._ensure_vector(5).shape == (1,)
    assert U._ensure_vector([1, 2, 3]).shape == (3,)
    assert U._ensure_vector(np.array([[1, 2, 3]]), length=3).shape == (3,)
    assert U._ensure_vector(np.array([[1], [2]])).shape == (2,)


def test_ensure_vector_length_check_and_bad_shapes():
    with pytest.raises(ValueError):
        U._ensure_vector([1, 2, 3], length=2)
    with pytest.raises(ValueError):
        U._ensure_vector(np.ones((2, 2)))
    with pytest.raises(ValueError):
        U._ensure_vector(np.ones((1, 1, 1)))


def test_ensure_vector_copy():
    x = np.arange(3)
    assert U._ensure_vector(x) is not x
    assert U._ensure_vector(x, copy=False) is x


def test_ensure_int_vector():
    v = U._ensure_int_vector([INT_MIN, 0, INT_MAX])
    assert v.dtype == np.int64
    np.testing.assert_array_equal(v, [INT_MIN, 0, INT_MAX])
    assert U._ensure_int_vector([]).shape == (0,)
    assert U._ensure_int_vector(np.array([2.0, -3.0])).tolist() == [2, -3]


@pytest.mark.parametrize(
    "bad",
    [[INT_MAX + 1], [INT_MIN - 1], [0.5], [np.nan], [True, False], ["1"]],
)
def test_ensure_int_vector_rejects(bad):
    with pytest.raises(ValueError):
        U._ensure_int_vector(bad)


def test_ensure_int():
    assert U._ensure_int(np.int32(-7)) == -7
    assert U._ensure_int(3.0) == 3
    with pytest.raises(ValueError):
        U._ensure_int(3.5)
    with pytest.raises(ValueError):
        U._ensure_int(INT_MAX + 1, name="x")
