# array_backend/utils.py
"""
Utility functions for argument canonicalization used by probstat.

The descriptive accumulators accept any array-like of integers and the
distribution methods accept probabilities as Python or numpy scalars. The
helpers here convert those inputs to canonical forms (1-D `int64` arrays,
Python `float` / `int` scalars) and validate the domain the numeric code
relies on, so the arithmetic modules can assume clean inputs.

All functions that return arrays accept `copy: bool = True`. When `copy=True`
the returned array is guaranteed to be a different object from the input.
"""

from __future__ import annotations

import math

import numpy as np
from typing import Any

from ..custom_types import Array, ArrayLike, INT_MIN, INT_MAX


def _as_array(x: Any) -> Array:
    try:
        return np.asarray(x)
    except Exception as e:
        raise TypeError(
            f"Could not convert input to array.\n"
            f"Input type: {type(x).__name__}\n"
            f"Input value: {repr(x)}\n"
            f"Original error: {e}"
        ) from e

def _is_numpy_scalar(x: Any) -> bool:
    """Return true if object is a numpy generic or Python scalar"""
    return np.isscalar(x) or isinstance(x, np.generic)


def _ensure_real_scalar(x: Any) -> float | int:
    """
    Return a Python scalar for inputs that contain a single real value.

    Accepts:
      - Python scalars (int, float)
      - numpy scalar types (np.float64(...), np.int32(...))
      - 0-D numpy arrays (shape == ())

    Raises:
      ValueError if input contains more than one element or is complex.
    """
    if _is_numpy_scalar(x):
        if np.iscomplexobj(x):
            raise ValueError(f"_ensure_real_scalar: input is complex-valued: {x!r}")
        if isinstance(x, np.generic):
            return x.item()
        return x

    arr = _as_array(x)
    if arr.size != 1:
        raise ValueError(f"_ensure_real_scalar: input must contain exactly one element; got size={arr.size}, shape={arr.shape}")
    if np.iscomplexobj(arr):
        raise ValueError(f"_ensure_real_scalar: input is complex-valued (shape={arr.shape}).")
    return arr.item()


def _ensure_probability(p: Any, name: str = "p") -> float:
    """Return `p` as a Python float, requiring 0 <= p <= 1.

    NaN fails the range check and is rejected as well.
    """
    value = float(_ensure_real_scalar(p))
    if not (0.0 <= value <= 1.0):
        raise ValueError(f"{name} must be in [0, 1]. Got {value!r}.")
    return value


def _ensure_vector(x: ArrayLike, *, length: int | None = None, copy: bool = True) -> Array:
    """
    Ensure input is returned as a 1-D vector (canonical shape (n,)).

    Accepts:
      - 1D arrays -> (n,)
      - 2D arrays shaped (n,1) or (1,n) -> raveled to (n,)
      - 0D scalar -> treated as length-1 vector (1,)

    Raises:
      ValueError for incompatible shapes (ndim > 2 or 2D with both dims >1)
    """
    arr = _as_array(x)

    if arr.ndim == 0:
        out = arr.reshape((1,))
    elif arr.ndim == 1:
        out = arr
    elif arr.ndim == 2:
        num_rows, num_cols = arr.shape
        if num_rows == 1 or num_cols == 1:
            out = np.ravel(arr)
        else:
            raise ValueError(f"_ensure_vector: 2D input has shape {arr.shape}, which is not a vector (expected (n,1) or (1,n)).")
    else:
        raise ValueError(f"_ensure_vector: input has too many dimensions (ndim={arr.ndim}).")

    if length is not None and out.size != length:
        raise ValueError(f"_ensure_vector: required length {length}. Got {out.size}.")

    return out.copy() if copy else out


def _ensure_int_vector(x: ArrayLike, *, copy: bool = True) -> Array:
    """Ensure input is a 1-D int64 vector whose entries fit in a signed 32-bit int.

    Empty input is allowed and returns an array of shape (0,). Floating-point
    input is accepted only when every entry is integral.

    Raises:
      ValueError if an entry is not an integer or lies outside [INT_MIN, INT_MAX].
    """
    v = _ensure_vector(x, copy=copy)
    if v.size == 0:
        return v.astype(np.int64)
    if v.dtype.kind == "b" or v.dtype.kind not in "iuf":
        raise ValueError(f"_ensure_int_vector: expected integer data. Got dtype {v.dtype}.")
    if v.dtype.kind == "f":
        if not np.all(np.isfinite(v)) or np.any(v != np.floor(v)):
            raise ValueError("_ensure_int_vector: floating-point input contains non-integral values.")
    if v.min() < INT_MIN or v.max() > INT_MAX:
        raise ValueError(
            f"_ensure_int_vector: values must lie in [{INT_MIN}, {INT_MAX}]. "
            f"Got range [{v.min()}, {v.max()}]."
        )
    return v.astype(np.int64)


def _ensure_int(x: Any, name: str = "x") -> int:
    """Return `x` as a Python int in the signed 32-bit range."""
    value = _ensure_real_scalar(x)
    if isinstance(value, float):
        if not math.isfinite(value) or value != math.floor(value):
            raise ValueError(f"{name} must be an integer. Got {value!r}.")
        value = int(value)
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"{name} must lie in [{INT_MIN}, {INT_MAX}]. Got {value}.")
    return int(value)
