# custom_types.py
"""
Type aliases and integer-domain constants shared across probstat.

We generally following the conventions:
- Annotate function input with `ArrayLike`
- Annotate function output with `Array`

Discrete distributions are defined over 32-bit signed integers. A distribution
with an unbounded support reports `INT_MIN` / `INT_MAX` for the open side.
"""
from __future__ import annotations
from typing import TypeAlias
from numpy.random import Generator as NumpyRNG

from numpy.typing import (
    NDArray as NumpyArray,
    ArrayLike as NumpyArrayLike
)

from numpy import (
    floating as NumpyFloating
)

Array = NumpyArray
ArrayLike: TypeAlias = NumpyArrayLike
Float: TypeAlias = NumpyFloating
PRNG: TypeAlias = NumpyRNG

INT_MIN: int = -(2 ** 31)
INT_MAX: int = 2 ** 31 - 1
