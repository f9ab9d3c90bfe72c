# descriptive/int_sum.py
from __future__ import annotations

from ..arith import UInt96, UInt128
from .statistic import IntStatistic

__all__ = ["IntSum", "IntSumOfSquares"]


class _SignedSum:
    """
    Exact sum of `int` values.

    Non-negative values and the magnitudes of negative values are summed into
    separate 96-bit accumulators, which hold up to 2**64 terms of at most
    2**31 without overflow.
    """

    __slots__ = ("_pos", "_neg")

    def __init__(self):
        self._pos = UInt96.create()
        self._neg = UInt96.create()

    def add(self, x: int) -> None:
        if x >= 0:
            self._pos.add_positive(x)
        else:
            self._neg.add_positive(-x)

    def combine(self, other: _SignedSum) -> None:
        self._pos.add(other._pos)
        self._neg.add(other._neg)

    def to_int(self) -> int:
        return self._pos.to_int() - self._neg.to_int()


class IntSum(IntStatistic):
    """Exact sum of `int` values. The empty sum is 0."""

    def __init__(self):
        self._sum = _SignedSum()

    def _accept(self, x: int) -> None:
        self._sum.add(x)

    def combine(self, other: IntSum) -> IntSum:
        self._check_combine(other)
        self._sum.combine(other._sum)
        return self

    def get_as_int(self) -> int:
        """The exact sum."""
        return self._sum.to_int()

    def get_as_double(self) -> float:
        return float(self._sum.to_int())


class IntSumOfSquares(IntStatistic):
    """
    Exact sum of the squares of `int` values. The empty sum is 0.

    Each square is at most 2**62, so the 128-bit accumulator cannot overflow
    for fewer than 2**66 values.
    """

    def __init__(self):
        self._s = UInt128.create()

    def _accept(self, x: int) -> None:
        self._s.add_positive(x * x)

    def combine(self, other: IntSumOfSquares) -> IntSumOfSquares:
        self._check_combine(other)
        self._s.add(other._s)
        return self

    def get_as_int(self) -> int:
        """The exact sum of squares."""
        return self._s.to_int()

    def get_as_double(self) -> float:
        """The sum of squares rounded once to the nearest float."""
        return self._s.to_double()
