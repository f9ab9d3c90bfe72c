# descriptive/int_moments.py
"""
Mean and variance of `int` values from exact integer sums.

Both statistics keep the running sum exactly, and the variance also keeps
the exact sum of squares in a 128-bit accumulator. The sum of squared
deviations is then evaluated without cancellation as

    n * sum(x^2) - sum(x)^2 = n * sum((x - mean)^2)

which is non-negative, so the unsigned subtraction cannot wrap.
"""
from __future__ import annotations

import math

from ..arith import UInt128
from ..arith.int_math import MASK64
from .int_sum import _SignedSum
from .statistic import IntStatistic

__all__ = ["IntMean", "IntVariance"]

# unsigned_multiply takes a 32-bit scalar
_MAX_UNSIGNED_COUNT = 1 << 32


class IntMean(IntStatistic):
    """Arithmetic mean of `int` values. The empty mean is NaN."""

    def __init__(self):
        self._n = 0
        self._sum = _SignedSum()

    def _accept(self, x: int) -> None:
        self._n += 1
        self._sum.add(x)

    def combine(self, other: IntMean) -> IntMean:
        self._check_combine(other)
        self._n += other._n
        self._sum.combine(other._sum)
        return self

    @property
    def n(self) -> int:
        """Number of values."""
        return self._n

    def get_as_double(self) -> float:
        if self._n == 0:
            return math.nan
        # int / int is correctly rounded
        return self._sum.to_int() / self._n


class IntVariance(IntStatistic):
    """
    Variance of `int` values.

    Args:
        biased: if False (default) divide the sum of squared deviations by
            n - 1, otherwise by n.

    The variance of no values is NaN and of a single value is 0.
    """

    def __init__(self, *, biased: bool = False):
        self._n = 0
        self._sum = _SignedSum()
        self._sum_sq = UInt128.create()
        self._biased = bool(biased)

    def _accept(self, x: int) -> None:
        self._n += 1
        self._sum.add(x)
        self._sum_sq.add_positive(x * x)

    def combine(self, other: IntVariance) -> IntVariance:
        self._check_combine(other)
        # sums first; other may be self
        self._sum.combine(other._sum)
        self._sum_sq.add(other._sum_sq)
        self._n += other._n
        return self

    @property
    def n(self) -> int:
        """Number of values."""
        return self._n

    @property
    def biased(self) -> bool:
        return self._biased

    def _sum_of_squared_deviations_n(self) -> float:
        """n times the sum of squared deviations from the mean."""
        n = self._n
        s = self._sum.to_int()
        sq = s * s
        if n < _MAX_UNSIGNED_COUNT:
            # |s| < 2**63, so s^2 < 2**126 and n * sum_sq < 2**126
            dev = self._sum_sq.unsigned_multiply(n).subtract(UInt128(sq >> 64, sq & MASK64))
            return dev.to_double()
        return float(n * self._sum_sq.to_int() - sq)

    def get_as_double(self) -> float:
        n = self._n
        if n == 0:
            return math.nan
        if n == 1:
            return 0.0
        denominator = float(n) * (n if self._biased else n - 1)
        return self._sum_of_squared_deviations_n() / denominator

    def get_standard_deviation(self) -> float:
        """Square root of the variance."""
        return math.sqrt(self.get_as_double())
