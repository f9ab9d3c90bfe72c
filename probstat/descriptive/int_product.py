# descriptive/int_product.py
from __future__ import annotations

from .statistic import IntStatistic

__all__ = ["IntProduct"]


class IntProduct(IntStatistic):
    """
    Product of `int` values in floating point. The empty product is 1.

    The product is not computed in extended precision; each multiplication
    rounds, and the result may overflow to +/-inf or underflow to 0.
    """

    def __init__(self):
        self._p = 1.0

    def _accept(self, x: int) -> None:
        self._p *= x

    def combine(self, other: IntProduct) -> IntProduct:
        self._check_combine(other)
        self._p *= other._p
        return self

    def get_as_double(self) -> float:
        return self._p
