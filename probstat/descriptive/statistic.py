# descriptive/statistic.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar

from ..custom_types import ArrayLike
from ..array_backend.utils import _ensure_int, _ensure_int_vector

__all__ = ["IntStatistic"]

S = TypeVar("S", bound="IntStatistic")


class IntStatistic(ABC):
    """
    Abstract base class for statistics accumulated over 32-bit `int` values.

    An instance is a running accumulator: values are added with `accept`, and
    accumulators built on disjoint partitions of the data can be merged with
    `combine`. Instances are not thread safe; give each thread its own
    accumulator and combine the results.

    Values outside the signed 32-bit range are rejected with ValueError.
    """

    @classmethod
    def create(cls: type[S], **kwargs) -> S:
        """Create an empty accumulator."""
        return cls(**kwargs)

    @classmethod
    def of(cls: type[S], values: ArrayLike, **kwargs) -> S:
        """Create an accumulator holding all of `values`."""
        stat = cls(**kwargs)
        for x in _ensure_int_vector(values, copy=False).tolist():
            stat._accept(x)
        return stat

    def accept(self: S, x: int) -> S:
        """Add the value `x`. Returns self."""
        self._accept(_ensure_int(x))
        return self

    @abstractmethod
    def _accept(self, x: int) -> None:
        """Add a validated Python int in [INT_MIN, INT_MAX]."""

    @abstractmethod
    def combine(self: S, other: S) -> S:
        """Add the values accumulated by `other`. `other` may be self. Returns self."""

    @abstractmethod
    def get_as_double(self) -> float:
        """Value of the statistic as a float."""

    def _check_combine(self, other: IntStatistic) -> None:
        if type(other) is not type(self):
            raise TypeError(f"Cannot combine {type(self).__name__} with {type(other).__name__}.")

    def __float__(self) -> float:
        return self.get_as_double()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_as_double()!r})"
