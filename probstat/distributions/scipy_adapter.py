# distributions/scipy_adapter.py
from __future__ import annotations

import logging
import math
from typing import Any

from ..custom_types import INT_MIN, INT_MAX
from .distribution import DiscreteDistribution

__all__ = ["ScipyDiscreteDistribution"]

logger = logging.getLogger(__name__)


def _support_bound(value: float, sentinel: int) -> int:
    if math.isinf(value):
        logger.debug("infinite support bound %r mapped to %d", value, sentinel)
        return sentinel
    return int(min(max(value, INT_MIN), INT_MAX))


class ScipyDiscreteDistribution(DiscreteDistribution):
    """
    Adapter exposing a frozen `scipy.stats` discrete distribution as a
    `DiscreteDistribution`.

    Mass, CDF, survival function and moments are delegated to scipy; the
    quantile functions and sampling come from `DiscreteDistribution`, so they
    use probstat's bisection solver rather than scipy's ``ppf``.

    Args:
        frozen: a frozen discrete distribution, e.g. ``scipy.stats.binom(10, 0.3)``.

    Example:
        >>> from scipy import stats
        >>> d = ScipyDiscreteDistribution(stats.poisson(4.0))
        >>> d.inverse_cumulative_probability(0.5)
        4
    """

    def __init__(self, frozen: Any):
        if not hasattr(frozen, "pmf"):
            raise TypeError(
                f"Expected a frozen scipy.stats discrete distribution. Got {type(frozen).__name__}."
            )
        self._frozen = frozen
        lo, hi = frozen.support()
        self._lower = _support_bound(float(lo), INT_MIN)
        self._upper = _support_bound(float(hi), INT_MAX)
        mean, var = frozen.stats(moments="mv")
        self._mean = float(mean)
        self._variance = float(var)

    @property
    def frozen(self) -> Any:
        """The wrapped scipy distribution."""
        return self._frozen

    def probability(self, x: int) -> float:
        return float(self._frozen.pmf(x))

    def log_probability(self, x: int) -> float:
        return float(self._frozen.logpmf(x))

    def cumulative_probability(self, x: int) -> float:
        return float(self._frozen.cdf(x))

    def survival_probability(self, x: int) -> float:
        return float(self._frozen.sf(x))

    def mean(self) -> float:
        return self._mean

    def variance(self) -> float:
        return self._variance

    def support_lower_bound(self) -> int:
        return self._lower

    def support_upper_bound(self) -> int:
        return self._upper

    def __repr__(self) -> str:
        name = getattr(getattr(self._frozen, "dist", None), "name", "rv_discrete")
        return f"ScipyDiscreteDistribution({name}, args={getattr(self._frozen, 'args', ())})"
