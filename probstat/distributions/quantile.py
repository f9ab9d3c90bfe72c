# distributions/quantile.py
"""
Inverse cumulative probability of a discrete distribution by bisection.

The solver needs nothing but the CDF, the first two moments and the support
bounds of the distribution, which are described by the `DiscreteCDF`
protocol. Any object with those methods can be inverted; no base class is
required.

For 0 < p < 1 the search keeps the invariant

    CDF(lower) < p <= CDF(upper)

and returns `upper` once the bracket ``(lower, upper]`` holds a single
integer. When the mean and variance are finite the initial bracket is
narrowed with the one-sided Chebyshev (Cantelli) inequality, which bounds the
p-quantile to within ``sigma * sqrt((1 - p) / p)`` below and
``sigma * sqrt(p / (1 - p))`` above the mean.

The inverse survival probability is found the same way with the invariant
``SF(lower) > p >= SF(upper)``.
"""
from __future__ import annotations

import logging
import math
from typing import Callable, Protocol, Tuple, runtime_checkable

from ..array_backend.utils import _ensure_probability
from ..custom_types import INT_MIN

__all__ = [
    "DiscreteCDF",
    "DistributionStateError",
    "inverse_cumulative_probability",
    "inverse_survival_probability",
]

logger = logging.getLogger(__name__)


@runtime_checkable
class DiscreteCDF(Protocol):
    """Read-only view of a discrete distribution required by the solver.

    `cumulative_probability` must be non-decreasing in `x`. Unbounded sides
    of the support are reported as `INT_MIN` / `INT_MAX`.
    """

    def cumulative_probability(self, x: int) -> float: ...

    def mean(self) -> float: ...

    def variance(self) -> float: ...

    def support_lower_bound(self) -> int: ...

    def support_upper_bound(self) -> int: ...


class DistributionStateError(RuntimeError):
    """Raised when a distribution returns an invalid value, e.g. a NaN CDF."""


def _checked(fn: Callable[[int], float], x: int, name: str) -> float:
    result = fn(x)
    if math.isnan(result):
        raise DistributionStateError(f"Internal error: {name} is NaN at x={x}")
    return result


def _chebyshev_bracket(
    dist: DiscreteCDF, p: float, lower: int, upper: int, *, survival: bool = False
) -> Tuple[int, int]:
    """Narrow ``(lower, upper]`` around the p-quantile using the mean and variance.

    With ``survival=True``, `p` is the upper tail mass ``P(X > x)``. The tail
    ratios are formed from `p` itself, so a level below machine epsilon,
    where ``1 - p`` rounds to 1, still gives a finite bracket.

    The bracket is returned unchanged when the mean or variance is not
    finite or the variance is zero.
    """
    mu = float(dist.mean())
    variance = float(dist.variance())
    sigma = math.sqrt(variance) if variance >= 0 else math.nan
    if not (math.isfinite(mu) and math.isfinite(sigma) and sigma != 0.0):
        return lower, upper
    below, above = (1.0 - p, p) if survival else (p, 1.0 - p)
    # both tails are nonzero for 0 < p < 1
    tmp = mu - math.sqrt(above / below) * sigma
    if tmp > lower:
        lower = math.ceil(tmp) - 1
    tmp = mu + math.sqrt(below / above) * sigma
    if tmp < upper:
        upper = math.ceil(tmp) - 1
    logger.debug("Chebyshev bracket for p=%r (survival=%s): (%d, %d]", p, survival, lower, upper)
    return lower, upper


def _bisect(reached: Callable[[int], bool], lower: int, upper: int) -> int:
    """Smallest x in ``(lower, upper]`` with ``reached(x)``.

    Assumes ``reached`` is monotone, false at `lower` and true at `upper`.
    """
    iterations = 0
    while lower + 1 < upper:
        # floor division; lower + upper may be negative
        middle = (lower + upper) // 2
        if reached(middle):
            upper = middle
        else:
            lower = middle
        iterations += 1
    logger.debug("bisection converged to %d after %d steps", upper, iterations)
    return upper


def inverse_cumulative_probability(p: float, dist: DiscreteCDF) -> int:
    """
    Return the smallest `x` in the support of `dist` with ``CDF(x) >= p``.

    Args:
        p: cumulative probability in [0, 1]
        dist: distribution providing CDF, mean, variance and support bounds

    Returns:
        the p-quantile ``inf{x in Z : CDF(x) >= p}``. For ``p = 0`` this is
        the support lower bound and for ``p = 1`` the upper bound; neither
        case evaluates the CDF.

    Raises:
        ValueError: if `p` is not in [0, 1].
        DistributionStateError: if the CDF evaluates to NaN.
    """
    p = _ensure_probability(p)

    lower = int(dist.support_lower_bound())
    if p == 0:
        return lower
    upper = int(dist.support_upper_bound())
    if p == 1:
        return upper

    def cdf(x: int) -> float:
        return _checked(dist.cumulative_probability, x, "cumulative probability")

    if lower == INT_MIN:
        # lower - 1 is outside the integer domain; test the bound directly
        if cdf(lower) >= p:
            logger.debug("p=%r attained at the support lower bound %d", p, lower)
            return lower
    else:
        # ensures CDF(lower) < p
        lower -= 1

    lower, upper = _chebyshev_bracket(dist, p, lower, upper)
    return _bisect(lambda x: cdf(x) >= p, lower, upper)


def inverse_survival_probability(p: float, dist: DiscreteCDF) -> int:
    """
    Return the smallest `x` in the support of `dist` with ``SF(x) <= p``.

    `dist` must also provide ``survival_probability(x)``, the probability
    ``P(X > x)``. Using the survival function directly keeps precision for
    small `p` where ``1 - p`` would round.

    Returns:
        the support upper bound for ``p = 0`` and the lower bound for
        ``p = 1``, without evaluating the survival function.

    Raises:
        ValueError: if `p` is not in [0, 1].
        DistributionStateError: if the survival function evaluates to NaN.
    """
    p = _ensure_probability(p)

    lower = int(dist.support_lower_bound())
    if p == 1:
        return lower
    upper = int(dist.support_upper_bound())
    if p == 0:
        return upper

    def sf(x: int) -> float:
        return _checked(dist.survival_probability, x, "survival probability")

    if lower == INT_MIN:
        if sf(lower) <= p:
            logger.debug("p=%r attained at the support lower bound %d", p, lower)
            return lower
    else:
        # ensures SF(lower) > p
        lower -= 1

    lower, upper = _chebyshev_bracket(dist, p, lower, upper, survival=True)
    return _bisect(lambda x: sf(x) <= p, lower, upper)
