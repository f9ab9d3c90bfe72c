# distributions/distribution.py
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Callable

import numpy as np

from ..custom_types import Array, ArrayLike, PRNG, Float
from ..array_backend.utils import _as_array, _ensure_int
from .quantile import inverse_cumulative_probability, inverse_survival_probability

__all__ = [
    "Distribution",
    "DiscreteDistribution",
    "InverseTransformDiscreteSampler",
]

# -------------------------- Abstract Classes ----------------------------


class Distribution(ABC):
    """
    Abstract base class for any distribution class.
    """

    def sample(self, n_samples: int = 1, *, rng: PRNG | None = None) -> Array:
        """
        Optional. If a subclass can’t sample, it may leave this unimplemented.

        Sample n_samples items from the distribution.
        """
        raise NotImplementedError("This method may be implemented by subclasses (optional)")

    def density(self, data: ArrayLike) -> Array[Float]:
        """
        Optional. If a subclass can’t evaluate a density, it may leave this unimplemented.

        Compute p(data) under this distribution.
        """
        raise NotImplementedError("This method may be implemented by subclasses (optional)")

    def log_density(self, data: ArrayLike) -> Array[Float]:
        """
        Optional. If a subclass can’t evaluate a density, it may leave this unimplemented.

        Compute log p(data) under this distribution.
        """
        raise NotImplementedError("This method may be implemented by subclasses (optional)")


class DiscreteDistribution(Distribution):
    """
    Base class for distributions over the 32-bit integers.

    Subclasses supply the probability mass function, the CDF, the first two
    moments and the support bounds. Quantiles, survival probabilities and
    sampling are derived from those: the quantile functions invert the CDF
    numerically (see `probstat.distributions.quantile`), and sampling uses
    inversion of uniform deviates.

    A subclass with a closed-form quantile should override
    `inverse_cumulative_probability`; the sampler picks up the override.
    """

    @abstractmethod
    def probability(self, x: int) -> float:
        """P(X = x)."""

    @abstractmethod
    def cumulative_probability(self, x: int) -> float:
        """P(X <= x)."""

    @abstractmethod
    def mean(self) -> float:
        """Mean; may be NaN or infinite if undefined."""

    @abstractmethod
    def variance(self) -> float:
        """Variance; may be NaN or infinite if undefined."""

    @abstractmethod
    def support_lower_bound(self) -> int:
        """Lowest value with non-zero probability, or `INT_MIN` if unbounded."""

    @abstractmethod
    def support_upper_bound(self) -> int:
        """Highest value with non-zero probability, or `INT_MAX` if unbounded."""

    def log_probability(self, x: int) -> float:
        """log P(X = x); -inf outside the support."""
        p = self.probability(x)
        return math.log(p) if p > 0 else -math.inf

    def survival_probability(self, x: int) -> float:
        """P(X > x)."""
        return 1.0 - self.cumulative_probability(x)

    def probability_range(self, x0: int, x1: int) -> float:
        """P(x0 < X <= x1).

        Raises:
            ValueError: if x0 > x1.
        """
        if x0 > x1:
            raise ValueError(f"Lower bound x0={x0} is greater than upper bound x1={x1}.")
        return self.cumulative_probability(x1) - self.cumulative_probability(x0)

    def inverse_cumulative_probability(self, p: float) -> int:
        """Smallest x with P(X <= x) >= p."""
        return inverse_cumulative_probability(p, self)

    def inverse_survival_probability(self, p: float) -> int:
        """Smallest x with P(X > x) <= p."""
        return inverse_survival_probability(p, self)

    def create_sampler(self, rng: PRNG | None = None) -> InverseTransformDiscreteSampler:
        """Return a sampler drawing from this distribution by inversion."""
        return InverseTransformDiscreteSampler(rng, self.inverse_cumulative_probability)

    def sample(self, n_samples: int = 1, *, rng: PRNG | None = None) -> Array:
        """Draw n_samples values; returns an int64 array of shape (n_samples,)."""
        return self.create_sampler(rng).samples(n_samples)

    rvs = sample

    def density(self, data: ArrayLike) -> Array:
        """Probability mass at each entry of `data`, same shape as `data`."""
        arr = _as_array(data)
        return np.vectorize(lambda x: self.probability(_ensure_int(x)), otypes=[float])(arr)

    def log_density(self, data: ArrayLike) -> Array:
        """Log probability mass at each entry of `data`."""
        arr = _as_array(data)
        return np.vectorize(lambda x: self.log_probability(_ensure_int(x)), otypes=[float])(arr)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(support=[{self.support_lower_bound()}, "
                f"{self.support_upper_bound()}])")


class InverseTransformDiscreteSampler:
    """
    Sampler for a discrete distribution using inversion of uniform deviates.

    Args:
        rng: np.random.Generator, optional
            Source of uniform deviates; a fresh default generator if None.
        inverse_cdf: callable
            Maps u in [0, 1) to the smallest x with CDF(x) >= u.
    """

    def __init__(self, rng: PRNG | None, inverse_cdf: Callable[[float], int]):
        self._rng = rng or np.random.default_rng()
        self._inverse_cdf = inverse_cdf

    def sample(self) -> int:
        """Draw a single value."""
        return int(self._inverse_cdf(float(self._rng.random())))

    def samples(self, n_samples: int) -> Array:
        """Draw n_samples values as an int64 array of shape (n_samples,)."""
        n_samples = int(n_samples)
        if n_samples < 0:
            raise ValueError(f"n_samples must be non-negative. Got {n_samples}.")
        u = self._rng.random(n_samples)
        return np.fromiter((self._inverse_cdf(float(ui)) for ui in u),
                           dtype=np.int64, count=n_samples)
