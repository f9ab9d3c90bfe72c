# tests/distributions/test_scipy_adapter.py
import math

import numpy as np
import pytest
from scipy import stats

from probstat import INT_MIN, INT_MAX
from probstat.distributions import DiscreteDistribution, ScipyDiscreteDistribution


def test_is_discrete_distribution(binomial):
    assert isinstance(binomial, DiscreteDistribution)
    assert binomial.frozen.dist.name == "binom"


def test_delegates_to_scipy(binomial):
    frozen = binomial.frozen
    for x in range(-1, 22):
        assert binomial.probability(x) == pytest.approx(frozen.pmf(x))
        assert binomial.cumulative_probability(x) == pytest.approx(frozen.cdf(x))
        assert binomial.survival_probability(x) == pytest.approx(frozen.sf(x))
    assert binomial.log_probability(3) == pytest.approx(frozen.logpmf(3))
    assert binomial.log_probability(-1) == -math.inf


def test_moments(binomial):
    assert binomial.mean() == pytest.approx(5.0)
    assert binomial.variance() == pytest.approx(3.75)


def test_bounded_support(binomial):
    assert binomial.support_lower_bound() == 0
    assert binomial.support_upper_bound() == 20
    assert isinstance(binomial.support_upper_bound(), int)


def test_unbounded_support_maps_to_sentinels(poisson):
    assert poisson.support_lower_bound() == 0
    assert poisson.support_upper_bound() == INT_MAX

    d = ScipyDiscreteDistribution(stats.dlaplace(0.8))
    assert d.support_lower_bound() == INT_MIN
    assert d.support_upper_bound() == INT_MAX


def test_dlaplace_median_from_int_min():
    # symmetric about 0 with unbounded support on both sides
    d = ScipyDiscreteDistribution(stats.dlaplace(0.8))
    assert d.inverse_cumulative_probability(0.5) == 0
    assert d.inverse_cumulative_probability(0.0) == INT_MIN
    assert d.inverse_cumulative_probability(1.0) == INT_MAX


def test_quantiles_match_ppf(binomial):
    for p in [0.05, 0.3, 0.6, 0.9]:
        assert binomial.inverse_cumulative_probability(p) == int(binomial.frozen.ppf(p))
    assert binomial.inverse_cumulative_probability(0.9) == 8


def test_inverse_survival_uses_sf(poisson):
    for p in [1e-15, 0.05, 0.3, 0.6, 0.9]:
        x = poisson.inverse_survival_probability(p)
        assert poisson.frozen.sf(x) <= p
        assert x == 0 or poisson.frozen.sf(x - 1) > p


def test_sample_mean(binomial, rng):
    s = binomial.sample(20000, rng=rng)
    assert s.min() >= 0 and s.max() <= 20
    assert abs(s.mean() - 5.0) < 0.05


def test_density_matches_pmf(poisson):
    x = np.arange(10)
    np.testing.assert_allclose(poisson.density(x), poisson.frozen.pmf(x))


def test_rejects_continuous_distribution():
    with pytest.raises(TypeError):
        ScipyDiscreteDistribution(stats.norm(0, 1))


def test_repr(binomial):
    assert repr(binomial).startswith("ScipyDiscreteDistribution(binom")
