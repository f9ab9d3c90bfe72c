
import pytest
import numpy as np
from scipy import stats

from probstat.distributions import ScipyDiscreteDistribution


@pytest.fixture
def rng():
    return np.random.default_rng(42)

@pytest.fixture
def sequence():
    return [5, 9, 13, 14, 10, 12, 11, 15, 19]

@pytest.fixture
def binomial():
    return ScipyDiscreteDistribution(stats.binom(20, 0.25))

@pytest.fixture
def poisson():
    return ScipyDiscreteDistribution(stats.poisson(4.5))


def random_uint(rng, bits):
    """Uniform random unsigned integer with the given number of bits."""
    return int.from_bytes(rng.bytes(bits // 8), "little")


@pytest.fixture
def random_uint128(rng):
    return lambda: random_uint(rng, 128)

@pytest.fixture
def random_uint64(rng):
    return lambda: random_uint(rng, 64)
