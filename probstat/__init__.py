
from probstat.custom_types import INT_MIN, INT_MAX
from probstat.arith import UInt96, UInt128
from probstat.distributions import (
    Distribution,
    DiscreteDistribution,
    DistributionStateError,
    InverseTransformDiscreteSampler,
    ScipyDiscreteDistribution,
    inverse_cumulative_probability,
    inverse_survival_probability,
)
from probstat.descriptive import (
    IntStatistic,
    IntSum,
    IntSumOfSquares,
    IntMean,
    IntVariance,
    IntProduct,
)

__version__ = "0.1.0"
