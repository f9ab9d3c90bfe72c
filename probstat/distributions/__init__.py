from .quantile import (
    DiscreteCDF,
    DistributionStateError,
    inverse_cumulative_probability,
    inverse_survival_probability,
)
from .distribution import (
    Distribution,
    DiscreteDistribution,
    InverseTransformDiscreteSampler,
)
from .scipy_adapter import ScipyDiscreteDistribution

__all__ = [
    "DiscreteCDF",
    "DistributionStateError",
    "inverse_cumulative_probability",
    "inverse_survival_probability",
    "Distribution",
    "DiscreteDistribution",
    "InverseTransformDiscreteSampler",
    "ScipyDiscreteDistribution",
]
