from .statistic import IntStatistic
from .int_sum import IntSum, IntSumOfSquares
from .int_moments import IntMean, IntVariance
from .int_product import IntProduct

__all__ = [
    "IntStatistic",
    "IntSum",
    "IntSumOfSquares",
    "IntMean",
    "IntVariance",
    "IntProduct",
]
