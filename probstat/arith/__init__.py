"""Fixed-width unsigned integers used for exact accumulation of power sums."""

from .int_math import uint64_to_double, uint128_to_double
from .uint96 import UInt96
from .uint128 import UInt128

__all__ = [
    "UInt96",
    "UInt128",
    "uint64_to_double",
    "uint128_to_double",
]
