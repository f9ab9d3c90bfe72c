# arith/int_math.py
"""
Bit masks and unsigned-to-float conversions for the fixed-width integer types.

Python ints are unbounded, so the fixed-width types emulate unsigned machine
words by masking after every operation. The conversions below produce the
nearest `float` to an unsigned 64- or 128-bit magnitude with a single rounding
step.
"""
from __future__ import annotations

import math

__all__ = [
    "MASK32",
    "MASK64",
    "MASK96",
    "MASK128",
    "uint64_to_double",
    "uint128_to_double",
]

MASK32 = (1 << 32) - 1
MASK64 = (1 << 64) - 1
MASK96 = (1 << 96) - 1
MASK128 = (1 << 128) - 1


def uint64_to_double(x: int) -> float:
    """Convert the unsigned 64-bit pattern `x` to the nearest float."""
    # int -> float conversion is correctly rounded (round half to even)
    return float(x & MASK64)


def uint128_to_double(hi: int, lo: int) -> float:
    """
    Convert the unsigned 128-bit value ``hi * 2**64 + lo`` to the nearest float.

    Converting each half separately and summing would round twice. Instead the
    64 most significant bits are gathered into one word and every bit below
    them is folded into the least significant bit of that word (a sticky bit).
    The word has 11 bits beyond the 53-bit significand, so the sticky bit
    only influences ties and the single conversion rounds as the full value
    would. The power-of-two rescale is exact.

    Args:
        hi: high 64 bits (bits 65-128)
        lo: low 64 bits (bits 1-64)

    Returns:
        float nearest to the 128-bit magnitude
    """
    hi &= MASK64
    lo &= MASK64
    if hi == 0:
        return uint64_to_double(lo)
    shift = 64 - hi.bit_length()
    if shift == 0:
        bits = hi
    else:
        bits = ((hi << shift) | (lo >> (64 - shift))) & MASK64
    if (lo << shift) & MASK64:
        bits |= 1
    return math.ldexp(float(bits), 64 - shift)
