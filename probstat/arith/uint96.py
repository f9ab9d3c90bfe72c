# arith/uint96.py
from __future__ import annotations

from .int_math import MASK32, MASK64, uint128_to_double

__all__ = ["UInt96"]


class UInt96:
    """
    A mutable 96-bit unsigned integer.

    Accumulator for unsigned values up to 64 bits, for example the
    magnitudes of `int` values. Up to 2**64 such terms can be summed without
    overflow. Limbs:

      - ``_c``: bits 1-32
      - ``_ab``: bits 33-96

    Carries beyond bit 96 are silently dropped.

    Args:
        hi: high 64 bits (bits 33-96).
        lo: low 32 bits.
    """

    __slots__ = ("_c", "_ab")

    def __init__(self, hi: int = 0, lo: int = 0):
        self._c = lo & MASK32
        self._ab = hi & MASK64

    @classmethod
    def create(cls) -> UInt96:
        """Create an instance with value zero."""
        return cls()

    def add_positive(self, x: int) -> None:
        """
        Add the unsigned 64-bit value `x` in place.

        Only the low 64 bits of `x` are used.
        """
        s = (x & MASK64) + self._c
        self._c = s & MASK32
        self._ab = (self._ab + (s >> 32)) & MASK64

    def add(self, x: UInt96) -> None:
        """Add the value `x` in place. `x` may be this instance."""
        cc = x._c
        aabb = x._ab
        s = cc + self._c
        self._c = s & MASK32
        self._ab = (self._ab + (s >> 32) + aabb) & MASK64

    def to_int(self) -> int:
        """Return the exact value as a Python int."""
        return (self._ab << 32) | self._c

    def to_double(self) -> float:
        """Return the float nearest to the value."""
        return uint128_to_double(self._ab >> 32, self.lo64())

    def lo64(self) -> int:
        """Bits 1-64 as an unsigned value."""
        return ((self._ab << 32) | self._c) & MASK64

    def lo32(self) -> int:
        """Bits 1-32 as an unsigned value."""
        return self._c

    def hi64(self) -> int:
        """Bits 33-96 as an unsigned value."""
        return self._ab

    def __int__(self) -> int:
        return self.to_int()

    def __float__(self) -> float:
        return self.to_double()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UInt96):
            return NotImplemented
        return self._c == other._c and self._ab == other._ab

    __hash__ = None

    def __repr__(self) -> str:
        return f"UInt96({self.to_int():#x})"
