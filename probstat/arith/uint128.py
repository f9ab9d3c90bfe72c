# arith/uint128.py
from __future__ import annotations

from .int_math import MASK32, MASK64, uint128_to_double
from .uint96 import UInt96

__all__ = ["UInt128"]


class UInt128:
    """
    A mutable 128-bit unsigned integer.

    This is a specialised accumulator for unsigned 64-bit values, typically
    the squares of 32-bit `int` values. It is not a general purpose integer:
    only the operations required to build exact power sums are provided.

    The value is held in three limbs so the low 64 bits can be summed with an
    explicit carry:

      - ``_d``: bits 1-32
      - ``_c``: bits 33-64
      - ``_ab``: bits 65-128

    Arithmetic that exceeds 128 bits is silently truncated modulo 2**128.
    Callers must ensure by construction (count of terms x largest term) that
    the true value stays in range.

    Instances are not thread safe; each accumulator must have a single owner.
    Independent accumulators can be merged with `add`.

    Args:
        hi: high 64 bits. Negative values are read as two's complement.
        lo: low 64 bits. Negative values are read as two's complement.
    """

    __slots__ = ("_d", "_c", "_ab")

    def __init__(self, hi: int = 0, lo: int = 0):
        lo &= MASK64
        self._d = lo & MASK32
        self._c = lo >> 32
        self._ab = hi & MASK64

    @classmethod
    def _from_limbs(cls, hi: int, mid: int, lo: int) -> UInt128:
        x = cls.__new__(cls)
        x._d = lo & MASK32
        x._c = mid & MASK32
        x._ab = hi & MASK64
        return x

    @classmethod
    def create(cls) -> UInt128:
        """Create an instance with value zero."""
        return cls()

    @classmethod
    def of(cls, x: UInt96) -> UInt128:
        """Create an instance holding the value of the 96-bit integer `x`."""
        hi = x.hi64()
        return cls._from_limbs(hi >> 32, hi, x.lo32())

    # ---------------------------------------------------------------------
    # In-place accumulation
    # ---------------------------------------------------------------------

    def add_positive(self, x: int) -> None:
        """
        Add the unsigned 64-bit value `x` in place.

        `x` is assumed to be a non-negative magnitude, for example the square
        of an `int` value. Its low 64 bits are used, so ``-2**63`` is
        treated as the unsigned value 2**63.
        """
        # x + d cannot exceed 65 bits so x is not split into 32-bit halves
        s = (x & MASK64) + self._d
        self._d = s & MASK32
        s = (s >> 32) + self._c
        self._c = s & MASK32
        self._ab = (self._ab + (s >> 32)) & MASK64

    def add(self, x: UInt128) -> None:
        """Add the value `x` in place. `x` may be this instance."""
        dd = x._d
        cc = x._c
        aabb = x._ab
        s = dd + self._d
        self._d = s & MASK32
        s = (s >> 32) + cc + self._c
        self._c = s & MASK32
        self._ab = (self._ab + (s >> 32) + aabb) & MASK64

    # ---------------------------------------------------------------------
    # Arithmetic returning new instances
    # ---------------------------------------------------------------------

    def unsigned_multiply(self, x: int) -> UInt128:
        """
        Multiply by the unsigned 32-bit value `x`.

        Only the low 32 bits of `x` are used. Any product bits above 128 are
        lost.
        """
        xx = x & MASK32
        product = xx * self._d
        dd = product & MASK32
        product = (product >> 32) + xx * self._c
        cc = product & MASK32
        # possible overflow here; the bits are lost
        aabb = (product >> 32) + xx * self._ab
        return UInt128._from_limbs(aabb, cc, dd)

    def subtract(self, x: UInt128) -> UInt128:
        """
        Subtract the value `x`.

        If `x` is larger than this value the result wraps modulo 2**128 and
        the magnitude of the true negative value is lost.
        """
        diff = self._d - x._d
        dd = diff & MASK32
        # arithmetic shift propagates the borrow as -1
        diff = (diff >> 32) + self._c - x._c
        cc = diff & MASK32
        aabb = (diff >> 32) + self._ab - x._ab
        return UInt128._from_limbs(aabb, cc, dd)

    # ---------------------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------------------

    def to_int(self) -> int:
        """Return the exact value as a Python int."""
        return (self._ab << 64) | (self._c << 32) | self._d

    def to_double(self) -> float:
        """Return the float nearest to the value."""
        return uint128_to_double(self._ab, self.lo64())

    def lo64(self) -> int:
        """Bits 1-64 as an unsigned value."""
        return (self._c << 32) | self._d

    def lo32(self) -> int:
        """Bits 1-32 as an unsigned value."""
        return self._d

    def mid32(self) -> int:
        """Bits 33-64 as an unsigned value."""
        return self._c

    def hi64(self) -> int:
        """Bits 65-128 as an unsigned value."""
        return self._ab

    def __int__(self) -> int:
        return self.to_int()

    def __float__(self) -> float:
        return self.to_double()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UInt128):
            return NotImplemented
        return self._d == other._d and self._c == other._c and self._ab == other._ab

    __hash__ = None

    def __repr__(self) -> str:
        return f"UInt128({self.to_int():#x})"
