"""
Fixed-width integer capability for the ixy geometry types.

Python integers never overflow, so coordinate widths are described by
``IntType`` values instead of distinct classes. Geometry code asks the
descriptor whether a value is representable and narrows through it.
"""

from __future__ import annotations

from dataclasses import dataclass

from errors import ConversionError

__all__ = [
    "IntType",
    "I8",
    "I16",
    "I32",
    "I64",
    "ISIZE",
    "U8",
    "U16",
    "U32",
    "U64",
    "USIZE",
    "gcd",
    "isqrt",
]


@dataclass(frozen=True)
class IntType:
    """A fixed-width integer type: name, bit width and signedness."""

    name: str
    bits: int
    signed: bool = True

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """True if ``value`` is an int within this type's range."""
        return isinstance(value, int) and self.min <= value <= self.max

    def checked(self, value: int) -> int | None:
        """Return ``value`` if representable, otherwise None."""
        return value if self.contains(value) else None

    def check(self, value: int) -> int:
        """Return ``value`` or raise OverflowError if it does not fit."""
        if not self.contains(value):
            raise OverflowError(
                f"{value} out of range for {self.name} [{self.min}, {self.max}]"
            )
        return value

    def checked_to_usize(self, value: int) -> int | None:
        return USIZE.checked(value)

    def to_usize(self, value: int) -> int:
        """Narrow a value of this type to a usize, failing on negatives."""
        result = self.checked_to_usize(value)
        if result is None:
            raise ConversionError(f"{self.name} value {value} does not fit in usize")
        return result

    def from_usize(self, value: int) -> int:
        return self.check(value)

    def abs(self, value: int) -> int:
        # abs(MIN) is not representable for signed types
        return self.check(abs(value))

    def shl(self, value: int, shift: int) -> int:
        return self.check(value << shift)

    def shr(self, value: int, shift: int) -> int:
        return value >> shift

    def trailing_zeros(self, value: int) -> int:
        """Count trailing zero bits; zero has ``bits`` trailing zeros."""
        if value == 0:
            return self.bits
        return ((value & -value).bit_length()) - 1


I8 = IntType("i8", 8)
I16 = IntType("i16", 16)
I32 = IntType("i32", 32)
I64 = IntType("i64", 64)
ISIZE = IntType("isize", 64)
U8 = IntType("u8", 8, signed=False)
U16 = IntType("u16", 16, signed=False)
U32 = IntType("u32", 32, signed=False)
U64 = IntType("u64", 64, signed=False)
USIZE = IntType("usize", 64, signed=False)


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor using Stein's (binary) algorithm.

    The result is always non-negative and ``gcd(0, 0) == 0``.
    """
    if a == 0 or b == 0:
        return abs(a | b)

    shift = I64.trailing_zeros(a | b)
    a = abs(a)
    b = abs(b)
    a >>= I64.trailing_zeros(a)
    b >>= I64.trailing_zeros(b)

    while a != b:
        if a > b:
            a -= b
            a >>= I64.trailing_zeros(a)
        else:
            b -= a
            b >>= I64.trailing_zeros(b)

    return a << shift


def isqrt(n: int) -> int:
    """Floor square root by Newton iteration; 0 for non-positive input."""
    if n <= 0:
        return 0

    x = n
    y = (n + 1) // 2
    while y < x:
        x = y
        y = (n // x + x) // 2
    return x
