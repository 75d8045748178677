"""
Integer 2D geometry: positions, sizes and rectangles.

Coordinates are plain Python ints. Sizes are unsigned (usize) and can never
hold a negative dimension; narrowing into a Size is checked and raises
instead of wrapping.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from errors import ConversionError, RectError, SizeError
from int_types import USIZE, IntType, gcd, isqrt

__all__ = [
    "Pos",
    "Size",
    "Rect",
    "euclidean_squared",
    "euclidean_approx",
    "distance",
]


# =============================================================================
# Pos
# =============================================================================


@dataclass(frozen=True, order=True)
class Pos:
    """
    A 2D point. ``x`` grows to the right, ``y`` grows downwards.

    Ordering is lexicographic: the smaller ``x`` comes first, ties are broken
    by ``y``.
    """

    x: int
    y: int

    ORIGIN: ClassVar[Pos]
    X: ClassVar[Pos]
    Y: ClassVar[Pos]
    NEG_X: ClassVar[Pos]
    NEG_Y: ClassVar[Pos]

    @classmethod
    def from_tuple(cls, value: tuple[int, int]) -> Pos:
        return cls(value[0], value[1])

    def to_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __add__(self, other: Pos) -> Pos:
        if not isinstance(other, Pos):
            return NotImplemented
        return Pos(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Pos) -> Pos:
        if not isinstance(other, Pos):
            return NotImplemented
        return Pos(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Pos:
        return Pos(-self.x, -self.y)

    def __mul__(self, scalar: int) -> Pos:
        if not isinstance(scalar, int):
            return NotImplemented
        return Pos(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def try_convert(self, int_type: IntType) -> Pos:
        """Return this position checked against ``int_type``'s range."""
        if not (int_type.contains(self.x) and int_type.contains(self.y)):
            raise ConversionError(
                f"Position ({self.x}, {self.y}) out of range for {int_type.name}\n"
                f"  Valid range: [{int_type.min}, {int_type.max}]"
            )
        return self

    def normalized_approx(self) -> Pos:
        """
        Approximate direction of this vector as the smallest integer step.

        Both components are divided by their GCD, so the step lies exactly on
        the vector and repeated steps land on its end point. The result has
        unit Chebyshev length for axis-aligned and diagonal vectors; other
        directions keep the reduced ratio, e.g. (6, 4) -> (3, 2). The zero
        vector maps to itself.
        """
        divisor = gcd(self.x, self.y)
        if divisor == 0:
            return self
        return Pos(self.x // divisor, self.y // divisor)


Pos.ORIGIN = Pos(0, 0)
Pos.X = Pos(1, 0)
Pos.Y = Pos(0, 1)
Pos.NEG_X = Pos(-1, 0)
Pos.NEG_Y = Pos(0, -1)


def euclidean_squared(a: Pos, b: Pos) -> int:
    """Squared straight-line distance, ``(x2 - x1)^2 + (y2 - y1)^2``."""
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def euclidean_approx(a: Pos, b: Pos) -> int:
    """Straight-line distance rounded down to an integer (error < 1)."""
    return isqrt(euclidean_squared(a, b))


distance = euclidean_approx


# =============================================================================
# Size
# =============================================================================


@dataclass(frozen=True)
class Size:
    """A 2D extent. Both dimensions are usize values."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if not (USIZE.contains(self.width) and USIZE.contains(self.height)):
            raise SizeError(
                f"Invalid size {self.width}x{self.height}\n"
                f"  Width and height must be in [0, {USIZE.max}]"
            )

    @classmethod
    def from_pos(cls, pos: Pos) -> Size:
        """Narrow a position into a size; negative coordinates are rejected."""
        if not (USIZE.contains(pos.x) and USIZE.contains(pos.y)):
            raise ConversionError(
                f"Position ({pos.x}, {pos.y}) cannot be converted to a Size\n"
                f"  Both coordinates must be in [0, {USIZE.max}]"
            )
        return cls(pos.x, pos.y)

    def to_pos(self) -> Pos:
        return Pos(self.width, self.height)

    def to_rect(self) -> Rect:
        """Rectangle at the origin with this size."""
        return Rect(Pos.ORIGIN, self)

    def area(self) -> int:
        return self.width * self.height

    def add(self, other: Size) -> Size:
        return Size(self.width + other.width, self.height + other.height)

    def sub(self, other: Size) -> Size:
        width = self.width - other.width
        height = self.height - other.height
        if width < 0 or height < 0:
            raise SizeError(
                f"Cannot subtract {other.width}x{other.height} "
                f"from {self.width}x{self.height}\n"
                f"  Result would be {width}x{height}"
            )
        return Size(width, height)

    def mul(self, other: Size | int) -> Size:
        if isinstance(other, Size):
            return Size(self.width * other.width, self.height * other.height)
        return Size(self.width * other, self.height * other)

    def div(self, other: Size | int) -> Size:
        if isinstance(other, Size):
            divisor = (other.width, other.height)
        else:
            divisor = (other, other)
        if 0 in divisor:
            raise SizeError(
                f"Cannot divide {self.width}x{self.height} by {divisor[0]}x{divisor[1]}\n"
                f"  Divisor dimensions must be non-zero"
            )
        return Size(self.width // divisor[0], self.height // divisor[1])

    def __add__(self, other: Size) -> Size:
        if not isinstance(other, Size):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Size) -> Size:
        if not isinstance(other, Size):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: Size | int) -> Size:
        if not isinstance(other, (Size, int)):
            return NotImplemented
        return self.mul(other)

    def __floordiv__(self, other: Size | int) -> Size:
        if not isinstance(other, (Size, int)):
            return NotImplemented
        return self.div(other)


# =============================================================================
# Rect
# =============================================================================


@dataclass(frozen=True, eq=False)
class Rect:
    """
    An axis-aligned rectangle: an origin (top-left, inclusive) and a size.

    The far corner ``origin + size`` is exclusive. A rectangle with zero
    width or height is empty, contains no positions, and compares equal to
    every other empty rectangle.
    """

    origin: Pos
    size: Size

    EMPTY: ClassVar[Rect]

    @classmethod
    def from_ltwh(cls, left: int, top: int, width: int, height: int) -> Rect:
        return cls(Pos(left, top), Size(width, height))

    @classmethod
    def from_ltrb(cls, left: int, top: int, right: int, bottom: int) -> Rect:
        """Build from edges; ``right``/``bottom`` are exclusive."""
        if left > right or top > bottom:
            raise RectError(
                f"Invalid rectangle edges l={left} t={top} r={right} b={bottom}\n"
                f"  Expected left <= right and top <= bottom"
            )
        return cls(Pos(left, top), Size(right - left, bottom - top))

    @classmethod
    def from_tlbr(cls, top_left: Pos, bottom_right: Pos) -> Rect:
        """Build from two corners; the result must be non-empty."""
        if top_left.x >= bottom_right.x or top_left.y >= bottom_right.y:
            raise RectError(
                f"Invalid rectangle corners {top_left} and {bottom_right}\n"
                f"  Top-left must be strictly above and left of bottom-right"
            )
        return cls.from_ltrb(top_left.x, top_left.y, bottom_right.x, bottom_right.y)

    @property
    def left(self) -> int:
        return self.origin.x

    @property
    def top(self) -> int:
        return self.origin.y

    @property
    def right(self) -> int:
        return self.origin.x + self.size.width

    @property
    def bottom(self) -> int:
        return self.origin.y + self.size.height

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height

    @property
    def top_left(self) -> Pos:
        return self.origin

    @property
    def top_right(self) -> Pos:
        return Pos(self.right, self.top)

    @property
    def bottom_right(self) -> Pos:
        return Pos(self.right, self.bottom)

    @property
    def bottom_left(self) -> Pos:
        return Pos(self.left, self.bottom)

    def area(self) -> int:
        return self.size.area()

    def is_empty(self) -> bool:
        return self.size.width == 0 or self.size.height == 0

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom

    def contains_pos(self, pos: Pos) -> bool:
        return self.contains(pos.x, pos.y)

    def contains_rect(self, other: Rect) -> bool:
        """True if every position of ``other`` is inside this rectangle."""
        if other.is_empty():
            return True
        return (
            self.left <= other.left
            and other.right <= self.right
            and self.top <= other.top
            and other.bottom <= self.bottom
        )

    def intersect(self, other: Rect) -> Rect:
        """Largest rectangle inside both; ``Rect.EMPTY`` when they do not overlap."""
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)

        if left < right and top < bottom:
            return Rect.from_ltrb(left, top, right, bottom)
        return Rect.EMPTY

    def translate(self, offset: Pos) -> Rect:
        return Rect(self.origin + offset, self.size)

    def __add__(self, offset: Pos) -> Rect:
        if not isinstance(offset, Pos):
            return NotImplemented
        return self.translate(offset)

    def __sub__(self, offset: Pos) -> Rect:
        if not isinstance(offset, Pos):
            return NotImplemented
        return self.translate(-offset)

    def __mul__(self, scalar: int) -> Rect:
        """Scale every edge by a non-negative scalar."""
        if not isinstance(scalar, int):
            return NotImplemented
        return Rect(self.origin * scalar, self.size * scalar)

    def __floordiv__(self, scalar: int) -> Rect:
        """Divide every edge by a positive scalar, truncating towards zero."""
        if not isinstance(scalar, int):
            return NotImplemented
        return Rect.from_ltrb(
            _div_trunc(self.left, scalar),
            _div_trunc(self.top, scalar),
            _div_trunc(self.right, scalar),
            _div_trunc(self.bottom, scalar),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        if self.is_empty() or other.is_empty():
            return self.is_empty() and other.is_empty()
        return self.origin == other.origin and self.size == other.size

    def __hash__(self) -> int:
        if self.is_empty():
            return hash(Rect)
        return hash((self.origin, self.size))


Rect.EMPTY = Rect(Pos.ORIGIN, Size(0, 0))


def _div_trunc(value: int, divisor: int) -> int:
    quotient = abs(value) // abs(divisor)
    return quotient if (value >= 0) == (divisor > 0) else -quotient
