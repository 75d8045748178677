"""
Mapping between 2D positions and linear (1D) indices.

Two layouts are provided:

* RowMajor: cells of the same row are contiguous, ``index = y * width + x``
* ColMajor: cells of the same column are contiguous, ``index = x * height + y``

``to_1d``/``to_2d`` do no bounds checking. For positions outside the bounds,
or indices outside ``[0, bounds.area())``, the result is unspecified; callers
check first with ``Rect.contains_pos`` or use ``iter_elements``.

``AnyLayout`` carries a ``LayoutKind`` tag so the layout can be chosen at run
time, and so layouts of different classes can be compared with ``as_any()``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Protocol, Sequence, TypeVar, runtime_checkable

from errors import LayoutError
from geometry import Pos, Rect, Size
from positions import PosIter, RectIter

__all__ = [
    "Layout",
    "RowMajor",
    "ColMajor",
    "ROW_MAJOR",
    "COL_MAJOR",
    "LayoutKind",
    "AnyLayout",
    "iter_elements",
]

logger = logging.getLogger(__name__)

E = TypeVar("E")


@runtime_checkable
class Layout(Protocol):
    """Policy mapping positions inside ``bounds`` to linear indices and back."""

    def to_1d(self, bounds: Size, pos: Pos) -> int: ...

    def to_2d(self, bounds: Size, index: int) -> Pos: ...

    def pos_iter(self, rect: Rect) -> PosIter: ...

    def rect_iter(self, rect: Rect, size: Size) -> RectIter: ...

    def as_any(self) -> AnyLayout: ...


@dataclass(frozen=True)
class RowMajor:
    """Rows are contiguous in memory."""

    def to_1d(self, bounds: Size, pos: Pos) -> int:
        return pos.y * bounds.width + pos.x

    def to_2d(self, bounds: Size, index: int) -> Pos:
        return Pos(index % bounds.width, index // bounds.width)

    def pos_iter(self, rect: Rect) -> PosIter:
        return PosIter.full(rect, col_major=False)

    def rect_iter(self, rect: Rect, size: Size) -> RectIter:
        return RectIter(rect, size, col_major=False)

    def as_any(self) -> AnyLayout:
        return AnyLayout(LayoutKind.ROW_MAJOR)


@dataclass(frozen=True)
class ColMajor:
    """Columns are contiguous in memory."""

    def to_1d(self, bounds: Size, pos: Pos) -> int:
        return pos.x * bounds.height + pos.y

    def to_2d(self, bounds: Size, index: int) -> Pos:
        return Pos(index // bounds.height, index % bounds.height)

    def pos_iter(self, rect: Rect) -> PosIter:
        return PosIter.full(rect, col_major=True)

    def rect_iter(self, rect: Rect, size: Size) -> RectIter:
        return RectIter(rect, size, col_major=True)

    def as_any(self) -> AnyLayout:
        return AnyLayout(LayoutKind.COL_MAJOR)


ROW_MAJOR = RowMajor()
COL_MAJOR = ColMajor()


class LayoutKind(Enum):
    """Tag naming one of the concrete layouts."""

    ROW_MAJOR = "row_major"
    COL_MAJOR = "col_major"

    @classmethod
    def parse(cls, name: str) -> LayoutKind:
        """Parse ``"row_major"``/``"col_major"`` (case and ``-``/``_`` insensitive)."""
        key = name.strip().lower().replace("-", "_")
        for kind in cls:
            if kind.value == key:
                return kind
        valid = ", ".join(kind.value for kind in cls)
        raise LayoutError(
            f"Unknown layout: '{name}'\n"
            f"  Valid layouts: {valid}"
        )


@dataclass(frozen=True)
class AnyLayout:
    """
    A layout selected at run time.

    Calls are forwarded to the concrete layout named by ``kind``. Two values
    are equal when they name the same layout.
    """

    kind: LayoutKind

    @classmethod
    def of(cls, layout: Layout) -> AnyLayout:
        return layout.as_any()

    @classmethod
    def parse(cls, name: str) -> AnyLayout:
        return cls(LayoutKind.parse(name))

    @property
    def layout(self) -> RowMajor | ColMajor:
        match self.kind:
            case LayoutKind.ROW_MAJOR:
                return ROW_MAJOR
            case LayoutKind.COL_MAJOR:
                return COL_MAJOR

    def to_1d(self, bounds: Size, pos: Pos) -> int:
        return self.layout.to_1d(bounds, pos)

    def to_2d(self, bounds: Size, index: int) -> Pos:
        return self.layout.to_2d(bounds, index)

    def pos_iter(self, rect: Rect) -> PosIter:
        return self.layout.pos_iter(rect)

    def rect_iter(self, rect: Rect, size: Size) -> RectIter:
        return self.layout.rect_iter(rect, size)

    def as_any(self) -> AnyLayout:
        return self


def iter_elements(
    layout: Layout,
    data: Sequence[E],
    bounds: Size,
    rect: Rect,
) -> Iterator[E]:
    """
    Elements of ``data`` that lie inside ``rect``, in ``layout`` order.

    ``data`` holds ``bounds.area()`` elements stored in ``layout``. The length
    is validated before the first element is produced. ``rect`` is clipped to
    ``bounds``, so cells outside the grid are skipped.

    Raises:
        LayoutError: If ``data`` does not match ``bounds``.
    """
    if len(data) != bounds.area():
        raise LayoutError(
            f"Data length does not match bounds\n"
            f"  Bounds: {bounds.width}x{bounds.height} ({bounds.area()} cells)\n"
            f"  Data length: {len(data)}"
        )
    rect = rect.intersect(bounds.to_rect())
    logger.debug("iter_elements: %s over %s in %s", rect, bounds, layout)
    return (data[layout.to_1d(bounds, pos)] for pos in layout.pos_iter(rect))
