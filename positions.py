"""
Lazy position sequences over rectangles.

A sequence takes its rectangle at construction and is drained exactly once.
Each ``next`` advances one position in O(1); nothing is buffered. To walk
the same rectangle again, build a new sequence.

Three traversal modes exist:

* FULL - every position, in the order of a layout's linear index
* ROW  - one row of the rectangle, left to right
* COL  - one column of the rectangle, top to bottom
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Iterator

from geometry import Pos, Rect, Size

if TYPE_CHECKING:
    from layout import Layout

__all__ = [
    "IterMode",
    "PosIter",
    "RectIter",
    "iter_pos",
    "iter_pos_row",
    "iter_pos_col",
    "iter_rects",
]

logger = logging.getLogger(__name__)


class IterMode(Enum):
    """Which positions of the rectangle a sequence addresses."""

    FULL = "full"  # Every position, layout order
    ROW = "row"  # A single row, left to right
    COL = "col"  # A single column, top to bottom


class PosIter:
    """
    Iterator over the positions of a rectangle.

    ``col_major`` selects the fast axis: False walks each row left to right
    before moving down, True walks each column top to bottom before moving
    right. ``len()`` reports the positions not yet produced.

    Usage:
        seq = PosIter.full(Rect.from_ltwh(0, 0, 3, 2))
        for pos in seq:
            print(pos)
    """

    def __init__(self, rect: Rect, mode: IterMode = IterMode.FULL, col_major: bool = False):
        self.mode = mode
        self._bounds = rect
        self._col_major = col_major
        self._current = rect.origin
        self._remaining = 0 if rect.is_empty() else rect.area()

    @classmethod
    def full(cls, rect: Rect, col_major: bool = False) -> PosIter:
        return cls(rect, IterMode.FULL, col_major)

    @classmethod
    def row(cls, rect: Rect, row: int) -> PosIter:
        """Positions of row ``row`` (offset from ``rect.top``); empty if outside."""
        if 0 <= row < rect.height:
            bounds = Rect.from_ltwh(rect.left, rect.top + row, rect.width, 1)
        else:
            bounds = Rect.EMPTY
        return cls(bounds, IterMode.ROW)

    @classmethod
    def col(cls, rect: Rect, col: int) -> PosIter:
        """Positions of column ``col`` (offset from ``rect.left``); empty if outside."""
        if 0 <= col < rect.width:
            bounds = Rect.from_ltwh(rect.left + col, rect.top, 1, rect.height)
        else:
            bounds = Rect.EMPTY
        return cls(bounds, IterMode.COL, col_major=True)

    @property
    def col_major(self) -> bool:
        return self._col_major

    def __iter__(self) -> Iterator[Pos]:
        return self

    def __next__(self) -> Pos:
        if self._remaining == 0:
            raise StopIteration
        pos = self._current
        self._remaining -= 1

        if self._col_major:
            x, y = pos.x, pos.y + 1
            if y >= self._bounds.bottom:
                x, y = pos.x + 1, self._bounds.top
        else:
            x, y = pos.x + 1, pos.y
            if x >= self._bounds.right:
                x, y = self._bounds.left, pos.y + 1
        self._current = Pos(x, y)

        return pos

    def __len__(self) -> int:
        return self._remaining

    def __repr__(self) -> str:
        return (
            f"PosIter(mode={self.mode.value}, col_major={self._col_major}, "
            f"bounds={self._bounds}, remaining={self._remaining})"
        )


class RectIter:
    """
    Iterator over whole blocks of ``size`` tiled across a rectangle.

    Blocks start at the rectangle's origin and step by the block size. Blocks
    that would stick out of the rectangle are not produced, and a block with
    a zero dimension produces nothing.
    """

    def __init__(self, rect: Rect, size: Size, col_major: bool = False):
        self.size = size
        self._origin = rect.origin
        self._col_major = col_major
        if size.width == 0 or size.height == 0 or rect.is_empty():
            self._cols = self._rows = 0
        else:
            self._cols = rect.width // size.width
            self._rows = rect.height // size.height
        self._index = 0
        self._count = self._cols * self._rows
        logger.debug(
            "RectIter: %dx%d blocks of %dx%d over %s (col_major=%s)",
            self._cols,
            self._rows,
            size.width,
            size.height,
            rect,
            col_major,
        )

    def __iter__(self) -> Iterator[Rect]:
        return self

    def __next__(self) -> Rect:
        if self._index >= self._count:
            raise StopIteration
        if self._col_major:
            bx, by = divmod(self._index, self._rows)
        else:
            by, bx = divmod(self._index, self._cols)
        self._index += 1
        return Rect.from_ltwh(
            self._origin.x + bx * self.size.width,
            self._origin.y + by * self.size.height,
            self.size.width,
            self.size.height,
        )

    def __len__(self) -> int:
        return self._count - self._index


# =============================================================================
# Layout-aware entry points
# =============================================================================


def iter_pos(rect: Rect, layout: Layout | None = None) -> PosIter:
    """
    Every position of ``rect`` in ``layout``'s linear order (row-major if
    None). The rectangle is consumed by the sequence.
    """
    logger.debug("iter_pos: %s layout=%s", rect, layout)
    if layout is None:
        return PosIter.full(rect)
    return layout.pos_iter(rect)


def iter_pos_row(rect: Rect, row: int) -> PosIter:
    """Positions of one row of ``rect``, left to right, for any layout."""
    logger.debug("iter_pos_row: %s row=%d", rect, row)
    return PosIter.row(rect, row)


def iter_pos_col(rect: Rect, col: int) -> PosIter:
    """Positions of one column of ``rect``, top to bottom, for any layout."""
    logger.debug("iter_pos_col: %s col=%d", rect, col)
    return PosIter.col(rect, col)


def iter_rects(rect: Rect, size: Size, layout: Layout | None = None) -> RectIter:
    """Whole ``size`` blocks of ``rect`` in ``layout`` order (row-major if None)."""
    if layout is None:
        return RectIter(rect, size)
    return layout.rect_iter(rect, size)
