"""
Tests for the position iteration engine.
"""

import logging

import pytest

from geometry import Pos, Rect, Size
from layout import COL_MAJOR, ROW_MAJOR, AnyLayout, Layout, LayoutKind
from positions import (
    IterMode,
    PosIter,
    RectIter,
    iter_pos,
    iter_pos_col,
    iter_pos_row,
    iter_rects,
)

RECTS = [
    Rect.from_ltwh(0, 0, 3, 2),
    Rect.from_ltwh(1, 2, 2, 4),
    Rect.from_ltwh(-2, -1, 4, 3),
    Rect.from_ltwh(5, 5, 1, 1),
    Rect.from_ltwh(0, 0, 7, 1),
]


def positions(*coords: tuple[int, int]) -> list[Pos]:
    return [Pos(x, y) for x, y in coords]


# =============================================================================
# Test Full Traversal
# =============================================================================


class TestFullTraversal:
    """Tests for full-rectangle sequences."""

    def test_row_major_order(self) -> None:
        """Row by row, left to right."""
        seq = iter_pos(Rect.from_ltwh(0, 0, 3, 2), ROW_MAJOR)
        assert list(seq) == positions((0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1))

    def test_col_major_order(self) -> None:
        """Column by column, top to bottom."""
        seq = iter_pos(Rect.from_ltwh(0, 0, 3, 2), COL_MAJOR)
        assert list(seq) == positions((0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1))

    def test_offset_rect(self) -> None:
        """Traversal starts at the rectangle's origin."""
        seq = iter_pos(Rect.from_ltrb(1, 2, 3, 6))
        assert list(seq) == positions(
            (1, 2), (2, 2), (1, 3), (2, 3), (1, 4), (2, 4), (1, 5), (2, 5)
        )

    def test_default_is_row_major(self) -> None:
        """No layout means row-major."""
        rect = Rect.from_ltwh(0, 0, 2, 2)
        assert list(iter_pos(rect)) == list(ROW_MAJOR.pos_iter(rect))

    @pytest.mark.parametrize("layout", [ROW_MAJOR, COL_MAJOR])
    def test_empty_rect(self, layout: Layout) -> None:
        """Empty rectangles give an exhausted sequence."""
        seq = iter_pos(Rect.EMPTY, layout)
        assert len(seq) == 0
        assert list(seq) == []
        assert list(iter_pos(Rect.from_ltwh(3, 3, 5, 0), layout)) == []

    @pytest.mark.parametrize("layout", [ROW_MAJOR, COL_MAJOR])
    @pytest.mark.parametrize("rect", RECTS)
    def test_full_properties(self, layout: Layout, rect: Rect) -> None:
        """Every cell exactly once, all inside, one layout step apart."""
        seq = list(iter_pos(rect, layout))
        assert len(seq) == rect.width * rect.height
        assert len(set(seq)) == len(seq)
        assert all(rect.contains_pos(p) for p in seq)

        bounds = rect.size
        indices = [layout.to_1d(bounds, p - rect.origin) for p in seq]
        assert indices == list(range(len(seq)))

    @pytest.mark.parametrize("rect", RECTS)
    def test_dynamic_matches_static(self, rect: Rect) -> None:
        """AnyLayout traversal equals the concrete traversal."""
        for kind, concrete in [(LayoutKind.ROW_MAJOR, ROW_MAJOR), (LayoutKind.COL_MAJOR, COL_MAJOR)]:
            assert list(iter_pos(rect, AnyLayout(kind))) == list(iter_pos(rect, concrete))

    def test_len_counts_down(self) -> None:
        """len() reports remaining positions."""
        seq = iter_pos(Rect.from_ltwh(0, 0, 2, 2), COL_MAJOR)
        assert len(seq) == 4
        next(seq)
        next(seq)
        assert len(seq) == 2
        assert seq.mode is IterMode.FULL
        assert seq.col_major

    def test_exhausted_once(self) -> None:
        """A drained sequence stays drained."""
        seq = iter_pos(Rect.from_ltwh(0, 0, 2, 1))
        assert list(seq) == positions((0, 0), (1, 0))
        assert list(seq) == []
        with pytest.raises(StopIteration):
            next(seq)

    def test_partial_iteration(self) -> None:
        """Stopping early is fine; a new sequence starts over."""
        rect = Rect.from_ltwh(0, 0, 3, 3)
        first = iter_pos(rect)
        assert next(first) == Pos(0, 0)
        assert next(iter_pos(rect)) == Pos(0, 0)


# =============================================================================
# Test Row / Column Traversal
# =============================================================================


class TestRowColTraversal:
    """Tests for single row and column sequences."""

    def test_row(self) -> None:
        """One row, left to right."""
        rect = Rect.from_ltwh(1, 2, 3, 4)
        seq = iter_pos_row(rect, 1)
        assert seq.mode is IterMode.ROW
        assert list(seq) == positions((1, 3), (2, 3), (3, 3))

    def test_col(self) -> None:
        """One column, top to bottom."""
        rect = Rect.from_ltwh(1, 2, 3, 4)
        seq = iter_pos_col(rect, 2)
        assert seq.mode is IterMode.COL
        assert list(seq) == positions((3, 2), (3, 3), (3, 4), (3, 5))

    @pytest.mark.parametrize("rect", RECTS)
    def test_row_lengths(self, rect: Rect) -> None:
        """Each row has width positions, each column height."""
        for row in range(rect.height):
            assert len(iter_pos_row(rect, row)) == rect.width
        for col in range(rect.width):
            assert len(iter_pos_col(rect, col)) == rect.height

    def test_rows_concatenate_to_row_major(self) -> None:
        """Rows in order rebuild the row-major traversal."""
        rect = Rect.from_ltwh(-1, 0, 3, 3)
        rows = [p for row in range(rect.height) for p in iter_pos_row(rect, row)]
        cols = [p for col in range(rect.width) for p in iter_pos_col(rect, col)]
        assert rows == list(iter_pos(rect, ROW_MAJOR))
        assert cols == list(iter_pos(rect, COL_MAJOR))

    @pytest.mark.parametrize("offset", [-1, 4, 100])
    def test_out_of_range_offset_is_empty(self, offset: int) -> None:
        """Rows and columns outside the rectangle yield nothing."""
        rect = Rect.from_ltwh(0, 0, 4, 4)
        assert list(iter_pos_row(rect, offset)) == []
        assert list(iter_pos_col(rect, offset)) == []

    def test_row_of_empty_rect(self) -> None:
        """Empty rectangles have no rows."""
        assert list(PosIter.row(Rect.EMPTY, 0)) == []


# =============================================================================
# Test Block Tiling
# =============================================================================


class TestRectIter:
    """Tests for block iteration."""

    def test_row_major_blocks(self) -> None:
        """2x2 blocks over 4x4, row-major."""
        blocks = list(iter_rects(Rect.from_ltwh(0, 0, 4, 4), Size(2, 2), ROW_MAJOR))
        assert blocks == [
            Rect.from_ltwh(0, 0, 2, 2),
            Rect.from_ltwh(2, 0, 2, 2),
            Rect.from_ltwh(0, 2, 2, 2),
            Rect.from_ltwh(2, 2, 2, 2),
        ]

    def test_col_major_blocks(self) -> None:
        """2x2 blocks over 4x4, column-major."""
        blocks = list(iter_rects(Rect.from_ltwh(0, 0, 4, 4), Size(2, 2), COL_MAJOR))
        assert blocks == [
            Rect.from_ltwh(0, 0, 2, 2),
            Rect.from_ltwh(0, 2, 2, 2),
            Rect.from_ltwh(2, 0, 2, 2),
            Rect.from_ltwh(2, 2, 2, 2),
        ]

    def test_partial_blocks_skipped(self) -> None:
        """Blocks sticking out of the rectangle are not produced."""
        rect = Rect.from_ltwh(1, 1, 5, 3)
        blocks = list(iter_rects(rect, Size(2, 2)))
        assert blocks == [Rect.from_ltwh(1, 1, 2, 2), Rect.from_ltwh(3, 1, 2, 2)]
        assert all(rect.contains_rect(b) for b in blocks)

    def test_zero_block(self) -> None:
        """A zero-sized block tiles nothing."""
        assert list(RectIter(Rect.from_ltwh(0, 0, 4, 4), Size(0, 2))) == []

    def test_len(self) -> None:
        """len() counts remaining blocks."""
        blocks = iter_rects(Rect.from_ltwh(0, 0, 6, 4), Size(2, 2), AnyLayout(LayoutKind.COL_MAJOR))
        assert len(blocks) == 6
        next(blocks)
        assert len(blocks) == 5


# =============================================================================
# Test Logging
# =============================================================================


class TestLogging:
    """Tests for debug logging of sequence construction."""

    def test_entry_points_log_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Each position entry point reports its rectangle."""
        rect = Rect.from_ltwh(0, 0, 3, 2)
        with caplog.at_level(logging.DEBUG, logger="positions"):
            iter_pos(rect, COL_MAJOR)
            iter_pos_row(rect, 1)
            iter_pos_col(rect, 2)
        messages = [record.getMessage() for record in caplog.records]
        assert any(m.startswith("iter_pos:") for m in messages)
        assert any(m.startswith("iter_pos_row:") and "row=1" in m for m in messages)
        assert any(m.startswith("iter_pos_col:") and "col=2" in m for m in messages)

    def test_silent_above_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Nothing is logged at INFO."""
        with caplog.at_level(logging.INFO, logger="positions"):
            list(iter_pos(Rect.from_ltwh(0, 0, 2, 2)))
        assert caplog.records == []
