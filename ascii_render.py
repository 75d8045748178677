"""
ASCII rendering for layouts and position sequences.

Provides two views:
1. Index map - the linear index each layout assigns to every cell of a bounds
2. Visit order - the order in which a position sequence visits a rectangle
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

import simple_chalk as chalk  # type: ignore[import-untyped]

from geometry import Pos, Rect, Size
from layout import Layout, LayoutKind

__all__ = ["RenderOptions", "render_index_map", "render_visit_order"]

logger = logging.getLogger(__name__)

PALETTE: list[Callable[[str], str]] = [
    chalk.red,
    chalk.green,
    chalk.yellow,
    chalk.blue,
    chalk.magenta,
    chalk.cyan,
    chalk.redBright,
    chalk.greenBright,
    chalk.yellowBright,
    chalk.blueBright,
]


@dataclass(frozen=True)
class RenderOptions:
    """Options controlling rendered output."""

    color: bool = True
    cell_width: int | None = None  # None = widest label
    highlight: Rect | None = None  # Cells drawn white-on-black


def _paint(
    label: str,
    pos: Pos,
    band: int,
    options: RenderOptions,
) -> str:
    if not options.color:
        return label
    if options.highlight is not None and options.highlight.contains_pos(pos):
        return chalk.bgWhite.black(label)
    return PALETTE[band % len(PALETTE)](label)


def render_index_map(
    bounds: Size,
    layout: Layout,
    options: RenderOptions = RenderOptions(),
) -> str:
    """
    Render the linear index of every cell in ``bounds``.

    Cells are banded by colour along the layout's contiguous runs: one colour
    per row for row-major, one per column for column-major.

    Args:
        bounds: Grid dimensions
        layout: Layout assigning the indices
        options: Rendering options

    Returns:
        Rendered string, one text line per grid row
    """
    if bounds.area() == 0:
        return ""

    width = options.cell_width or len(str(bounds.area() - 1))
    col_major = layout.as_any().kind is LayoutKind.COL_MAJOR
    logger.info(
        "render_index_map: %dx%d, layout=%s, cell_width=%d",
        bounds.width,
        bounds.height,
        layout.as_any().kind.value,
        width,
    )

    lines: list[str] = []
    for y in range(bounds.height):
        cells: list[str] = []
        for x in range(bounds.width):
            pos = Pos(x, y)
            label = str(layout.to_1d(bounds, pos)).rjust(width)
            cells.append(_paint(label, pos, x if col_major else y, options))
        lines.append(" ".join(cells))
    return "\n".join(lines)


def render_visit_order(
    rect: Rect,
    positions: Iterable[Pos],
    options: RenderOptions = RenderOptions(),
) -> str:
    """
    Render the order in which ``positions`` visit the cells of ``rect``.

    Each visited cell shows its zero-based visit number; unvisited cells show
    ``.``. Positions outside ``rect`` are skipped.
    """
    visits: dict[Pos, int] = {}
    skipped = 0
    for number, pos in enumerate(positions):
        if rect.contains_pos(pos):
            visits.setdefault(pos, number)
        else:
            skipped += 1

    if rect.is_empty():
        return ""

    longest = max((len(str(n)) for n in visits.values()), default=1)
    width = options.cell_width or longest
    logger.info(
        "render_visit_order: %d visited, %d outside %dx%d",
        len(visits),
        skipped,
        rect.width,
        rect.height,
    )

    lines: list[str] = []
    for y in range(rect.top, rect.bottom):
        cells: list[str] = []
        for x in range(rect.left, rect.right):
            pos = Pos(x, y)
            number = visits.get(pos)
            if number is None:
                cells.append(".".rjust(width))
            else:
                cells.append(_paint(str(number).rjust(width), pos, number, options))
        lines.append(" ".join(cells))
    return "\n".join(lines)
