"""
Demonstration script for the ixy geometry toolkit.

Usage:
    python demo.py [row_major|col_major]
"""

import logging
import sys

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ascii_render import RenderOptions, render_index_map, render_visit_order
from geometry import Pos, Rect, Size
from layout import AnyLayout
from line import vector
from positions import iter_pos, iter_pos_col, iter_pos_row, iter_rects


def demo(layout: AnyLayout, console: Console) -> None:
    """Show index maps, traversal order and block tiling for one layout."""
    bounds = Size(6, 4)
    window = Rect.from_ltwh(1, 1, 3, 2)

    index_map = render_index_map(bounds, layout, RenderOptions(highlight=window))
    console.print(
        Panel(Text.from_ansi(index_map), title=f"{layout.kind.value} indices, window {window}")
    )

    full = render_visit_order(bounds.to_rect(), iter_pos(bounds.to_rect(), layout))
    console.print(Panel(Text.from_ansi(full), title="Full traversal"))

    row = render_visit_order(bounds.to_rect(), iter_pos_row(bounds.to_rect(), 2))
    col = render_visit_order(bounds.to_rect(), iter_pos_col(bounds.to_rect(), 4))
    console.print(Panel(Text.from_ansi(row), title="Row 2"))
    console.print(Panel(Text.from_ansi(col), title="Column 4"))

    blocks = [str(block) for block in iter_rects(bounds.to_rect(), Size(2, 2), layout)]
    console.print(Panel("\n".join(blocks), title="2x2 blocks"))

    clipped = window.intersect(Rect.from_ltwh(2, 0, 10, 10))
    console.print(f"Window clipped to x >= 2: {clipped}")

    steps = list(vector(Pos(0, 0), Pos(6, 4)))
    console.print(f"Vector (0, 0) -> (6, 4): {[p.to_tuple() for p in steps]}")


def main() -> None:
    console = Console()
    name = sys.argv[1] if len(sys.argv) > 1 else "row_major"
    demo(AnyLayout.parse(name), console)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    main()
