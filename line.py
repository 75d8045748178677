"""
Stepping along a vector between two positions.
"""

from __future__ import annotations

from typing import Iterator

from geometry import Pos

__all__ = ["VectorIter", "vector"]


class VectorIter:
    """
    Iterator from ``start`` to ``end`` (inclusive) in equal integer steps.

    The step is ``(end - start).normalized_approx()``, so every produced
    position lies exactly on the segment.
    """

    def __init__(self, start: Pos, end: Pos):
        self.step = (end - start).normalized_approx()
        self._pos = start
        self._end = end + self.step

    def __iter__(self) -> Iterator[Pos]:
        return self

    def __next__(self) -> Pos:
        if self._pos == self._end:
            raise StopIteration
        current = self._pos
        self._pos = self._pos + self.step
        return current

    def __len__(self) -> int:
        if self.step == Pos.ORIGIN:
            return 0
        remaining = self._end - self._pos
        steps = max(abs(self.step.x), abs(self.step.y))
        return max(abs(remaining.x), abs(remaining.y)) // steps


def vector(start: Pos, end: Pos) -> VectorIter:
    """Positions from ``start`` to ``end``; nothing when they are equal."""
    return VectorIter(start, end)
