"""
Error types for the ixy geometry toolkit.

Empty intersections and zero-length iteration are not errors; they produce
empty values. Everything here is a narrowing or construction failure.
"""

from __future__ import annotations

__all__ = ["GeometryError", "ConversionError", "SizeError", "RectError", "LayoutError"]


class GeometryError(ValueError):
    """Base class for geometry construction failures."""


class ConversionError(GeometryError):
    """A value is out of range for the target type."""


class SizeError(GeometryError):
    """A Size operation would produce a negative or undefined dimension."""


class RectError(GeometryError):
    """Corner coordinates do not describe a valid rectangle."""


class LayoutError(GeometryError):
    """Unknown layout name, or linear data that does not match its bounds."""
