"""Exceptions raised by the hex geometry engine."""

from __future__ import annotations


class HexGeometryError(ValueError):
    """Base class for geometry contract violations."""


class InvalidCoordinate(HexGeometryError):
    """A cube coordinate could not be constructed under the active policy."""


class InvalidLayout(HexGeometryError):
    """A layout cannot be used for pixel conversions."""
