"""
Typed errors of the geometry kernel.

The numeric core never raises; these cover the text format, array conversion
and configuration boundaries only.
"""
from __future__ import annotations


class GeometryError(Exception):
    """Base error of the project."""


class VectorParseError(GeometryError, ValueError):
    """Three scalars could not be read from a text source."""


class VectorShapeError(GeometryError, ValueError):
    """An array could not be converted into a Vector3."""


class ConfigurationError(GeometryError, ValueError):
    """Unknown or invalid configuration value."""
