"""Geometric primitives for pathsketch.

This module provides the value types and numeric solvers the shape model is
built on:

- Point: Immutable 2D coordinate with vector helpers
- AffineMatrix: Immutable affine transform
- Nearest-point solvers for segments, circles and quadratic Bezier curves

Everything here is pure and has no knowledge of vertices, edges or paths.
"""

from pathsketch.geometry.matrix import AffineMatrix
from pathsketch.geometry.point import ORIGIN, Point, format_number, format_point
from pathsketch.geometry.solvers import (
    nearest_point_on_circle,
    nearest_point_on_quadratic,
    nearest_point_on_segment,
)

__all__ = [
    "ORIGIN",
    "AffineMatrix",
    "Point",
    "format_number",
    "format_point",
    "nearest_point_on_circle",
    "nearest_point_on_quadratic",
    "nearest_point_on_segment",
]
