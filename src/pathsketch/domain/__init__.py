"""Domain models for pathsketch.

This module contains the shape model the editing layer manipulates:

- Vertex: Identity-bearing point in a path sequence
- Edge: Connector between two vertices (StraightEdge, QuadraticBezierEdge)
- Path: Editable open or closed sequence of vertices and edges
- Ellipse, Parallelogram: Simple parametric shapes
- Shape: Common base of Path, Ellipse and Parallelogram

All serializable entities round-trip through ``encode``/``decode`` using a
kind-tagged dictionary form.
"""

from pathsketch.domain.edge import Edge, QuadraticBezierEdge, StraightEdge
from pathsketch.domain.ellipse import Ellipse
from pathsketch.domain.parallelogram import Parallelogram
from pathsketch.domain.path import Path
from pathsketch.domain.serialization import (
    TYPE_KEY,
    VALUE_KEY,
    decode,
    encode,
    registered_types,
)
from pathsketch.domain.shape import Shape
from pathsketch.domain.types import Direction, HitResult
from pathsketch.domain.vertex import Vertex
from pathsketch.geometry import Point

__all__: list[str] = [
    # Enums
    "Direction",
    # Core types
    "Point",
    "Vertex",
    "Edge",
    "StraightEdge",
    "QuadraticBezierEdge",
    "HitResult",
    "Shape",
    "Path",
    "Ellipse",
    "Parallelogram",
    # Serialization
    "TYPE_KEY",
    "VALUE_KEY",
    "decode",
    "encode",
    "registered_types",
]
