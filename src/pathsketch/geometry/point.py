"""Two-dimensional point value type.

Point is the coordinate type shared by every shape. It is immutable, so
moving a vertex or a control point always means replacing its Point.
"""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point (or free vector) in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def scale(self, factor: float) -> "Point":
        """Multiply both coordinates by a factor.

        Args:
            factor: Uniform scale factor

        Returns:
            Scaled point
        """
        return Point(self.x * factor, self.y * factor)

    def translate(self, dx: float, dy: float) -> "Point":
        """Move the point by an offset.

        Args:
            dx: Offset along x
            dy: Offset along y

        Returns:
            Translated point
        """
        return Point(self.x + dx, self.y + dy)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


ORIGIN = Point(0.0, 0.0)


def format_number(value: float, precision: int = 6) -> str:
    """Format a coordinate for a path command string.

    Integral values print without a fractional part and trailing zeros are
    dropped, so 5.0 becomes "5" and 2.50 becomes "2.5".

    Args:
        value: Number to format
        precision: Maximum number of decimal places

    Returns:
        Compact decimal representation
    """
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def format_point(point: Point, precision: int = 6) -> str:
    """Format a point as "x y" for a path command string."""
    return f"{format_number(point.x, precision)} {format_number(point.y, precision)}"
