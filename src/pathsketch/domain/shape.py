"""Common abstraction over all shape kinds.

Shape is the only type the editing layer needs to know about: every shape
can be hit-tested, rendered to path commands, scaled and serialized.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from pathsketch.config import GeometryConfig
from pathsketch.domain.types import HitResult
from pathsketch.geometry import Point


def scale_factors(factor: float | Point) -> tuple[float, float]:
    """Normalize a uniform or per-axis scale factor to (sx, sy)."""
    if isinstance(factor, Point):
        return factor.x, factor.y
    return float(factor), float(factor)


class Shape(ABC):
    """Base class for Path, Ellipse and Parallelogram."""

    type_name: ClassVar[str]

    @abstractmethod
    def hit_test(self, at: Point, config: GeometryConfig | None = None) -> HitResult | None:
        """Find the nearest outline point to ``at``.

        Returns:
            HitResult, or None when the shape has no outline to test
        """

    @abstractmethod
    def to_path_commands(self, precision: int = 6) -> str:
        """Render the outline as an SVG path data string."""

    @abstractmethod
    def scale(self, factor: float | Point, epicenter: Point | None = None) -> None:
        """Scale the shape in place about ``epicenter``."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Serialize the shape's fields."""
