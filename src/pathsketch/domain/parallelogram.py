"""Parallelogram shape, a convenient generalization of a rectangle."""

from dataclasses import dataclass, field
from typing import Any, ClassVar

from pathsketch.config import GeometryConfig
from pathsketch.domain.path import Path
from pathsketch.domain.serialization import register_type
from pathsketch.domain.shape import Shape, scale_factors
from pathsketch.domain.types import HitResult
from pathsketch.geometry import ORIGIN, AffineMatrix, Point, format_point


@register_type
@dataclass(eq=False)
class Parallelogram(Shape):
    """A parallelogram spanned by two vectors from an origin corner.

    Only the origin and the spanning vectors are stored; the corners are
    derived.

    Attributes:
        origin: First corner
        vectors: Edge vectors from the origin to its two neighbouring corners
    """

    type_name: ClassVar[str] = "Parallelogram"

    origin: Point = ORIGIN
    vectors: tuple[Point, Point] = field(
        default_factory=lambda: (Point(1.0, 0.0), Point(0.0, 1.0))
    )

    @classmethod
    def create(cls, origin: Point, vectors: tuple[Point, Point]) -> "Parallelogram":
        return cls(origin=origin, vectors=vectors)

    @classmethod
    def from_corners(cls, corners: tuple[Point, Point, Point]) -> "Parallelogram":
        """Build a parallelogram from three corners.

        Args:
            corners: (p0, p1, p2) where p1 and p2 are the neighbours of p0;
                the fourth corner is implied

        Returns:
            Parallelogram with origin p0 and vectors (p1 - p0, p2 - p0)
        """
        return cls().reshape(corners)

    def reshape(self, corners: tuple[Point, Point, Point]) -> "Parallelogram":
        """Update origin and vectors in place from three corners.

        Returns:
            self, for chaining
        """
        p0, p1, p2 = corners
        self.origin = p0
        self.vectors = (p1 - p0, p2 - p0)
        return self

    @property
    def vertices(self) -> list[Point]:
        """The four corners: origin, origin+v1, origin+v1+v2, origin+v2."""
        v1, v2 = self.vectors
        return [self.origin, self.origin + v1, self.origin + v1 + v2, self.origin + v2]

    def to_path(self) -> Path:
        """Convert to a closed path of straight edges through the corners."""
        path = Path.create()
        for corner in self.vertices:
            path.create_vertex(corner)
        path.weld()
        return path

    def to_path_commands(self, precision: int = 6) -> str:
        corners = " L".join(format_point(p, precision) for p in self.vertices)
        return f"M{corners}Z"

    def hit_test(self, at: Point, config: GeometryConfig | None = None) -> HitResult | None:
        """Find the nearest point on the outline.

        Returns:
            HitResult with no edge (the outline has no persistent edges)
        """
        hit = self.to_path().hit_test(at, config)
        if hit is None:
            return None
        return HitResult(point=hit.point, distance=hit.distance)

    def scale(self, factor: float | Point, epicenter: Point | None = None) -> None:
        """Scale the parallelogram, about its origin by default."""
        if epicenter is None:
            epicenter = self.origin
        sx, sy = scale_factors(factor)
        matrix = AffineMatrix.scaling_about(sx, sy, epicenter)
        p0, p1, _, p2 = self.vertices
        self.reshape((matrix.apply(p0), matrix.apply(p1), matrix.apply(p2)))

    def to_dict(self) -> dict[str, Any]:
        return {
            "origin": self.origin.to_dict(),
            "vectors": [v.to_dict() for v in self.vectors],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Parallelogram":
        v1, v2 = (Point.from_dict(v) for v in data["vectors"])
        return cls(origin=Point.from_dict(data["origin"]), vectors=(v1, v2))
