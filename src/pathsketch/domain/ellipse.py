"""Axis-aligned ellipse shape."""

from dataclasses import dataclass, field
from typing import Any, ClassVar

from pathsketch.config import GeometryConfig
from pathsketch.domain.serialization import register_type
from pathsketch.domain.shape import Shape, scale_factors
from pathsketch.domain.types import HitResult
from pathsketch.geometry import (
    ORIGIN,
    AffineMatrix,
    Point,
    format_number,
    format_point,
    nearest_point_on_circle,
)


@register_type
@dataclass(eq=False)
class Ellipse(Shape):
    """An axis-aligned ellipse.

    Hit-testing treats the shape as a circle of radius ``radii.x``; the
    vertical radius only affects rendering.

    Attributes:
        center: Center point
        radii: Horizontal (x) and vertical (y) radius
    """

    type_name: ClassVar[str] = "Ellipse"

    center: Point = ORIGIN
    radii: Point = field(default_factory=lambda: Point(1.0, 1.0))

    @classmethod
    def create(cls, center: Point, radii: Point) -> "Ellipse":
        return cls(center=center, radii=radii)

    @property
    def is_circle(self) -> bool:
        return self.radii.x == self.radii.y

    def hit_test(self, at: Point, config: GeometryConfig | None = None) -> HitResult:  # noqa: ARG002
        """Find the nearest point on the circle of radius ``radii.x``.

        Args:
            at: Query point
            config: Unused; the circle is solved exactly

        Returns:
            HitResult with no edge
        """
        nearest, distance = nearest_point_on_circle(at, self.center, self.radii.x)
        return HitResult(point=nearest, distance=distance)

    def fit_radii(self, x_handle: Point, y_handle: Point | None = None) -> None:
        """Set the radii from handle positions.

        Args:
            x_handle: Point whose distance from the center becomes radii.x
            y_handle: Point whose distance becomes radii.y; the ellipse
                becomes a circle when omitted
        """
        rx = self.center.distance_to(x_handle)
        ry = self.center.distance_to(y_handle) if y_handle is not None else rx
        self.radii = Point(rx, ry)

    def to_path_commands(self, precision: int = 6) -> str:
        """Render the ellipse as two half-ellipse arcs."""
        cx, cy = self.center.x, self.center.y
        rx, ry = self.radii.x, self.radii.y
        right = format_point(Point(cx + rx, cy), precision)
        left = format_point(Point(cx - rx, cy), precision)
        arc = f"A{format_number(rx, precision)} {format_number(ry, precision)} 0 1 0 "
        return f"M{right}{arc}{left}{arc}{right}z"

    def scale(self, factor: float | Point, epicenter: Point | None = None) -> None:
        """Scale the ellipse, about its center by default."""
        if epicenter is None:
            epicenter = self.center
        sx, sy = scale_factors(factor)
        self.center = AffineMatrix.scaling_about(sx, sy, epicenter).apply(self.center)
        self.radii = Point(abs(self.radii.x * sx), abs(self.radii.y * sy))

    def to_dict(self) -> dict[str, Any]:
        return {"center": self.center.to_dict(), "radii": self.radii.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Ellipse":
        return cls(center=Point.from_dict(data["center"]), radii=Point.from_dict(data["radii"]))
