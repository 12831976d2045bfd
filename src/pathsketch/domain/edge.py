"""Edges connecting consecutive path vertices.

An edge runs from its tail vertex to its head vertex. Both vertices hold a
reference to the same edge object (tail as ``outgoing``, head as
``incoming``); the owning Path keeps the two sides consistent.

Edge kinds:
- StraightEdge: line segment, geometry fully given by the endpoints
- QuadraticBezierEdge: quadratic curve with one owned control point
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

from pathsketch.config import GeometryConfig
from pathsketch.domain.serialization import register_type
from pathsketch.domain.types import Direction, HitResult
from pathsketch.exceptions import EdgeKindError, GeometryError, InvalidEdgeArityError
from pathsketch.geometry import (
    AffineMatrix,
    Point,
    format_point,
    nearest_point_on_quadratic,
    nearest_point_on_segment,
)

if TYPE_CHECKING:
    from pathsketch.domain.vertex import Vertex


@dataclass(eq=False)
class Edge(ABC):
    """Base class for path edges.

    Edges compare by identity. ``tail`` and ``head`` stay None until a Path
    connects the edge.

    Attributes:
        tail: Vertex the edge starts at
        head: Vertex the edge ends at
    """

    type_name: ClassVar[str]

    tail: "Vertex | None" = field(default=None, repr=False, kw_only=True)
    head: "Vertex | None" = field(default=None, repr=False, kw_only=True)

    @property
    def is_attached(self) -> bool:
        """Whether the edge currently connects two vertices."""
        return self.tail is not None or self.head is not None

    def endpoints(self) -> tuple[Point, Point]:
        """Positions of the tail and head vertices.

        Raises:
            GeometryError: If the edge is not connected
        """
        if self.tail is None or self.head is None:
            raise GeometryError(f"{self.type_name} edge is not connected")
        return self.tail.position, self.head.position

    def to_path_command(self, include_start: bool = False, precision: int = 6) -> str:
        """Render the edge as a path command.

        Args:
            include_start: Prefix the tail coordinates
            precision: Decimal places for coordinates

        Returns:
            Command string drawing from the tail to the head
        """
        start, _ = self.endpoints()
        prefix = format_point(start, precision) if include_start else ""
        return prefix + self._command(precision)

    @abstractmethod
    def _command(self, precision: int) -> str:
        """Command drawing to the head vertex."""

    @abstractmethod
    def hit_test(self, at: Point, config: GeometryConfig | None = None) -> HitResult:
        """Find the point of this edge nearest to ``at``."""

    @abstractmethod
    def get_direction(self, toward: Point) -> Direction:
        """Classify which end of the edge a point is associated with."""

    @abstractmethod
    def transform(self, matrix: AffineMatrix) -> None:
        """Transform the edge's own control geometry (not its endpoints)."""

    def move_control(self, position: Point) -> None:
        """Move the edge's control point.

        Raises:
            EdgeKindError: If the edge has no control point
        """
        raise EdgeKindError(self.type_name, "move_control")

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Serialize the kind-specific fields."""


@register_type
@dataclass(eq=False)
class StraightEdge(Edge):
    """Straight line segment between two vertices."""

    type_name: ClassVar[str] = "StraightEdge"

    def _command(self, precision: int) -> str:
        _, end = self.endpoints()
        return f"L{format_point(end, precision)}"

    def hit_test(self, at: Point, config: GeometryConfig | None = None) -> HitResult:
        """Find the nearest point on the finite segment.

        Args:
            at: Query point
            config: Unused; straight edges are solved exactly

        Returns:
            HitResult on this edge
        """
        start, end = self.endpoints()
        nearest, distance = nearest_point_on_segment(at, start, end)
        return HitResult(point=nearest, distance=distance, edge=self)

    def get_direction(self, toward: Point) -> Direction:
        """Classify a point by the nearer endpoint.

        If the point is closer to the tail, new structure belongs after the
        tail (FORWARD); otherwise before the head (BACKWARD). Ties go
        BACKWARD.

        Args:
            toward: Point to classify

        Returns:
            Direction for a split near ``toward``
        """
        start, end = self.endpoints()
        if toward.distance_to(start) < toward.distance_to(end):
            return Direction.FORWARD
        return Direction.BACKWARD

    def transform(self, matrix: AffineMatrix) -> None:
        pass

    def to_dict(self) -> dict[str, Any]:
        return {}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StraightEdge":  # noqa: ARG003
        return cls()


@register_type
@dataclass(eq=False)
class QuadraticBezierEdge(Edge):
    """Quadratic Bezier curve between two vertices.

    Attributes:
        controls: Control points; exactly one is required
    """

    type_name: ClassVar[str] = "QuadraticBezierEdge"
    arity: ClassVar[int] = 1

    controls: list[Point]

    def __post_init__(self) -> None:
        self.controls = list(self.controls)
        if len(self.controls) != self.arity:
            raise InvalidEdgeArityError(self.type_name, self.arity, len(self.controls))

    @classmethod
    def through(cls, control: Point) -> "QuadraticBezierEdge":
        """Create a curve with a single control point."""
        return cls([control])

    @property
    def control(self) -> Point:
        """The curve's control point."""
        return self.controls[0]

    def move_control(self, position: Point) -> None:
        self.controls[0] = position

    def _command(self, precision: int) -> str:
        _, end = self.endpoints()
        return f"Q{format_point(self.control, precision)}, {format_point(end, precision)}"

    def hit_test(self, at: Point, config: GeometryConfig | None = None) -> HitResult:
        """Project a point onto the curve.

        Args:
            at: Query point
            config: Projection sampling settings (defaults if None)

        Returns:
            HitResult on this edge
        """
        config = config or GeometryConfig()
        start, end = self.endpoints()
        nearest, distance = nearest_point_on_quadratic(
            at,
            start,
            self.control,
            end,
            samples=config.projection_samples,
            tolerance=config.projection_tolerance,
        )
        return HitResult(point=nearest, distance=distance, edge=self)

    def get_direction(self, toward: Point) -> Direction:  # noqa: ARG002
        """Curved edges always attach new structure after the tail."""
        return Direction.FORWARD

    def transform(self, matrix: AffineMatrix) -> None:
        self.controls = [matrix.apply(p) for p in self.controls]

    def to_dict(self) -> dict[str, Any]:
        return {"ctrl": [p.to_dict() for p in self.controls]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "QuadraticBezierEdge":
        return cls([Point.from_dict(p) for p in data["ctrl"]])
