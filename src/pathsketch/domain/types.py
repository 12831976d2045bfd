"""Small value types shared by the shape model."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from pathsketch.geometry import Point

if TYPE_CHECKING:
    from pathsketch.domain.edge import Edge


class Direction(Enum):
    """Side of an anchor vertex that new structure attaches to.

    - FORWARD: after the anchor (towards the path's tail)
    - BACKWARD: before the anchor (towards the path's head)
    """

    FORWARD = auto()
    BACKWARD = auto()


@dataclass(frozen=True)
class HitResult:
    """Nearest outline point of a shape to a query point.

    Attributes:
        point: Closest point on the outline
        distance: Euclidean distance from the query point to ``point``
        edge: Path edge the point lies on (None for non-path shapes)
    """

    point: Point
    distance: float
    edge: "Edge | None" = None
