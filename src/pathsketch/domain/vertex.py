"""Path vertex entity."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

from pathsketch.domain.serialization import register_type
from pathsketch.geometry import AffineMatrix, Point, format_point

if TYPE_CHECKING:
    from pathsketch.domain.edge import Edge


@register_type
@dataclass(eq=False)
class Vertex:
    """A point occupying a position in a path sequence.

    Vertices compare by identity: two vertices at the same coordinates are
    still distinct members of a path.

    Attributes:
        position: Current location
        incoming: Edge ending at this vertex (None for the path head)
        outgoing: Edge starting at this vertex (None for the path tail)
    """

    type_name: ClassVar[str] = "Vertex"

    position: Point
    incoming: "Edge | None" = field(default=None, repr=False)
    outgoing: "Edge | None" = field(default=None, repr=False)

    @property
    def is_lone(self) -> bool:
        """Whether the vertex has no edges."""
        return self.incoming is None and self.outgoing is None

    def detach(self) -> None:
        """Drop both edge links."""
        self.incoming = None
        self.outgoing = None

    def transform(self, matrix: AffineMatrix) -> None:
        self.position = matrix.apply(self.position)

    def to_path(self, precision: int = 6) -> str:
        return format_point(self.position, precision)

    def to_dict(self) -> dict[str, Any]:
        return self.position.to_dict()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Vertex":
        return cls(Point.from_dict(data))
