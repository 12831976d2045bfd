"""Editable multi-segment path.

A Path is an ordered sequence of vertices with one edge between each pair of
consecutive vertices, plus a closing edge from the last vertex back to the
first once the path has been welded. The structure is a doubly linked list:

    vertices[i].outgoing.head is vertices[i + 1]
    vertices[i + 1].incoming is vertices[i].outgoing

Every mutating method validates its arguments before touching any link, so
a failed call leaves the path exactly as it was.
"""

import logging
from collections.abc import Iterator
from typing import Any, ClassVar

from pathsketch.config import GeometryConfig
from pathsketch.domain.edge import Edge, StraightEdge
from pathsketch.domain.serialization import decode, encode, register_type
from pathsketch.domain.shape import Shape, scale_factors
from pathsketch.domain.types import Direction, HitResult
from pathsketch.domain.vertex import Vertex
from pathsketch.exceptions import (
    EdgeNotFoundError,
    GeometryError,
    SerializationError,
    VertexNotFoundError,
)
from pathsketch.geometry import ORIGIN, AffineMatrix, Point

logger = logging.getLogger(__name__)


@register_type
class Path(Shape):
    """An open or closed sequence of vertices joined by edges.

    Example:
        path = Path.create()
        a = path.create_vertex(Point(0, 0))
        path.create_vertex(Point(10, 0))
        path.create_vertex(Point(10, 10))
        path.weld()
        path.to_path_commands()  # "M0 0L10 0L10 10L0 0z"
    """

    type_name: ClassVar[str] = "Path"

    def __init__(self) -> None:
        self._vertices: list[Vertex] = []
        self._closed = False

    @classmethod
    def create(cls) -> "Path":
        """Create an empty path."""
        return cls()

    def __repr__(self) -> str:
        return f"Path(vertices={len(self._vertices)}, closed={self._closed})"

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return any(v is vertex for v in self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(list(self._vertices))

    @property
    def vertices(self) -> list[Vertex]:
        """Vertices in path order (a copy; mutate through Path methods)."""
        return list(self._vertices)

    @property
    def closed(self) -> bool:
        """Whether the last vertex is connected back to the first."""
        return self._closed

    @property
    def head(self) -> Vertex | None:
        """First vertex, or None for an empty path."""
        return self._vertices[0] if self._vertices else None

    @property
    def tail(self) -> Vertex | None:
        """Last vertex, or None for an empty path."""
        return self._vertices[-1] if self._vertices else None

    @property
    def edges(self) -> list[Edge]:
        """Edges in path order, the closing edge last."""
        return [v.outgoing for v in self._vertices if v.outgoing is not None]

    # Validation

    def _index_of(self, vertex: Vertex) -> int | None:
        for i, v in enumerate(self._vertices):
            if v is vertex:
                return i
        return None

    def _require_index(self, vertex: Vertex) -> int:
        index = self._index_of(vertex)
        if index is None:
            raise VertexNotFoundError(vertex.position)
        return index

    def _require_edge(self, edge: Edge) -> None:
        tail = edge.tail
        if tail is None or tail.outgoing is not edge or tail not in self:
            raise EdgeNotFoundError(edge.type_name)

    def _check_new_vertex(self, vertex: Vertex) -> None:
        if vertex in self:
            raise GeometryError(f"Vertex at {vertex.position} is already on the path")
        if not vertex.is_lone:
            raise GeometryError(f"Vertex at {vertex.position} is linked to another path")

    @staticmethod
    def _check_new_edge(edge: Edge | None) -> None:
        if edge is not None and edge.is_attached:
            raise GeometryError(f"{edge.type_name} edge is already connected")

    @staticmethod
    def _connect(tail: Vertex, head: Vertex, edge: Edge | None = None) -> Edge:
        if edge is None:
            edge = StraightEdge()
        edge.tail = tail
        edge.head = head
        tail.outgoing = edge
        head.incoming = edge
        return edge

    # Structural mutation

    def create_vertex(
        self,
        at: Point,
        direction: Direction = Direction.FORWARD,
        edge: Edge | None = None,
    ) -> Vertex:
        """Add a new vertex at one end of the path.

        Args:
            at: Position of the new vertex
            direction: FORWARD appends after the tail, BACKWARD prepends
                before the head
            edge: Edge joining the new vertex to the path (straight if None)

        Returns:
            The new vertex
        """
        vertex = Vertex(at)
        if direction is Direction.FORWARD:
            self.append_vertex(vertex, edge)
        else:
            self.insert_vertex_before(vertex, None, edge)
        return vertex

    def append_vertex(self, vertex: Vertex, edge: Edge | None = None) -> None:
        """Append an existing lone vertex after the tail.

        On a closed path the vertex is spliced into the closing edge, so it
        becomes the new last vertex and the path stays closed.

        Args:
            vertex: Vertex to add
            edge: Edge from the old tail to ``vertex`` (straight if None)
        """
        last = self.tail
        if self._closed and last is not None:
            self.insert_vertex_after(vertex, last, edge)
            return

        self._check_new_vertex(vertex)
        self._check_new_edge(edge)
        self._vertices.append(vertex)
        if last is not None:
            self._connect(last, vertex, edge)
        logger.debug("Appended vertex at %s", vertex.position)

    def insert_vertex_after(
        self, vertex: Vertex, after: Vertex | None, edge: Edge | None = None
    ) -> None:
        """Splice a vertex into the path right after an anchor.

        The anchor's outgoing edge (if any) keeps running to the anchor's
        former successor but now starts at ``vertex``; a new edge joins the
        anchor to ``vertex``.

        Args:
            vertex: Lone vertex to insert
            after: Anchor vertex; None appends at the tail
            edge: Edge from the anchor to ``vertex`` (straight if None)

        Raises:
            VertexNotFoundError: If ``after`` is not on the path
        """
        if after is None:
            self.append_vertex(vertex, edge)
            return

        index = self._require_index(after)
        self._check_new_vertex(vertex)
        self._check_new_edge(edge)

        existing = after.outgoing
        if existing is not None:
            existing.tail = vertex
            vertex.outgoing = existing
        self._vertices.insert(index + 1, vertex)
        self._connect(after, vertex, edge)
        logger.debug("Inserted vertex at %s after index %d", vertex.position, index)

    def insert_vertex_before(
        self, vertex: Vertex, before: Vertex | None, edge: Edge | None = None
    ) -> None:
        """Splice a vertex into the path right before an anchor.

        The anchor's incoming edge (if any) keeps starting at the anchor's
        former predecessor but now ends at ``vertex``; a new edge joins
        ``vertex`` to the anchor.

        Args:
            vertex: Lone vertex to insert
            before: Anchor vertex; None prepends at the head
            edge: Edge from ``vertex`` to the anchor (straight if None)

        Raises:
            VertexNotFoundError: If ``before`` is not on the path
        """
        if before is None:
            first = self.head
            if self._closed and first is not None:
                self.insert_vertex_before(vertex, first, edge)
                return

            self._check_new_vertex(vertex)
            self._check_new_edge(edge)
            self._vertices.insert(0, vertex)
            if first is not None:
                self._connect(vertex, first, edge)
            logger.debug("Prepended vertex at %s", vertex.position)
            return

        index = self._require_index(before)
        self._check_new_vertex(vertex)
        self._check_new_edge(edge)

        existing = before.incoming
        if existing is not None:
            existing.head = vertex
            vertex.incoming = existing
        self._vertices.insert(index, vertex)
        self._connect(vertex, before, edge)
        logger.debug("Inserted vertex at %s before index %d", vertex.position, index)

    def remove_vertex(self, vertex: Vertex) -> None:
        """Remove a vertex, closing the gap it leaves.

        An interior vertex's incoming edge is stretched to the vertex's
        successor and its outgoing edge is discarded. An end vertex takes its
        only edge with it. Removing a vertex that is not on the path does
        nothing.

        Args:
            vertex: Vertex to remove
        """
        index = self._index_of(vertex)
        if index is None:
            return

        before, after = vertex.incoming, vertex.outgoing
        if before is not None and after is not None:
            successor = after.head
            before.head = successor
            successor.incoming = before  # type: ignore[union-attr]
            after.tail = after.head = None
        elif before is not None:
            before.tail.outgoing = None  # type: ignore[union-attr]
            before.tail = before.head = None
        elif after is not None:
            after.head.incoming = None  # type: ignore[union-attr]
            after.tail = after.head = None

        del self._vertices[index]
        vertex.detach()

        # A closed path cannot loop a single vertex onto itself
        if self._closed and len(self._vertices) < 2:
            for remaining in self._vertices:
                for edge in (remaining.incoming, remaining.outgoing):
                    if edge is not None:
                        edge.tail = edge.head = None
                remaining.detach()
            self._closed = False

        logger.debug("Removed vertex at %s (index %d)", vertex.position, index)

    def weld(self, edge: Edge | None = None) -> Edge | None:
        """Close the path by joining its tail back to its head.

        Args:
            edge: Closing edge (straight if None)

        Returns:
            The closing edge, or None if the path has fewer than two vertices
            or is already closed
        """
        first, last = self.head, self.tail
        if self._closed or first is None or first is last:
            return None

        self._check_new_edge(edge)
        closing = self._connect(last, first, edge)  # type: ignore[arg-type]
        self._closed = True
        logger.debug("Welded path of %d vertices", len(self._vertices))
        return closing

    def split_side(
        self,
        edge: Edge,
        at: Point,
        direction: Direction = Direction.FORWARD,
        new_edge: Edge | None = None,
    ) -> Vertex:
        """Insert a new vertex logically inside an edge.

        FORWARD inserts after the edge's tail, so ``edge`` ends up running
        from the new vertex to the old head and ``new_edge`` covers the first
        part. BACKWARD inserts before the edge's head, so ``edge`` ends at the
        new vertex and ``new_edge`` covers the second part.

        Args:
            edge: Edge to split
            at: Position of the new vertex
            direction: Side of the edge the new edge is created on
            new_edge: Edge joining the new vertex to the anchor (straight if None)

        Returns:
            The new vertex

        Raises:
            EdgeNotFoundError: If ``edge`` is not on the path
        """
        self._require_edge(edge)
        vertex = Vertex(at)
        if direction is Direction.FORWARD:
            self.insert_vertex_after(vertex, edge.tail, new_edge)
        else:
            self.insert_vertex_before(vertex, edge.head, new_edge)
        return vertex

    def replace_side(self, edge: Edge, new_edge: Edge) -> Edge:
        """Swap an edge for another one between the same two vertices.

        Args:
            edge: Edge currently on the path
            new_edge: Unconnected edge to put in its place

        Returns:
            ``new_edge``, now connected

        Raises:
            EdgeNotFoundError: If ``edge`` is not on the path
        """
        self._require_edge(edge)
        self._check_new_edge(new_edge)

        tail, head = edge.tail, edge.head
        edge.tail = edge.head = None
        self._connect(tail, head, new_edge)  # type: ignore[arg-type]
        logger.debug("Replaced %s with %s", edge.type_name, new_edge.type_name)
        return new_edge

    def move_vertex(self, vertex: Vertex, position: Point) -> None:
        """Move a vertex to a new position.

        Raises:
            VertexNotFoundError: If ``vertex`` is not on the path
        """
        self._require_index(vertex)
        vertex.position = position

    def move_control_point(self, edge: Edge, position: Point) -> None:
        """Move the control point of a curved edge.

        Raises:
            EdgeNotFoundError: If ``edge`` is not on the path
            EdgeKindError: If ``edge`` has no control point
        """
        self._require_edge(edge)
        edge.move_control(position)

    # Queries

    def to_path_commands(self, precision: int = 6) -> str:
        """Render the path as an SVG path data string.

        Returns:
            "M" to the head, one command per edge, and "z" when closed;
            an empty string for an empty path
        """
        first = self.head
        if first is None:
            return ""

        parts = [f"M{first.to_path(precision)}"]
        parts.extend(edge.to_path_command(precision=precision) for edge in self.edges)
        if self._closed:
            parts.append("z")
        return "".join(parts)

    def hit_test(self, at: Point, config: GeometryConfig | None = None) -> HitResult | None:
        """Find the nearest point on any edge.

        Args:
            at: Query point
            config: Curve projection settings

        Returns:
            HitResult for the closest edge, or None if the path has no edges
        """
        hits = (edge.hit_test(at, config) for edge in self.edges)
        return min(hits, key=lambda hit: hit.distance, default=None)

    # Transforms

    def transform(self, matrix: AffineMatrix) -> None:
        """Apply an affine transform to every vertex and control point."""
        edges = self.edges
        for vertex in self._vertices:
            vertex.transform(matrix)
        for edge in edges:
            edge.transform(matrix)

    def scale(self, factor: float | Point, epicenter: Point | None = None) -> None:
        """Scale the path about a fixed point.

        Args:
            factor: Uniform factor or per-axis factors
            epicenter: Fixed point (first vertex, or the origin if empty)
        """
        if epicenter is None:
            epicenter = self.head.position if self.head is not None else ORIGIN
        sx, sy = scale_factors(factor)
        self.transform(AffineMatrix.scaling_about(sx, sy, epicenter))

    # Serialization

    def to_dict(self) -> dict[str, Any]:
        """Serialize vertices, the outgoing edge of each vertex, and closure.

        Returns:
            Dictionary with parallel ``vertices`` and ``edges`` lists
        """
        return {
            "vertices": [encode(v) for v in self._vertices],
            "edges": [
                encode(v.outgoing) if v.outgoing is not None else None
                for v in self._vertices
            ],
            "closed": self._closed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Path":
        """Rebuild a path from its serialized form.

        Args:
            data: Dictionary produced by ``to_dict``

        Returns:
            New path with the same order, edge kinds and closure

        Raises:
            SerializationError: If the lists disagree or edges are missing
        """
        vertices = [decode(v, Vertex) for v in data["vertices"]]
        edges = [decode(e, Edge) if e is not None else None for e in data["edges"]]
        closed = data.get("closed", bool(edges) and edges[-1] is not None)

        if not isinstance(closed, bool):
            raise SerializationError(f"Path closed flag must be a boolean, got {closed!r}")
        if len(vertices) != len(edges):
            raise SerializationError(
                f"Path has {len(vertices)} vertices but {len(edges)} edges"
            )
        if any(edge is None for edge in edges[:-1]):
            raise SerializationError("Path is missing an edge between vertices")
        if edges and (edges[-1] is not None) != closed:
            raise SerializationError("Path closing edge does not match closed flag")
        if closed and len(vertices) < 2:
            raise SerializationError("A closed path needs at least two vertices")

        path = cls()
        for i, vertex in enumerate(vertices):
            path.append_vertex(vertex, edges[i - 1] if i > 0 else None)
        if closed:
            path.weld(edges[-1])
        return path
