"""Interactive editing session over a single path.

PathEditor turns pointer-level requests (hit this point, add a vertex here,
bend that edge) into structural Path operations. It keeps the small amount
of state an interactive editor needs between requests: the last outline
hit ("spot") and the end new vertices attach to.

Example:
    editor = PathEditor(path)
    if editor.hit(Point(5, 1)):
        vertex = editor.edit(Point(5, 1))  # splits the hit edge
"""

import structlog

from pathsketch.config import PathsketchSettings, get_default_settings
from pathsketch.domain import (
    Direction,
    Edge,
    HitResult,
    Path,
    QuadraticBezierEdge,
    Vertex,
)
from pathsketch.exceptions import PathsketchError, VertexNotFoundError
from pathsketch.geometry import Point
from pathsketch.utils import EditLogger, EditStats


class PathEditor:
    """Applies editing gestures to a Path.

    The attach direction starts from settings and changes with each hit:
    a hit on an edge sets it from the edge's direction heuristic, grabbing
    a vertex sets it to BACKWARD.
    """

    def __init__(
        self,
        path: Path,
        settings: PathsketchSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the editor.

        Args:
            path: Path to edit in place
            settings: Application settings (defaults if None)
            logger: Structured logger (module logger if None)
        """
        settings = settings or get_default_settings()
        self.path = path
        self._geometry = settings.geometry
        self._direction = Direction[settings.editor.initial_direction.name]
        self._spot: HitResult | None = None
        self._log = EditLogger(logger or structlog.get_logger(__name__))

    @property
    def direction(self) -> Direction:
        """End or side that the next edit attaches to."""
        return self._direction

    @property
    def spot(self) -> HitResult | None:
        """Outline point remembered from the last hit, if any."""
        return self._spot

    @property
    def stats(self) -> EditStats:
        return self._log.stats

    def hit(self, at: Point) -> HitResult | None:
        """Hit-test the path and remember the result for the next edit.

        Args:
            at: Query point

        Returns:
            The hit, or None if the path has no edges
        """
        self.unhit()
        hit = self.path.hit_test(at, self._geometry)
        if hit is None or hit.edge is None:
            return None

        self._spot = hit
        self._direction = hit.edge.get_direction(hit.point)
        self._log.log_hit(at, hit.point, hit.distance, hit.edge.type_name)
        return hit

    def unhit(self) -> None:
        """Forget the remembered spot."""
        self._spot = None

    def edit(self, at: Point) -> Vertex:
        """Add a vertex at ``at``.

        Splits the remembered edge when there is a spot, otherwise extends
        the path at the end given by the current direction.

        Args:
            at: Position of the new vertex

        Returns:
            The new vertex

        Raises:
            PathsketchError: If the remembered edge is no longer on the path
        """
        spot, self._spot = self._spot, None
        try:
            if spot is not None and spot.edge is not None:
                vertex = self.path.split_side(spot.edge, at, self._direction)
            else:
                vertex = self.path.create_vertex(at, self._direction)
        except PathsketchError as e:
            self._log.log_edit_error("edit", e)
            raise

        self._log.log_vertex_added(
            vertex.position, self._direction.name.lower(), split=spot is not None
        )
        return vertex

    def grab_vertex(self, vertex: Vertex) -> None:
        """Grab a vertex so that the next free edit prepends to the path.

        Raises:
            VertexNotFoundError: If ``vertex`` is not on the path
        """
        if vertex not in self.path:
            error = VertexNotFoundError(vertex.position)
            self._log.log_edit_error("grab_vertex", error)
            raise error
        self.unhit()
        self._direction = Direction.BACKWARD

    def move_vertex(self, vertex: Vertex, at: Point) -> None:
        """Move a vertex to a new position."""
        self.unhit()
        old = vertex.position
        try:
            self.path.move_vertex(vertex, at)
        except PathsketchError as e:
            self._log.log_edit_error("move_vertex", e)
            raise
        self._log.log_vertex_moved(old, at)

    def delete_vertex(self, vertex: Vertex) -> None:
        """Remove a vertex; vertices not on the path are ignored."""
        self.unhit()
        if vertex not in self.path:
            return
        self.path.remove_vertex(vertex)
        self._log.log_vertex_removed(vertex.position)

    def bend(self, edge: Edge, control: Point) -> QuadraticBezierEdge:
        """Curve an edge through a control point.

        A straight edge is replaced by a quadratic curve; a curve just has
        its control point moved.

        Args:
            edge: Edge on the path
            control: New control point

        Returns:
            The curved edge now on the path
        """
        self.unhit()
        try:
            if isinstance(edge, QuadraticBezierEdge):
                self.path.move_control_point(edge, control)
                curve = edge
            else:
                curve = self.path.replace_side(edge, QuadraticBezierEdge.through(control))
        except PathsketchError as e:
            self._log.log_edit_error("bend", e)
            raise

        self._log.log_edge_bent(control, replaced=curve is not edge)
        return curve
