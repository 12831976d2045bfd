"""Unit tests for the Path model.

Tests cover:
- Vertex creation at both ends, insertion and removal
- Welding, splitting and replacing edges
- Hit-testing, path commands and scaling
- Link consistency after every structural change
"""

import pytest

from pathsketch.domain import (
    Direction,
    Path,
    Point,
    QuadraticBezierEdge,
    StraightEdge,
    Vertex,
)
from pathsketch.exceptions import (
    EdgeKindError,
    EdgeNotFoundError,
    GeometryError,
    VertexNotFoundError,
)


def assert_linked(path: Path) -> None:
    """Check the doubly linked structure of a path."""
    vertices = path.vertices
    n = len(vertices)
    if n == 0:
        assert not path.closed
        assert path.edges == []
        return

    for i in range(n - 1):
        edge = vertices[i].outgoing
        assert edge is not None
        assert edge.tail is vertices[i]
        assert edge.head is vertices[i + 1]
        assert vertices[i + 1].incoming is edge

    if path.closed:
        closing = vertices[-1].outgoing
        assert closing is not None
        assert closing.tail is vertices[-1]
        assert closing.head is vertices[0]
        assert vertices[0].incoming is closing
        assert len(path.edges) == n
    else:
        assert vertices[0].incoming is None
        assert vertices[-1].outgoing is None
        assert len(path.edges) == n - 1

    edge_ids = [id(e) for e in path.edges]
    assert len(edge_ids) == len(set(edge_ids))


def positions(path: Path) -> list[Point]:
    return [v.position for v in path.vertices]


def make_path(*points: tuple[float, float], closed: bool = False) -> Path:
    path = Path.create()
    for x, y in points:
        path.create_vertex(Point(x, y))
    if closed:
        path.weld()
    return path


class TestCreateVertex:
    """Tests for Path.create_vertex."""

    def test_first_vertex_has_no_edges(self) -> None:
        """Test a single vertex is both head and tail."""
        path = Path.create()
        v = path.create_vertex(Point(1, 1))
        assert path.head is v
        assert path.tail is v
        assert v.is_lone
        assert path.edges == []

    def test_forward_appends(self) -> None:
        """Test FORWARD connects the old tail to the new vertex."""
        path = make_path((0, 0), (10, 0))
        v = path.create_vertex(Point(10, 10))
        assert path.tail is v
        assert positions(path) == [Point(0, 0), Point(10, 0), Point(10, 10)]
        assert_linked(path)

    def test_backward_prepends(self) -> None:
        """Test BACKWARD connects the new vertex to the old head."""
        path = make_path((0, 0), (10, 0))
        v = path.create_vertex(Point(-5, 0), Direction.BACKWARD)
        assert path.head is v
        assert positions(path)[0] == Point(-5, 0)
        assert_linked(path)

    def test_uses_supplied_edge(self) -> None:
        """Test the supplied edge joins the new vertex."""
        path = make_path((0, 0))
        curve = QuadraticBezierEdge.through(Point(5, 5))
        v = path.create_vertex(Point(10, 0), edge=curve)
        assert v.incoming is curve
        assert path.edges == [curve]

    def test_append_to_closed_path_keeps_it_closed(self) -> None:
        """Test appending splices into the closing edge."""
        path = make_path((0, 0), (10, 0), (10, 10), closed=True)
        v = path.create_vertex(Point(0, 10))
        assert path.closed
        assert path.tail is v
        assert v.outgoing.head is path.head
        assert_linked(path)

    def test_prepend_to_closed_path_keeps_it_closed(self) -> None:
        """Test prepending splices before the first vertex."""
        path = make_path((0, 0), (10, 0), (10, 10), closed=True)
        v = path.create_vertex(Point(0, 10), Direction.BACKWARD)
        assert path.closed
        assert path.head is v
        assert_linked(path)


class TestWeld:
    """Tests for Path.weld."""

    def test_weld_closes_path(self) -> None:
        """Test weld on a 3-vertex path."""
        path = make_path((0, 0), (10, 0), (10, 10))
        closing = path.weld()
        assert path.closed
        assert closing is not None
        assert path.to_path_commands() == "M0 0L10 0L10 10L0 0z"
        assert path.to_path_commands().endswith("z")
        assert_linked(path)

    def test_weld_twice_is_noop(self) -> None:
        """Test a second weld adds no closing edge."""
        path = make_path((0, 0), (10, 0), (10, 10))
        path.weld()
        commands = path.to_path_commands()
        assert path.weld() is None
        assert len(path.edges) == 3
        assert path.to_path_commands() == commands

    def test_weld_single_vertex_is_noop(self) -> None:
        """Test a lone vertex cannot be welded to itself."""
        path = make_path((0, 0))
        assert path.weld() is None
        assert not path.closed
        assert path.head.is_lone

    def test_weld_with_curve(self) -> None:
        """Test a supplied closing edge."""
        path = make_path((0, 0), (10, 0))
        path.weld(QuadraticBezierEdge.through(Point(5, -5)))
        assert path.to_path_commands() == "M0 0L10 0Q5 -5, 0 0z"


class TestInsertVertex:
    """Tests for insert_vertex_after and insert_vertex_before."""

    def test_insert_after_interior(self) -> None:
        """Test the anchor's outgoing edge now starts at the new vertex."""
        path = make_path((0, 0), (10, 0), (20, 0))
        a, b, _ = path.vertices
        original = a.outgoing
        v = Vertex(Point(5, 5))
        path.insert_vertex_after(v, a)
        assert path.vertices[1] is v
        assert original.tail is v
        assert original.head is b
        assert isinstance(a.outgoing, StraightEdge)
        assert a.outgoing is not original
        assert_linked(path)

    def test_insert_before_interior(self) -> None:
        """Test the anchor's incoming edge now ends at the new vertex."""
        path = make_path((0, 0), (10, 0), (20, 0))
        a, b, _ = path.vertices
        original = b.incoming
        v = Vertex(Point(5, 5))
        path.insert_vertex_before(v, b)
        assert path.vertices[1] is v
        assert original.tail is a
        assert original.head is v
        assert_linked(path)

    def test_insert_after_tail_appends(self) -> None:
        """Test inserting after the tail extends the path."""
        path = make_path((0, 0), (10, 0))
        v = Vertex(Point(20, 0))
        path.insert_vertex_after(v, path.tail)
        assert path.tail is v
        assert_linked(path)

    def test_none_anchor_behaves_like_create(self) -> None:
        """Test None anchors append or prepend."""
        path = make_path((0, 0), (10, 0))
        first, last = Vertex(Point(-10, 0)), Vertex(Point(20, 0))
        path.insert_vertex_before(first, None)
        path.insert_vertex_after(last, None)
        assert path.head is first
        assert path.tail is last
        assert_linked(path)

    def test_unknown_anchor_raises(self) -> None:
        """Test a non-member anchor leaves the path untouched."""
        path = make_path((0, 0), (10, 0))
        before = path.to_path_commands()
        stranger = Vertex(Point(0, 0))
        with pytest.raises(VertexNotFoundError):
            path.insert_vertex_after(Vertex(Point(1, 1)), stranger)
        with pytest.raises(VertexNotFoundError):
            path.insert_vertex_before(Vertex(Point(1, 1)), stranger)
        assert len(path) == 2
        assert path.to_path_commands() == before
        assert_linked(path)

    def test_reinserting_member_raises(self) -> None:
        """Test a vertex cannot appear twice."""
        path = make_path((0, 0), (10, 0))
        with pytest.raises(GeometryError):
            path.insert_vertex_after(path.head, path.tail)
        assert_linked(path)

    def test_attached_edge_rejected(self) -> None:
        """Test an edge that already connects vertices is refused."""
        path = make_path((0, 0), (10, 0))
        used = path.edges[0]
        with pytest.raises(GeometryError):
            path.insert_vertex_after(Vertex(Point(5, 0)), path.head, used)
        assert len(path) == 2
        assert_linked(path)


class TestRemoveVertex:
    """Tests for Path.remove_vertex."""

    def test_remove_interior_extends_incoming_edge(self) -> None:
        """Test A-B-C minus B leaves one edge A->C."""
        path = make_path((0, 0), (5, 5), (10, 0))
        a, b, c = path.vertices
        ab, bc = a.outgoing, b.outgoing
        path.remove_vertex(b)
        assert path.vertices == [a, c]
        assert path.edges == [ab]
        assert ab.tail is a
        assert ab.head is c
        assert c.incoming is ab
        assert bc.tail is None and bc.head is None
        assert b.is_lone
        assert_linked(path)

    def test_remove_keeps_edge_kind(self) -> None:
        """Test the surviving edge keeps its kind."""
        path = make_path((0, 0))
        path.create_vertex(Point(5, 5), edge=QuadraticBezierEdge.through(Point(2, 5)))
        path.create_vertex(Point(10, 0))
        path.remove_vertex(path.vertices[1])
        assert isinstance(path.edges[0], QuadraticBezierEdge)
        assert path.to_path_commands() == "M0 0Q2 5, 10 0"

    def test_remove_head(self) -> None:
        """Test removing the head drops its outgoing edge."""
        path = make_path((0, 0), (5, 5), (10, 0))
        _, b, _ = path.vertices
        path.remove_vertex(path.head)
        assert path.head is b
        assert b.incoming is None
        assert_linked(path)

    def test_remove_tail(self) -> None:
        """Test removing the tail drops its incoming edge."""
        path = make_path((0, 0), (5, 5), (10, 0))
        _, b, _ = path.vertices
        path.remove_vertex(path.tail)
        assert path.tail is b
        assert b.outgoing is None
        assert_linked(path)

    def test_remove_from_closed_path(self) -> None:
        """Test a closed triangle stays closed when losing a vertex."""
        path = make_path((0, 0), (10, 0), (10, 10), closed=True)
        path.remove_vertex(path.vertices[1])
        assert path.closed
        assert path.to_path_commands() == "M0 0L10 10L0 0z"
        assert_linked(path)

    def test_closed_path_down_to_one_vertex_opens(self) -> None:
        """Test a lone survivor is not looped onto itself."""
        path = make_path((0, 0), (10, 0), (10, 10), closed=True)
        path.remove_vertex(path.vertices[2])
        path.remove_vertex(path.vertices[1])
        assert not path.closed
        assert path.head.is_lone
        assert path.to_path_commands() == "M0 0"
        assert_linked(path)

    def test_remove_non_member_is_noop(self) -> None:
        """Test removing a stranger does nothing."""
        path = make_path((0, 0), (10, 0))
        path.remove_vertex(Vertex(Point(0, 0)))
        assert len(path) == 2
        assert_linked(path)

    def test_remove_then_reinsert_restores_order(self) -> None:
        """Test re-inserting a removed vertex at the same anchor."""
        path = make_path((0, 0), (5, 5), (10, 0))
        a, b, c = path.vertices
        path.remove_vertex(b)
        path.insert_vertex_after(b, a, StraightEdge())
        assert path.vertices == [a, b, c]
        assert all(isinstance(e, StraightEdge) for e in path.edges)
        assert path.to_path_commands() == "M0 0L5 5L10 0"
        assert_linked(path)


class TestSplitSide:
    """Tests for Path.split_side."""

    def test_split_forward(self) -> None:
        """Test splitting (0,0)-(10,0) at (5,0) after the tail."""
        path = make_path((0, 0), (10, 0))
        edge = path.edges[0]
        v = path.split_side(edge, Point(5, 0), Direction.FORWARD)
        assert v.position == Point(5, 0)
        first, second = path.edges
        assert isinstance(first, StraightEdge) and isinstance(second, StraightEdge)
        assert first.endpoints() == (Point(0, 0), Point(5, 0))
        assert second.endpoints() == (Point(5, 0), Point(10, 0))
        assert second is edge
        assert_linked(path)

    def test_split_backward(self) -> None:
        """Test splitting before the head keeps the edge as the first part."""
        path = make_path((0, 0), (10, 0))
        edge = path.edges[0]
        v = path.split_side(edge, Point(5, 0), Direction.BACKWARD)
        first, second = path.edges
        assert first is edge
        assert edge.head is v
        assert second.endpoints() == (Point(5, 0), Point(10, 0))
        assert_linked(path)

    def test_split_curve_forward(self) -> None:
        """Test the curve moves to the second part when splitting forward."""
        path = make_path((0, 0))
        path.create_vertex(Point(10, 0), edge=QuadraticBezierEdge.through(Point(5, 5)))
        path.split_side(path.edges[0], Point(5, 2.5))
        kinds = [type(e) for e in path.edges]
        assert kinds == [StraightEdge, QuadraticBezierEdge]
        assert_linked(path)

    def test_split_closing_edge(self) -> None:
        """Test splitting the closing edge of a closed path."""
        path = make_path((0, 0), (10, 0), (10, 10), closed=True)
        closing = path.tail.outgoing
        v = path.split_side(closing, Point(5, 5))
        assert path.tail is v
        assert path.closed
        assert_linked(path)

    def test_split_foreign_edge_raises(self) -> None:
        """Test an edge from another path is rejected."""
        path = make_path((0, 0), (10, 0))
        other = make_path((0, 0), (10, 0))
        with pytest.raises(EdgeNotFoundError):
            path.split_side(other.edges[0], Point(5, 0))
        assert len(path) == 2


class TestReplaceSide:
    """Tests for Path.replace_side."""

    def test_replace_straight_with_curve(self) -> None:
        """Test both vertices point at the new edge."""
        path = make_path((0, 0), (10, 0))
        a, b = path.vertices
        old = path.edges[0]
        curve = path.replace_side(old, QuadraticBezierEdge.through(Point(5, 5)))
        assert a.outgoing is curve
        assert b.incoming is curve
        assert curve.tail is a and curve.head is b
        assert old.tail is None and old.head is None
        assert path.to_path_commands() == "M0 0Q5 5, 10 0"
        assert_linked(path)

    def test_replace_closing_edge(self) -> None:
        """Test the closing edge can be replaced."""
        path = make_path((0, 0), (10, 0), (10, 10), closed=True)
        closing = path.tail.outgoing
        curve = path.replace_side(closing, QuadraticBezierEdge.through(Point(0, 10)))
        assert path.head.incoming is curve
        assert path.to_path_commands().endswith("Q0 10, 0 0z")
        assert_linked(path)

    def test_replace_unknown_edge_raises(self) -> None:
        """Test a detached edge cannot be replaced."""
        path = make_path((0, 0), (10, 0))
        with pytest.raises(EdgeNotFoundError):
            path.replace_side(StraightEdge(), StraightEdge())

    def test_replace_with_attached_edge_raises(self) -> None:
        """Test the new edge must be unconnected."""
        path = make_path((0, 0), (10, 0), (20, 0))
        first, second = path.edges
        with pytest.raises(GeometryError):
            path.replace_side(first, second)
        assert_linked(path)


class TestHitTest:
    """Tests for Path.hit_test."""

    def test_empty_path_has_no_hit(self) -> None:
        """Test no edges means no result."""
        assert Path.create().hit_test(Point(0, 0)) is None
        assert make_path((1, 1)).hit_test(Point(0, 0)) is None

    def test_hit_picks_nearest_edge(self) -> None:
        """Test the globally nearest edge wins."""
        path = make_path((0, 0), (10, 0), (10, 10))
        hit = path.hit_test(Point(12, 5))
        assert hit is not None
        assert hit.edge is path.edges[1]
        assert hit.point == Point(10, 5)
        assert hit.distance == pytest.approx(2.0)

    def test_hit_includes_closing_edge(self) -> None:
        """Test the closing edge takes part in hit-testing."""
        path = make_path((0, 0), (10, 0), (10, 10), closed=True)
        hit = path.hit_test(Point(4, 6))
        assert hit is not None
        assert hit.edge is path.tail.outgoing


class TestPathCommands:
    """Tests for Path.to_path_commands."""

    def test_empty(self) -> None:
        """Test an empty path renders as an empty string."""
        assert Path.create().to_path_commands() == ""

    def test_open_mixed(self) -> None:
        """Test a mix of line and curve commands."""
        path = make_path((0, 0), (10, 0))
        path.create_vertex(Point(20, 0), edge=QuadraticBezierEdge.through(Point(15, 5)))
        assert path.to_path_commands() == "M0 0L10 0Q15 5, 20 0"

    def test_fractional_coordinates(self) -> None:
        """Test decimals are printed compactly."""
        path = make_path((0.5, 1.25), (-3, 2))
        assert path.to_path_commands() == "M0.5 1.25L-3 2"
        assert path.to_path_commands(precision=0) == "M0 1L-3 2"


class TestScale:
    """Tests for Path.scale."""

    def test_scale_about_origin(self) -> None:
        """Test vertices and control points are scaled."""
        path = make_path((3, 4))
        path.create_vertex(Point(0, 0), edge=QuadraticBezierEdge.through(Point(1, 1)))
        path.scale(2, Point(0, 0))
        assert path.head.position == Point(6, 8)
        assert path.edges[0].control == Point(2, 2)

    def test_default_epicenter_is_first_vertex(self) -> None:
        """Test the first vertex stays put by default."""
        path = make_path((1, 1), (3, 1))
        path.scale(2)
        assert positions(path) == [Point(1, 1), Point(5, 1)]

    def test_per_axis_factor(self) -> None:
        """Test independent x and y factors."""
        path = make_path((3, 4), (1, 1))
        path.scale(Point(2, 3), Point(0, 0))
        assert positions(path) == [Point(6, 12), Point(2, 3)]

    def test_scale_closed_path_moves_each_vertex_once(self) -> None:
        """Test the closing edge does not transform vertices twice."""
        path = make_path((0, 0), (1, 0), (1, 1), closed=True)
        path.scale(2, Point(0, 0))
        assert positions(path) == [Point(0, 0), Point(2, 0), Point(2, 2)]
        assert_linked(path)

    def test_scale_empty_path(self) -> None:
        """Test scaling an empty path is harmless."""
        path = Path.create()
        path.scale(3)
        assert len(path) == 0


class TestMoves:
    """Tests for move_vertex and move_control_point."""

    def test_move_vertex(self) -> None:
        """Test a member vertex can be moved."""
        path = make_path((0, 0), (10, 0))
        path.move_vertex(path.tail, Point(10, 10))
        assert path.to_path_commands() == "M0 0L10 10"

    def test_move_unknown_vertex_raises(self) -> None:
        """Test a stranger vertex is rejected."""
        path = make_path((0, 0), (10, 0))
        with pytest.raises(VertexNotFoundError):
            path.move_vertex(Vertex(Point(0, 0)), Point(1, 1))

    def test_move_control_point(self) -> None:
        """Test a curve's control point can be moved."""
        path = make_path((0, 0))
        path.create_vertex(Point(10, 0), edge=QuadraticBezierEdge.through(Point(5, 5)))
        path.move_control_point(path.edges[0], Point(5, -5))
        assert path.to_path_commands() == "M0 0Q5 -5, 10 0"

    def test_move_control_point_of_straight_edge_raises(self) -> None:
        """Test straight edges have no control point."""
        path = make_path((0, 0), (10, 0))
        with pytest.raises(EdgeKindError):
            path.move_control_point(path.edges[0], Point(5, 5))
