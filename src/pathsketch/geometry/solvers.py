"""Nearest-point solvers used for hit-testing.

This module provides the closest-point queries behind every shape's
hit-test:
- Finite line segments (exact projection with clamping)
- Circles (radial projection)
- Quadratic Bezier curves (lookup table + golden-section refinement)

All functions are pure and stateless.
"""

import math

from pathsketch.geometry._bezier import (
    closest_sample,
    quadratic_point,
    refine_projection,
)
from pathsketch.geometry.point import Point


def nearest_point_on_segment(point: Point, seg_start: Point, seg_end: Point) -> tuple[Point, float]:
    """Find the closest point on a line segment to a given point.

    Projects the point onto the infinite line, then clamps to the segment endpoints.

    Args:
        point: The point to project
        seg_start: Start point of line segment
        seg_end: End point of line segment

    Returns:
        Tuple of (nearest_point, distance) where nearest_point is the closest
        point on the segment and distance is the Euclidean distance to it

    Examples:
        >>> nearest_point_on_segment(Point(5.0, 5.0), Point(0.0, 0.0), Point(10.0, 0.0))
        (Point(x=5.0, y=0.0), 5.0)
    """
    dx = seg_end.x - seg_start.x
    dy = seg_end.y - seg_start.y

    # Handle zero-length segment
    segment_length_sq = dx * dx + dy * dy
    if segment_length_sq < 1e-12:
        return seg_start, point.distance_to(seg_start)

    # t = dot(point - start, end - start) / ||end - start||^2
    t = ((point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy) / segment_length_sq
    t = max(0.0, min(1.0, t))

    nearest = Point(seg_start.x + t * dx, seg_start.y + t * dy)
    return nearest, point.distance_to(nearest)


def nearest_point_on_circle(point: Point, center: Point, radius: float) -> tuple[Point, float]:
    """Find the closest point on a circle's outline to a given point.

    Points exactly at the center are equidistant from the whole outline; the
    rightmost point of the circle is returned for them.

    Args:
        point: The point to project
        center: Circle center
        radius: Circle radius

    Returns:
        Tuple of (nearest_point, distance)
    """
    dx = point.x - center.x
    dy = point.y - center.y
    length = math.hypot(dx, dy)

    if length < 1e-12:
        return Point(center.x + radius, center.y), abs(radius)

    nearest = Point(center.x + dx / length * radius, center.y + dy / length * radius)
    return nearest, abs(length - radius)


def nearest_point_on_quadratic(
    point: Point,
    p0: Point,
    p1: Point,
    p2: Point,
    samples: int = 100,
    tolerance: float = 1e-9,
) -> tuple[Point, float]:
    """Project a point onto a quadratic Bezier curve.

    The curve is sampled at ``samples + 1`` evenly spaced parameters; the
    best sample's neighbourhood is then searched with golden-section
    refinement.

    Args:
        point: The point to project
        p0: Curve start point
        p1: Control point
        p2: Curve end point
        samples: Number of lookup intervals
        tolerance: Parameter interval at which refinement stops

    Returns:
        Tuple of (nearest_point, distance)

    Raises:
        ValueError: If samples is not positive
    """
    if samples <= 0:
        raise ValueError(f"samples must be positive, got {samples}")

    curve = (p0, p1, p2)
    index = closest_sample(curve, point, samples)
    lo = max(0.0, (index - 1) / samples)
    hi = min(1.0, (index + 1) / samples)

    t = refine_projection(curve, point, lo, hi, tolerance)
    nearest = quadratic_point(p0, p1, p2, t)
    return nearest, point.distance_to(nearest)
