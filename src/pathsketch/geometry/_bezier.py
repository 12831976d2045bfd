"""Internal quadratic Bezier evaluation and projection helpers.

This is an internal module containing helper functions for
nearest_point_on_quadratic. Not intended for public use.
"""

from pathsketch.geometry.point import Point

# 1 / golden ratio
_INV_PHI = 0.6180339887498949


def quadratic_point(p0: Point, p1: Point, p2: Point, t: float) -> Point:
    """Evaluate a quadratic Bezier curve at parameter t.

    Args:
        p0: Start point
        p1: Control point
        p2: End point
        t: Curve parameter in [0, 1]

    Returns:
        Point on the curve
    """
    mt = 1.0 - t
    w0 = mt * mt
    w1 = 2.0 * mt * t
    w2 = t * t
    return Point(
        w0 * p0.x + w1 * p1.x + w2 * p2.x,
        w0 * p0.y + w1 * p1.y + w2 * p2.y,
    )


def _distance_sq(a: Point, b: Point) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def closest_sample(
    points: tuple[Point, Point, Point], target: Point, samples: int
) -> int:
    """Find the lookup-table sample closest to the target.

    Args:
        points: Curve points (p0, p1, p2)
        target: Query point
        samples: Number of intervals; samples + 1 points are evaluated

    Returns:
        Index i of the closest sample, at parameter i / samples
    """
    p0, p1, p2 = points
    best_index = 0
    best_dist = _distance_sq(p0, target)

    for i in range(1, samples + 1):
        dist = _distance_sq(quadratic_point(p0, p1, p2, i / samples), target)
        if dist < best_dist:
            best_dist = dist
            best_index = i

    return best_index


def refine_projection(
    points: tuple[Point, Point, Point],
    target: Point,
    lo: float,
    hi: float,
    tolerance: float,
) -> float:
    """Golden-section search for the closest parameter within [lo, hi].

    The bracket comes from the lookup table, so the squared distance is
    unimodal inside it for all but degenerate curves.

    Args:
        points: Curve points (p0, p1, p2)
        target: Query point
        lo: Lower parameter bound
        hi: Upper parameter bound
        tolerance: Stop once the bracket is narrower than this

    Returns:
        Parameter of the closest point found
    """
    p0, p1, p2 = points

    def cost(t: float) -> float:
        return _distance_sq(quadratic_point(p0, p1, p2, t), target)

    a, b = lo, hi
    c = b - _INV_PHI * (b - a)
    d = a + _INV_PHI * (b - a)
    fc, fd = cost(c), cost(d)

    while b - a > tolerance:
        if fc < fd:
            b, d, fd = d, c, fc
            c = b - _INV_PHI * (b - a)
            fc = cost(c)
        else:
            a, c, fc = c, d, fd
            d = a + _INV_PHI * (b - a)
            fd = cost(d)

    # Endpoints of the bracket may beat the interior estimate
    best = (a + b) / 2.0
    for candidate in (lo, hi):
        if cost(candidate) < cost(best):
            best = candidate
    return best
