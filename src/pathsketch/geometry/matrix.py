"""Affine transformation matrix."""

from dataclasses import dataclass

from pathsketch.geometry.point import Point


@dataclass(frozen=True, slots=True)
class AffineMatrix:
    """A 2D affine transform.

    Maps (x, y) to (a*x + c*y + tx, b*x + d*y + ty). The default instance is
    the identity.

    Chained builders apply left to right: ``AffineMatrix().translate(...)
    .scale(...)`` first translates and then scales a point.
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    def then(self, other: "AffineMatrix") -> "AffineMatrix":
        """Compose with another transform applied after this one.

        Args:
            other: Transform to apply to the result of this one

        Returns:
            Combined transform
        """
        return AffineMatrix(
            a=other.a * self.a + other.c * self.b,
            b=other.b * self.a + other.d * self.b,
            c=other.a * self.c + other.c * self.d,
            d=other.b * self.c + other.d * self.d,
            tx=other.a * self.tx + other.c * self.ty + other.tx,
            ty=other.b * self.tx + other.d * self.ty + other.ty,
        )

    def translate(self, dx: float, dy: float) -> "AffineMatrix":
        """Append a translation."""
        return self.then(AffineMatrix(tx=dx, ty=dy))

    def scale(self, sx: float, sy: float) -> "AffineMatrix":
        """Append a scale about the origin."""
        return self.then(AffineMatrix(a=sx, d=sy))

    def apply(self, point: Point) -> Point:
        """Transform a point.

        Args:
            point: Point to transform

        Returns:
            Transformed point
        """
        return Point(
            self.a * point.x + self.c * point.y + self.tx,
            self.b * point.x + self.d * point.y + self.ty,
        )

    @classmethod
    def scaling_about(cls, sx: float, sy: float, epicenter: Point) -> "AffineMatrix":
        """Build a scale transform whose fixed point is ``epicenter``.

        Args:
            sx: Scale factor along x
            sy: Scale factor along y
            epicenter: Point left in place by the transform

        Returns:
            Transform moving the epicenter to the origin, scaling, and moving back
        """
        return (
            cls()
            .translate(-epicenter.x, -epicenter.y)
            .scale(sx, sy)
            .translate(epicenter.x, epicenter.y)
        )
