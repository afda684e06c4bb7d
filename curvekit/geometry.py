"""Plain 2D value types: points, vectors, sizes, rectangles and affine transforms."""
import math
from dataclasses import dataclass
from typing import Iterable, Optional, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Point:
    """2D point with float coordinates."""
    x: float
    y: float

    def moved_by(self, vector: "Vector") -> "Point":
        """Location of this point after being moved by a vector."""
        return Point(self.x + vector.dx, self.y + vector.dy)

    def vector_to(self, other: "Point") -> "Vector":
        return Vector.between(self, other)

    def is_close_to(self, other: "Point", tolerance: float = 0.0) -> bool:
        """
        Check whether another point lies within tolerance of this one.

        Compares squared distances, so no sqrt is taken. The comparison is
        strict: with the default tolerance of 0 no point is ever close.

        Args:
            other: Point to compare against
            tolerance: Maximum straight-line distance

        Returns:
            True if the distance is below tolerance
        """
        return Vector.between(self, other).square_magnitude < tolerance ** 2


@dataclass(frozen=True)
class Vector:
    """2D displacement."""
    dx: float
    dy: float

    @classmethod
    def between(cls, origin: Point, destination: Point) -> "Vector":
        """Vector from origin to destination."""
        return cls(destination.x - origin.x, destination.y - origin.y)

    @property
    def square_magnitude(self) -> float:
        """Squared length; prefer this when only comparing lengths."""
        return self.dx * self.dx + self.dy * self.dy

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.square_magnitude)

    @property
    def inverse(self) -> "Vector":
        return Vector(-self.dx, -self.dy)

    def dot(self, other: "Vector") -> float:
        return self.dx * other.dx + self.dy * other.dy

    def scaled(self, multiplier: Number) -> "Vector":
        return Vector(self.dx * multiplier, self.dy * multiplier)


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle.

    Min, mid and max accessors work on the standardized rectangle, so a
    negative width or height is treated as extending left or up from the
    origin.
    """
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def bounding(cls, points: Iterable[Point]) -> Optional["Rect"]:
        """Smallest rectangle containing all points, or None if there are none."""
        points = list(points)
        if not points:
            return None
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def min_x(self) -> float:
        return min(self.x, self.x + self.width)

    @property
    def max_x(self) -> float:
        return max(self.x, self.x + self.width)

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def min_y(self) -> float:
        return min(self.y, self.y + self.height)

    @property
    def max_y(self) -> float:
        return max(self.y, self.y + self.height)

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    @property
    def longest_edge(self) -> float:
        """Larger of the raw width and height; not standardized."""
        return max(self.width, self.height)

    @property
    def shortest_edge(self) -> float:
        """Smaller of the raw width and height; not standardized."""
        return min(self.width, self.height)

    def contains(self, point: Point, including_boundary: bool = True) -> bool:
        """
        Check whether the rectangle contains a point.

        Args:
            point: Point to test
            including_boundary: If False, the max edges are excluded
                (half-open on both axes)

        Returns:
            True if the point is inside
        """
        if not including_boundary:
            return (self.min_x <= point.x < self.max_x
                    and self.min_y <= point.y < self.max_y)
        return (self.min_x <= point.x <= self.max_x
                and self.min_y <= point.y <= self.max_y)

    def contains_any(self, points: Iterable[Point], including_boundary: bool = True) -> bool:
        return any(self.contains(p, including_boundary) for p in points)

    def contains_all(self, points: Iterable[Point], including_boundary: bool = True) -> bool:
        return all(self.contains(p, including_boundary) for p in points)

    def intersects(self, other: "Rect") -> bool:
        """True if the rectangles overlap or touch."""
        return (self.min_x <= other.max_x and other.min_x <= self.max_x
                and self.min_y <= other.max_y and other.min_y <= self.max_y)

    def moved_by(self, vector: Vector) -> "Rect":
        """Same size, origin moved by vector."""
        return Rect(self.x + vector.dx, self.y + vector.dy, self.width, self.height)

    def applying(self, transform: "AffineTransform") -> "Rect":
        """Bounding rectangle of the four transformed corners."""
        corners = [
            self.point_min_x_min_y, self.point_max_x_min_y,
            self.point_max_x_max_y, self.point_min_x_max_y,
        ]
        return Rect.bounding(transform.apply(p) for p in corners)

    # Anchors. Named by axis extremes rather than "top left": which corner
    # is on top depends on the coordinate system.
    @property
    def center(self) -> Point:
        return self.point_mid_x_mid_y

    @property
    def point_mid_x_mid_y(self) -> Point:
        return Point(self.mid_x, self.mid_y)

    @property
    def point_min_x_min_y(self) -> Point:
        return Point(self.min_x, self.min_y)

    @property
    def point_mid_x_min_y(self) -> Point:
        return Point(self.mid_x, self.min_y)

    @property
    def point_max_x_min_y(self) -> Point:
        return Point(self.max_x, self.min_y)

    @property
    def point_max_x_mid_y(self) -> Point:
        return Point(self.max_x, self.mid_y)

    @property
    def point_max_x_max_y(self) -> Point:
        return Point(self.max_x, self.max_y)

    @property
    def point_mid_x_max_y(self) -> Point:
        return Point(self.mid_x, self.max_y)

    @property
    def point_min_x_max_y(self) -> Point:
        return Point(self.min_x, self.max_y)

    @property
    def point_min_x_mid_y(self) -> Point:
        return Point(self.min_x, self.mid_y)


@dataclass(frozen=True)
class AffineTransform:
    """
    2D affine transform.

    Maps (x, y) to (a*x + c*y + tx, b*x + d*y + ty).
    """
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls()

    @classmethod
    def translation(cls, tx: float, ty: float) -> "AffineTransform":
        return cls(tx=tx, ty=ty)

    @classmethod
    def scaling(cls, sx: float, sy: float) -> "AffineTransform":
        return cls(a=sx, d=sy)

    @classmethod
    def rotation(cls, angle: float) -> "AffineTransform":
        """Rotation by angle radians about the origin."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return cls(a=cos_a, b=sin_a, c=-sin_a, d=cos_a)

    def concatenating(self, other: "AffineTransform") -> "AffineTransform":
        """Transform that applies self first, then other."""
        return AffineTransform(
            a=self.a * other.a + self.b * other.c,
            b=self.a * other.b + self.b * other.d,
            c=self.c * other.a + self.d * other.c,
            d=self.c * other.b + self.d * other.d,
            tx=self.tx * other.a + self.ty * other.c + other.tx,
            ty=self.tx * other.b + self.ty * other.d + other.ty,
        )

    def apply(self, point: Point) -> Point:
        return Point(
            self.a * point.x + self.c * point.y + self.tx,
            self.b * point.x + self.d * point.y + self.ty,
        )

    @property
    def x_scale(self) -> float:
        """X scale factor. Takes a sqrt; cache it if called in a hot loop."""
        return math.sqrt(self.a * self.a + self.c * self.c)

    @property
    def y_scale(self) -> float:
        """Y scale factor. Takes a sqrt; cache it if called in a hot loop."""
        return math.sqrt(self.b * self.b + self.d * self.d)
