"""Core curve types, output configuration and exceptions."""
import warnings
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union

import numpy as np
from scipy.special import comb

from curvekit.geometry import AffineTransform, Point, Rect

# RGB(A) with components in [0, 1]
Color = Union[Tuple[float, float, float], Tuple[float, float, float, float]]


@dataclass(frozen=True)
class BezierCurve:
    """Cubic bezier curve segment."""
    p0: Point
    p1: Point  # Control point
    p2: Point  # Control point
    p3: Point


@dataclass(frozen=True)
class CurveSegment:
    """Cubic segment whose start is the previous segment's end."""
    end: Point
    control1: Point
    control2: Point


def _bernstein_basis(t: np.ndarray) -> np.ndarray:
    """(len(t), 4) cubic Bernstein basis matrix."""
    return np.array([comb(3, i) * (t ** i) * ((1 - t) ** (3 - i))
                     for i in range(4)]).T


@dataclass(frozen=True)
class Curve:
    """
    Piecewise cubic curve.

    A start point followed by segments, each ending where the next one
    starts. An empty curve has no start and no segments. When closed, the
    last segment ends on the start point and renderers should close the
    outline.
    """
    start: Optional[Point] = None
    segments: Tuple[CurveSegment, ...] = ()
    closed: bool = False

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def is_empty(self) -> bool:
        return not self.segments

    def on_curve_points(self) -> List[Point]:
        """Start point followed by every segment end point, in order."""
        if self.start is None:
            return []
        return [self.start] + [seg.end for seg in self.segments]

    def bezier_curves(self) -> Iterator[BezierCurve]:
        """Yield each segment with its start point made explicit."""
        prev = self.start
        for seg in self.segments:
            yield BezierCurve(prev, seg.control1, seg.control2, seg.end)
            prev = seg.end

    def control_points(self) -> np.ndarray:
        """
        All points defining the curve as an (N, 2) array.

        Order is start, then (control1, control2, end) per segment.
        """
        if self.start is None:
            return np.empty((0, 2))
        coords = [(self.start.x, self.start.y)]
        for seg in self.segments:
            coords.extend([
                (seg.control1.x, seg.control1.y),
                (seg.control2.x, seg.control2.y),
                (seg.end.x, seg.end.y),
            ])
        return np.array(coords, dtype=np.float64)

    def bounds(self) -> Optional[Rect]:
        """
        Bounding box of the on-curve and control points.

        The convex hull property guarantees this contains the curve,
        though it may be looser than the tight bounds.
        """
        if self.start is None:
            return None
        pts = self.control_points()
        lo = pts.min(axis=0)
        hi = pts.max(axis=0)
        return Rect(float(lo[0]), float(lo[1]),
                    float(hi[0] - lo[0]), float(hi[1] - lo[1]))

    def sample(self, samples_per_segment: int = 16) -> np.ndarray:
        """
        Evaluate the curve into a polyline.

        Args:
            samples_per_segment: Points evaluated per segment, including
                both ends

        Returns:
            (M, 2) array; shared segment endpoints appear once
        """
        if self.start is None:
            return np.empty((0, 2))
        if not self.segments:
            return np.array([[self.start.x, self.start.y]], dtype=np.float64)

        basis = _bernstein_basis(np.linspace(0.0, 1.0, max(2, samples_per_segment)))
        pts = self.control_points()
        polyline = [pts[:1]]
        for i in range(len(self.segments)):
            ctrl = pts[3 * i:3 * i + 4]
            polyline.append((basis @ ctrl)[1:])
        return np.vstack(polyline)

    def applying(self, transform: AffineTransform) -> "Curve":
        """Curve with every point mapped through transform."""
        if self.start is None:
            return self
        segments = tuple(
            CurveSegment(
                end=transform.apply(seg.end),
                control1=transform.apply(seg.control1),
                control2=transform.apply(seg.control2),
            )
            for seg in self.segments
        )
        return Curve(transform.apply(self.start), segments, self.closed)


@dataclass
class RenderConfig:
    """Configuration for SVG and raster output."""
    # SVG
    precision: int = 2  # Decimal places for SVG coordinates

    # Stroke and fill, RGB(A) in [0, 1]; None disables
    stroke_color: Optional[Color] = (0.0, 0.0, 0.0)
    stroke_width: float = 2.0
    fill_color: Optional[Color] = None

    # Raster
    background: Color = (1.0, 1.0, 1.0, 0.0)
    samples_per_segment: int = 16

    # Skip curves entirely outside the canvas
    cull_offscreen: bool = True

    def __post_init__(self):
        if self.precision < 0:
            raise ConfigError(f"precision must be >= 0, got {self.precision}")
        if self.stroke_width <= 0:
            raise ConfigError(f"stroke_width must be > 0, got {self.stroke_width}")
        if self.samples_per_segment < 2:
            raise ConfigError(
                f"samples_per_segment must be >= 2, got {self.samples_per_segment}"
            )
        if self.stroke_color is None and self.fill_color is None:
            warnings.warn("Neither stroke nor fill is set; nothing will be drawn.")


class CurveKitError(Exception):
    """Base exception for curvekit errors."""
    pass


class ConfigError(CurveKitError):
    """Exception raised for invalid configuration values."""
    pass


class ImageError(CurveKitError):
    """Exception raised when an image cannot be loaded or transformed."""
    pass


class URLQueryItemsError(CurveKitError):
    """Base exception for URL query editing."""
    pass


class CannotGetComponentsError(URLQueryItemsError):
    """The URL could not be split into components."""

    def __init__(self, url: str):
        super().__init__(f"Cannot get components from URL: {url!r}")
        self.url = url


class CannotGetURLError(URLQueryItemsError):
    """The edited components could not be reassembled into a URL."""

    def __init__(self, components):
        super().__init__(f"Cannot get URL from components: {components!r}")
        self.components = components
