"""Smooth curves through point sequences using Hermite splines."""
import logging
from typing import Sequence, Tuple, Union

import numpy as np

from curvekit.geometry import Point
from curvekit.types import Curve, CurveSegment

logger = logging.getLogger(__name__)

PointLike = Union[Point, Tuple[float, float]]

# Control point offset for a quarter-circle cubic: 4/3 * (sqrt(2) - 1)
KAPPA = 0.5522847498307936


def as_point_array(points: Union[Sequence[PointLike], np.ndarray]) -> np.ndarray:
    """
    Convert points to an (N, 2) float array.

    Args:
        points: Point objects, (x, y) pairs, or an (N, 2) array

    Returns:
        (N, 2) float64 array
    """
    if isinstance(points, np.ndarray):
        arr = points.astype(np.float64)
    else:
        arr = np.array(
            [(p.x, p.y) if isinstance(p, Point) else (p[0], p[1]) for p in points],
            dtype=np.float64,
        )
    if arr.size == 0:
        return np.empty((0, 2))
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected (N, 2) points, got shape {arr.shape}")
    return arr


def _point(xy: np.ndarray) -> Point:
    return Point(float(xy[0]), float(xy[1]))


def build_hermite_spline(
    points: Union[Sequence[PointLike], np.ndarray],
    closed: bool = False
) -> Curve:
    """
    Build a smooth curve passing through every point.

    Each span becomes a cubic bezier whose control points come from
    Catmull-Rom tangents: half the sum of the differences to the
    neighbouring points. Open curves use one-sided differences at their
    two endpoints. Closed curves wrap around, so the tangent is continuous
    across the seam.

    Args:
        points: Points to pass through, in order
        closed: If True, add a segment back to the first point

    Returns:
        Curve starting at points[0]. Empty for fewer than 2 points; a
        single straight segment for exactly 2.
    """
    pts = as_point_array(points)
    n_points = len(pts)

    if n_points < 2:
        return Curve()

    if n_points == 2:
        # Straight line: controls at thirds
        span = pts[1] - pts[0]
        segment = CurveSegment(
            end=_point(pts[1]),
            control1=_point(pts[0] + span / 3.0),
            control2=_point(pts[1] - span / 3.0),
        )
        return Curve(_point(pts[0]), (segment,), closed=False)

    n_curves = n_points if closed else n_points - 1
    segments = []

    for i in range(n_curves):
        cur_pt = pts[i]
        next_i = (i + 1) % n_points
        prev_pt = pts[n_points - 1 if i == 0 else i - 1]
        next_pt = pts[next_i]

        if closed or i > 0:
            tangent = (next_pt - cur_pt) * 0.5 + (cur_pt - prev_pt) * 0.5
        else:
            tangent = (next_pt - cur_pt) * 0.5
        ctrl1 = cur_pt + tangent / 3.0

        # Tangent at the segment end, whose neighbours are cur_pt and the
        # point after it
        end_pt = next_pt
        after_pt = pts[(next_i + 1) % n_points]

        if closed or i < n_curves - 1:
            tangent = (after_pt - end_pt) * 0.5 + (end_pt - cur_pt) * 0.5
        else:
            tangent = (end_pt - cur_pt) * 0.5
        ctrl2 = end_pt - tangent / 3.0

        segments.append(CurveSegment(
            end=_point(end_pt),
            control1=_point(ctrl1),
            control2=_point(ctrl2),
        ))

    logger.debug(
        f"Hermite spline: {n_points} points -> {len(segments)} segments "
        f"({'closed' if closed else 'open'})"
    )
    return Curve(_point(pts[0]), tuple(segments), closed=closed)


def circle_curve(center: PointLike, radius: float, clockwise: bool = True) -> Curve:
    """
    Full circle as four cubic segments.

    Starts at angle 0 (center + (radius, 0)). In y-down screen coordinates
    clockwise means increasing angle.

    Args:
        center: Circle center
        radius: Circle radius
        clockwise: Direction of travel on screen

    Returns:
        Closed curve
    """
    cx, cy = as_point_array([center])[0]
    sign = 1.0 if clockwise else -1.0
    k = radius * KAPPA

    angles = [0.0, 0.5 * np.pi, np.pi, 1.5 * np.pi]
    anchors = [(cx + radius * np.cos(a), cy + sign * radius * np.sin(a)) for a in angles]
    # Unit tangent at each anchor in the direction of travel
    tangents = [(-np.sin(a), sign * np.cos(a)) for a in angles]

    segments = []
    for i in range(4):
        j = (i + 1) % 4
        (x0, y0), (t0x, t0y) = anchors[i], tangents[i]
        (x1, y1), (t1x, t1y) = anchors[j], tangents[j]
        segments.append(CurveSegment(
            end=Point(float(x1), float(y1)),
            control1=Point(float(x0 + k * t0x), float(y0 + k * t0y)),
            control2=Point(float(x1 - k * t1x), float(y1 - k * t1y)),
        ))

    return Curve(Point(float(anchors[0][0]), float(anchors[0][1])), tuple(segments), closed=True)
