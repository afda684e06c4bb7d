"""Raster drawing of curves with Pillow."""
import logging
from typing import List, Tuple

import numpy as np
from PIL import Image, ImageDraw

from curvekit.color import to_rgba8
from curvekit.geometry import Rect
from curvekit.types import Curve, RenderConfig

logger = logging.getLogger(__name__)


def _polyline(curve: Curve, config: RenderConfig) -> List[Tuple[float, float]]:
    points = curve.sample(config.samples_per_segment)
    return [(float(x), float(y)) for x, y in points]


def _visible(curve: Curve, rect: Rect) -> bool:
    bounds = curve.bounds()
    return bounds is not None and not curve.is_empty and bounds.intersects(rect)


def fill_if_intersects(
    draw: ImageDraw.ImageDraw,
    curve: Curve,
    rect: Rect,
    config: RenderConfig
) -> bool:
    """
    Fill a curve, but only if it might be visible within rect.

    Args:
        draw: Target drawing context
        curve: Curve outline; treated as closed for filling
        rect: Visible area
        config: Fill color and sampling density

    Returns:
        True if anything was drawn
    """
    if config.fill_color is None or not _visible(curve, rect):
        return False
    polygon = _polyline(curve, config)
    if len(polygon) < 3:
        return False
    draw.polygon(polygon, fill=to_rgba8(config.fill_color))
    return True


def stroke_if_intersects(
    draw: ImageDraw.ImageDraw,
    curve: Curve,
    rect: Rect,
    config: RenderConfig
) -> bool:
    """
    Stroke a curve, but only if it might be visible within rect.

    Returns:
        True if anything was drawn
    """
    if config.stroke_color is None or not _visible(curve, rect):
        return False
    line = _polyline(curve, config)
    if curve.closed and line[0] != line[-1]:
        line.append(line[0])
    draw.line(
        line,
        fill=to_rgba8(config.stroke_color),
        width=max(1, int(round(config.stroke_width))),
        joint="curve",
    )
    return True


def render_curves(
    curves: List[Curve],
    size: Tuple[int, int],
    config: RenderConfig
) -> Image.Image:
    """
    Rasterize curves onto a new RGBA image.

    Fills are drawn before strokes so outlines stay on top.

    Args:
        curves: Curves to draw
        size: (width, height) in pixels
        config: Configuration

    Returns:
        Rendered image
    """
    width, height = size
    img = Image.new('RGBA', (width, height), to_rgba8(config.background))
    draw = ImageDraw.Draw(img)

    if config.cull_offscreen:
        viewport = Rect(0, 0, width, height)
    else:
        # Union of everything, so nothing is culled
        all_points = [c.control_points() for c in curves if not c.is_empty]
        if all_points:
            pts = np.vstack(all_points)
            lo, hi = pts.min(axis=0), pts.max(axis=0)
            viewport = Rect(float(lo[0]), float(lo[1]),
                            float(hi[0] - lo[0]), float(hi[1] - lo[1]))
        else:
            viewport = Rect(0, 0, width, height)

    filled = sum(fill_if_intersects(draw, c, viewport, config) for c in curves)
    stroked = sum(stroke_if_intersects(draw, c, viewport, config) for c in curves)

    logger.debug(
        f"Rendered {len(curves)} curve(s) at {width}x{height}: "
        f"{filled} filled, {stroked} stroked"
    )
    return img
