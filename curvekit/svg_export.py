"""SVG export for curves."""
import logging
from typing import List, Optional, Tuple

from curvekit.color import format_color
from curvekit.geometry import Rect
from curvekit.types import BezierCurve, Curve, RenderConfig

logger = logging.getLogger(__name__)


def format_number(x: float, precision: int) -> str:
    """
    Format number with given precision.

    Args:
        x: Number to format
        precision: Decimal places

    Returns:
        Formatted string
    """
    formatted = f"{x:.{precision}f}"
    # Remove trailing zeros and decimal point if not needed
    if '.' in formatted:
        formatted = formatted.rstrip('0').rstrip('.')
    if formatted == '-0':
        formatted = '0'
    return formatted


def bezier_to_path_command(
    curve: BezierCurve,
    prev_point: Optional[Tuple[float, float]] = None,
    precision: int = 2
) -> str:
    """
    Convert BezierCurve to SVG path command.

    Uses relative cubic bezier 'c' command.

    Args:
        curve: Bezier curve
        prev_point: Previous point (for relative coordinates)
        precision: Decimal precision

    Returns:
        SVG path command string
    """
    fmt = lambda x: format_number(x, precision)

    if prev_point is None:
        # First segment, use absolute M command
        cmds = [f"M{fmt(curve.p0.x)},{fmt(curve.p0.y)}"]
        prev = (curve.p0.x, curve.p0.y)
    else:
        cmds = []
        prev = prev_point

    # Relative control points and end point
    dx1 = curve.p1.x - prev[0]
    dy1 = curve.p1.y - prev[1]
    dx2 = curve.p2.x - prev[0]
    dy2 = curve.p2.y - prev[1]
    dx3 = curve.p3.x - prev[0]
    dy3 = curve.p3.y - prev[1]

    cmds.append(
        f"c{fmt(dx1)},{fmt(dy1)} {fmt(dx2)},{fmt(dy2)} {fmt(dx3)},{fmt(dy3)}"
    )

    return ' '.join(cmds)


def curve_to_path_data(curve: Curve, precision: int = 2) -> str:
    """
    Convert a Curve to SVG path data.

    Args:
        curve: Curve to convert
        precision: Decimal precision

    Returns:
        Path data string; empty for an empty curve
    """
    if curve.is_empty:
        return ""

    commands = []
    prev_point = None

    for bezier in curve.bezier_curves():
        commands.append(bezier_to_path_command(bezier, prev_point, precision))
        prev_point = (bezier.p3.x, bezier.p3.y)

    if curve.closed:
        commands.append("Z")

    return ' '.join(commands)


def curve_to_svg(curve: Curve, config: RenderConfig) -> str:
    """
    Convert a Curve to an SVG path element.

    Args:
        curve: Curve to convert
        config: Stroke, fill and precision settings

    Returns:
        SVG path element string; empty for an empty curve
    """
    path_data = curve_to_path_data(curve, config.precision)
    if not path_data:
        return ""

    fill = format_color(config.fill_color) if config.fill_color is not None else "none"
    attrs = [f'd="{path_data}"', f'fill="{fill}"']

    if config.stroke_color is not None:
        attrs.append(f'stroke="{format_color(config.stroke_color)}"')
        attrs.append(f'stroke-width="{format_number(config.stroke_width, config.precision)}"')

    return f'<path {" ".join(attrs)}/>'


def generate_svg(
    curves: List[Curve],
    width: int,
    height: int,
    config: RenderConfig
) -> str:
    """
    Generate an SVG document from curves.

    Curves whose bounds lie entirely outside the canvas are skipped when
    config.cull_offscreen is set.

    Args:
        curves: Curves to draw
        width: Canvas width
        height: Canvas height
        config: Configuration

    Returns:
        Complete SVG string
    """
    viewport = Rect(0, 0, width, height)
    path_elements = []
    skipped = 0

    for curve in curves:
        if curve.is_empty:
            continue

        if config.cull_offscreen and not curve.bounds().intersects(viewport):
            skipped += 1
            continue

        path_elem = curve_to_svg(curve, config)
        if path_elem:
            path_elements.append(path_elem)

    if skipped:
        logger.debug(f"Skipped {skipped} curve(s) outside {width}x{height} viewport")

    svg_content = '\n  '.join(path_elements)

    svg = f'''<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {width} {height}" width="{width}" height="{height}">
  {svg_content}
</svg>'''

    return svg


def save_svg(
    svg_string: str,
    output_path: str
) -> None:
    """
    Save SVG string to file.

    Args:
        svg_string: SVG content
        output_path: Output file path
    """
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(svg_string)
