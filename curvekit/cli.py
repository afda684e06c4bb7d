"""Command-line interface for curvekit."""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import numpy as np

from curvekit.render import render_curves
from curvekit.spline import build_hermite_spline
from curvekit.svg_export import generate_svg, save_svg
from curvekit.types import CurveKitError, RenderConfig


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="curvekit",
        description="Draw a smooth Hermite spline through a list of points",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  curvekit points.json -o curve.svg
  curvekit points.csv -o loop.svg --closed --png loop.png
        """,
    )

    parser.add_argument(
        "input",
        help="Points file: JSON [[x, y], ...] or CSV with one x,y per line",
    )

    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output SVG file path (default: input name with .svg extension)",
    )

    parser.add_argument(
        "--closed", action="store_true", help="Close the curve into a loop"
    )

    parser.add_argument(
        "--png", default=None, help="Also rasterize the curve to this PNG path"
    )

    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Canvas width (default: fit the curve)",
    )

    parser.add_argument(
        "--height",
        type=int,
        default=None,
        help="Canvas height (default: fit the curve)",
    )

    parser.add_argument(
        "--precision",
        type=int,
        default=2,
        help="Decimal places for SVG coordinates (default: 2)",
    )

    parser.add_argument(
        "--stroke-width",
        type=float,
        default=2.0,
        help="Stroke width (default: 2.0)",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    return parser


def load_points(path: Path) -> np.ndarray:
    """
    Load points from a JSON or CSV file.

    Args:
        path: .json file holding [[x, y], ...], anything else is read as CSV

    Returns:
        (N, 2) array of points
    """
    if path.suffix.lower() == ".json":
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        points = np.array(data, dtype=np.float64)
    else:
        points = np.loadtxt(path, delimiter=",", ndmin=2, dtype=np.float64)

    if points.size == 0:
        return np.empty((0, 2))
    if points.ndim != 2 or points.shape[1] != 2:
        raise CurveKitError(f"Expected x,y pairs in {path}, got shape {points.shape}")
    if not np.all(np.isfinite(points)):
        raise CurveKitError(f"Non-finite coordinates in {path}")
    return points


def main(args: Optional[list] = None) -> int:
    """Main entry point for CLI.

    Args:
        args: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    input_path = Path(parsed.input)
    if not input_path.exists():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        return 1

    if parsed.output:
        output_path = Path(parsed.output)
    else:
        output_path = input_path.with_suffix(".svg")

    try:
        config = RenderConfig(
            precision=parsed.precision,
            stroke_width=parsed.stroke_width,
        )

        points = load_points(input_path)
        curve = build_hermite_spline(points, closed=parsed.closed)

        print(f"Processing: {input_path}")
        print(f"  Points: {len(points)}")
        print(f"  Segments: {len(curve)} ({'closed' if curve.closed else 'open'})")

        # Canvas defaults to the curve bounds plus a stroke margin
        bounds = curve.bounds()
        margin = config.stroke_width
        if bounds is not None:
            default_w = int(np.ceil(bounds.max_x + margin))
            default_h = int(np.ceil(bounds.max_y + margin))
        else:
            default_w = default_h = 1
        width = parsed.width if parsed.width is not None else max(1, default_w)
        height = parsed.height if parsed.height is not None else max(1, default_h)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        save_svg(generate_svg([curve], width, height, config), str(output_path))
        print(f"  Output saved: {output_path}")

        if parsed.png:
            png_path = Path(parsed.png)
            png_path.parent.mkdir(parents=True, exist_ok=True)
            render_curves([curve], (width, height), config).save(png_path)
            print(f"  Raster saved: {png_path}")

        return 0

    except (CurveKitError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
