"""Tests for SVG export."""
import xml.etree.ElementTree as ET

from curvekit.geometry import Point
from curvekit.spline import build_hermite_spline
from curvekit.svg_export import (
    bezier_to_path_command,
    curve_to_path_data,
    curve_to_svg,
    format_number,
    generate_svg,
    save_svg,
)
from curvekit.types import BezierCurve, Curve, RenderConfig

SVG_NS = "{http://www.w3.org/2000/svg}"


class TestFormatting:

    def test_format_number(self):
        assert format_number(1.0, 2) == "1"
        assert format_number(1.234, 2) == "1.23"
        assert format_number(1.5, 2) == "1.5"
        assert format_number(-0.001, 2) == "0"

    def test_bezier_command_absolute_start(self):
        bez = BezierCurve(Point(1, 1), Point(2, 1), Point(3, 1), Point(4, 1))
        assert bezier_to_path_command(bez) == "M1,1 c1,0 2,0 3,0"

    def test_bezier_command_relative(self):
        bez = BezierCurve(Point(1, 1), Point(2, 1), Point(3, 1), Point(4, 1))
        assert bezier_to_path_command(bez, prev_point=(1, 1)) == "c1,0 2,0 3,0"


class TestPathData:

    def test_empty_curve(self):
        assert curve_to_path_data(Curve()) == ""
        assert curve_to_svg(Curve(), RenderConfig()) == ""

    def test_open_curve(self):
        data = curve_to_path_data(build_hermite_spline([(0, 0), (10, 0), (10, 10)]))
        assert data.startswith("M0,0 c")
        assert data.count("c") == 2
        assert not data.endswith("Z")

    def test_closed_curve(self, square_points):
        data = curve_to_path_data(build_hermite_spline(square_points, closed=True))
        assert data.count("c") == 4
        assert data.endswith("Z")

    def test_path_element_attributes(self):
        config = RenderConfig(stroke_color=(1.0, 0.0, 0.0), stroke_width=1.5,
                              fill_color=(0.0, 0.0, 1.0))
        elem = ET.fromstring(curve_to_svg(build_hermite_spline([(0, 0), (9, 0)]), config))
        assert elem.get("fill") == "#00f"
        assert elem.get("stroke") == "#f00"
        assert elem.get("stroke-width") == "1.5"
        assert elem.get("d") == "M0,0 c3,0 6,0 9,0"

    def test_no_stroke(self):
        config = RenderConfig(stroke_color=None, fill_color=(0.0, 0.0, 0.0))
        elem = ET.fromstring(curve_to_svg(build_hermite_spline([(0, 0), (9, 0)]), config))
        assert elem.get("stroke") is None
        assert elem.get("fill") == "#000"


class TestGenerateSvg:

    def test_document(self, zigzag_points):
        svg = generate_svg([build_hermite_spline(zigzag_points)], 50, 20, RenderConfig())
        root = ET.fromstring(svg)
        assert root.get("viewBox") == "0 0 50 20"
        assert len(root.findall(f"{SVG_NS}path")) == 1

    def test_offscreen_curves_culled(self):
        visible = build_hermite_spline([(1, 1), (5, 5), (9, 1)])
        offscreen = build_hermite_spline([(100, 100), (105, 105), (110, 100)])
        svg = generate_svg([visible, offscreen, Curve()], 10, 10, RenderConfig())
        assert len(ET.fromstring(svg).findall(f"{SVG_NS}path")) == 1

    def test_culling_disabled(self):
        offscreen = build_hermite_spline([(100, 100), (105, 105), (110, 100)])
        svg = generate_svg([offscreen], 10, 10, RenderConfig(cull_offscreen=False))
        assert len(ET.fromstring(svg).findall(f"{SVG_NS}path")) == 1

    def test_save(self, output_dir, square_points):
        path = output_dir / "square.svg"
        svg = generate_svg([build_hermite_spline(square_points, closed=True)], 10, 10, RenderConfig())
        save_svg(svg, str(path))
        assert path.read_text(encoding="utf-8") == svg
