"""curvekit: smooth curves through points, plus small geometry, color, image and URL helpers."""
from curvekit.geometry import Point, Vector, Size, Rect, AffineTransform
from curvekit.types import (
    BezierCurve,
    CurveSegment,
    Curve,
    RenderConfig,
    CurveKitError,
    ConfigError,
    ImageError,
    URLQueryItemsError,
    CannotGetComponentsError,
    CannotGetURLError,
)
from curvekit.spline import build_hermite_spline, circle_curve
from curvekit.color import HSBA

__version__ = "0.1.0"

__all__ = [
    "Point",
    "Vector",
    "Size",
    "Rect",
    "AffineTransform",
    "BezierCurve",
    "CurveSegment",
    "Curve",
    "RenderConfig",
    "CurveKitError",
    "ConfigError",
    "ImageError",
    "URLQueryItemsError",
    "CannotGetComponentsError",
    "CannotGetURLError",
    "build_hermite_spline",
    "circle_curve",
    "HSBA",
]
