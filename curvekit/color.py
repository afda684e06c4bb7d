"""HSB(A) color conversion and hex formatting."""
from dataclasses import dataclass, replace
from typing import Sequence, Tuple

import numpy as np


def rgb_to_hsb(rgb: np.ndarray) -> np.ndarray:
    """
    Convert RGB to HSB (hue, saturation, brightness).

    Args:
        rgb: RGB values in [0, 1], shape (..., 3)

    Returns:
        HSB values in [0, 1], same shape. Achromatic colors get hue 0.
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    c_max = rgb.max(axis=-1)
    c_min = rgb.min(axis=-1)
    delta = c_max - c_min

    # Avoid division by zero; masked out below
    safe_delta = np.where(delta == 0, 1.0, delta)
    safe_max = np.where(c_max == 0, 1.0, c_max)

    hue = np.where(
        c_max == r,
        ((g - b) / safe_delta) % 6.0,
        np.where(
            c_max == g,
            (b - r) / safe_delta + 2.0,
            (r - g) / safe_delta + 4.0
        )
    )
    hue = np.where(delta == 0, 0.0, hue / 6.0)
    saturation = np.where(c_max == 0, 0.0, delta / safe_max)

    return np.stack([hue, saturation, c_max], axis=-1)


def hsb_to_rgb(hsb: np.ndarray) -> np.ndarray:
    """
    Convert HSB to RGB.

    Args:
        hsb: HSB values, shape (..., 3). Hue wraps around 1.0.

    Returns:
        RGB values in [0, 1], same shape
    """
    hsb = np.asarray(hsb, dtype=np.float64)
    h, s, v = hsb[..., 0], hsb[..., 1], hsb[..., 2]

    h6 = (h % 1.0) * 6.0
    sector = np.floor(h6).astype(int) % 6
    f = h6 - np.floor(h6)

    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    r = np.choose(sector, [v, q, p, p, t, v])
    g = np.choose(sector, [t, v, v, q, p, p])
    b = np.choose(sector, [p, p, t, v, v, q])

    return np.stack([r, g, b], axis=-1)


@dataclass(frozen=True)
class HSBA:
    """
    Color in hue/saturation/brightness/alpha form, each in [0, 1].

    Easier to reason about than RGB when adjusting a color. Note that black
    and white both have hue 0; raising their saturation and brightness
    gives red.
    """
    hue: float
    saturation: float
    brightness: float
    alpha: float = 1.0

    @classmethod
    def from_rgba(cls, r: float, g: float, b: float, a: float = 1.0) -> "HSBA":
        h, s, v = rgb_to_hsb(np.array([r, g, b]))
        return cls(float(h), float(s), float(v), float(a))

    def to_rgba(self) -> Tuple[float, float, float, float]:
        r, g, b = hsb_to_rgb(np.array([self.hue, self.saturation, self.brightness]))
        return (float(r), float(g), float(b), self.alpha)

    def with_saturation(self, saturation: float) -> "HSBA":
        return replace(self, saturation=saturation)

    def to_hex(self) -> str:
        return format_color(self.to_rgba()[:3])


def with_saturation(rgba: Sequence[float], saturation: float) -> Tuple[float, float, float, float]:
    """
    Same color with a different saturation.

    Args:
        rgba: RGB or RGBA in [0, 1]; alpha defaults to 1
        saturation: New saturation in [0, 1]

    Returns:
        RGBA tuple
    """
    alpha = rgba[3] if len(rgba) > 3 else 1.0
    return HSBA.from_rgba(rgba[0], rgba[1], rgba[2], alpha).with_saturation(saturation).to_rgba()


def format_color(rgb: Sequence[float]) -> str:
    """
    Format RGB color as hex string.

    Uses #RGB shorthand when possible.

    Args:
        rgb: RGB values in [0, 1]; extra components are ignored

    Returns:
        Hex color string
    """
    # Convert to 0-255 range
    r, g, b = [int(round(min(255, max(0, c * 255)))) for c in rgb[:3]]

    # Check if we can use shorthand #RGB
    if (r % 17 == 0) and (g % 17 == 0) and (b % 17 == 0):
        return f"#{r//17:x}{g//17:x}{b//17:x}"
    else:
        return f"#{r:02x}{g:02x}{b:02x}"


def to_rgba8(color: Sequence[float]) -> Tuple[int, int, int, int]:
    """RGB(A) in [0, 1] to an 8-bit RGBA tuple for Pillow."""
    alpha = color[3] if len(color) > 3 else 1.0
    return tuple(int(round(min(1.0, max(0.0, c)) * 255)) for c in (*color[:3], alpha))
