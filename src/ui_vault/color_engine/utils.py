"""Color conversion and manipulation utilities for the color engine.

This module provides hex/RGB/HSL conversion, lightness and saturation
adjustment, hue rotation, color mixing and color-wheel harmonies. Every
function is pure; malformed hex input converts to black instead of raising.
"""

import math
import re
from typing import Tuple

from .schema import RGB, HSL


_HEX_PARSE_PATTERN = re.compile(r'^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$', re.IGNORECASE)
_HEX_VALID_PATTERN = re.compile(r'^#[0-9A-Fa-f]{6}$')


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def is_valid_hex(value: str) -> bool:
    """Check that a value is a #RRGGBB hex color string.

    Conversion functions never reject input, so callers validate with this
    before relying on conversion results.
    """
    return isinstance(value, str) and bool(_HEX_VALID_PATTERN.fullmatch(value))


def hex_to_rgb(hex_color: str) -> RGB:
    """Convert hex color to RGB.

    Args:
        hex_color: Hex color string (e.g., '#FF0000' or 'ff0000')

    Returns:
        RGB tuple with values 0-255, or black for malformed input
    """
    if not isinstance(hex_color, str):
        return RGB(0, 0, 0)

    match = _HEX_PARSE_PATTERN.fullmatch(hex_color)
    if not match:
        return RGB(0, 0, 0)

    r, g, b = (int(part, 16) for part in match.groups())
    return RGB(r, g, b)


def rgb_to_hex(rgb: Tuple[float, float, float]) -> str:
    """Convert RGB to an uppercase #RRGGBB string.

    Accepts an RGB or any 3-tuple of channels. Channels are rounded to the nearest integer and clamped to 0-255.
    """
    channels = (_round_half_up(_clamp(channel, 0, 255)) for channel in rgb)
    return "#" + "".join(f"{channel:02X}" for channel in channels)


def normalize_hex(hex_color: str) -> str:
    """Return the canonical uppercase #RRGGBB form of a hex color."""
    return rgb_to_hex(hex_to_rgb(hex_color))


def rgb_to_hsl(rgb: RGB) -> HSL:
    """Convert RGB to HSL (hue 0-360, saturation and lightness 0-100)."""
    r = rgb[0] / 255
    g = rgb[1] / 255
    b = rgb[2] / 255

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    l = (max_c + min_c) / 2

    # Achromatic
    if max_c == min_c:
        return HSL(0, 0, l * 100)

    d = max_c - min_c
    s = d / (2 - max_c - min_c) if l > 0.5 else d / (max_c + min_c)

    if max_c == r:
        h = ((g - b) / d + (6 if g < b else 0)) / 6
    elif max_c == g:
        h = ((b - r) / d + 2) / 6
    else:
        h = ((r - g) / d + 4) / 6

    return HSL(h * 360, s * 100, l * 100)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: HSL) -> RGB:
    """Convert HSL to RGB with integer channels."""
    h = hsl[0] / 360
    s = hsl[1] / 100
    l = hsl[2] / 100

    if s == 0:
        gray = _round_half_up(l * 255)
        return RGB(gray, gray, gray)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q

    return RGB(
        _round_half_up(_hue_to_rgb(p, q, h + 1 / 3) * 255),
        _round_half_up(_hue_to_rgb(p, q, h) * 255),
        _round_half_up(_hue_to_rgb(p, q, h - 1 / 3) * 255),
    )


def hex_to_hsl(hex_color: str) -> HSL:
    return rgb_to_hsl(hex_to_rgb(hex_color))


def hsl_to_hex(hsl: HSL) -> str:
    return rgb_to_hex(hsl_to_rgb(hsl))


def adjust_lightness(hex_color: str, amount: float) -> str:
    """Lighten (positive amount) or darken (negative amount) a color."""
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(HSL(h, s, _clamp(l + amount, 0, 100)))


def adjust_saturation(hex_color: str, amount: float) -> str:
    """Saturate (positive amount) or desaturate (negative amount) a color."""
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(HSL(h, _clamp(s + amount, 0, 100), l))


def rotate_hue(hex_color: str, degrees: float) -> str:
    """Rotate hue around the color wheel, wrapping at 360."""
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(HSL((h + degrees + 360) % 360, s, l))


def mix_colors(color1: str, color2: str, weight: float = 0.5) -> str:
    """Linearly mix two colors in RGB space.

    Args:
        color1, color2: Hex color strings
        weight: Fraction of color1 retained (1 returns color1, 0 returns color2)

    Returns:
        Mixed hex color
    """
    rgb1 = hex_to_rgb(color1)
    rgb2 = hex_to_rgb(color2)

    return rgb_to_hex((
        rgb1.r * weight + rgb2.r * (1 - weight),
        rgb1.g * weight + rgb2.g * (1 - weight),
        rgb1.b * weight + rgb2.b * (1 - weight),
    ))


def get_complementary(hex_color: str) -> str:
    """Opposite color on the color wheel."""
    return rotate_hue(hex_color, 180)


def get_analogous(hex_color: str) -> Tuple[str, str]:
    """Adjacent colors on the color wheel."""
    return (rotate_hue(hex_color, -30), rotate_hue(hex_color, 30))


def get_triadic(hex_color: str) -> Tuple[str, str]:
    """Colors evenly spaced around the color wheel."""
    return (rotate_hue(hex_color, -120), rotate_hue(hex_color, 120))


def get_split_complementary(hex_color: str) -> Tuple[str, str]:
    return (rotate_hue(hex_color, 150), rotate_hue(hex_color, 210))
