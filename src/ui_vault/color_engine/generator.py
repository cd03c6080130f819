"""Algorithmic palette generation from a single seed color.

Palettes are derived with HSL color math: a near-neutral gray scale tinted
with the seed's hue, accent shades around the seed, and semantic status
colors on conventional hues. Light and dark variants are generated together
so the two modes stay visually related.
"""

from typing import Dict, Optional

from .schema import (
    HSL,
    AccentColors,
    ColorPalette,
    ColorScale,
    PalettePair,
    SemanticColors,
)
from .utils import hex_to_hsl, hsl_to_hex, normalize_hex


# Used when generate_gray_scale() gets no seed
DEFAULT_GRAY_BASE = HSL(220, 10, 50)

# Gray saturation is capped so the scale stays near-neutral
GRAY_SATURATION_CAP = 15

# stop -> (saturation factor, lightness)
GRAY_SCALE_LADDER = {
    "50": (0.3, 98),
    "100": (0.4, 96),
    "200": (0.5, 91),
    "300": (0.6, 85),
    "400": (0.7, 70),
    "500": (0.8, 55),
    "600": (0.9, 45),
    "700": (1.0, 35),
    "800": (1.0, 25),
    "900": (1.0, 15),
    "950": (1.0, 8),
}

SUCCESS_HUE = 142
WARNING_HUE = 45
ERROR_HUE = 0

PALETTE_PRESETS: Dict[str, str] = {
    "blue": "#3B82F6",
    "purple": "#8B5CF6",
    "pink": "#EC4899",
    "red": "#EF4444",
    "orange": "#F97316",
    "yellow": "#EAB308",
    "green": "#22C55E",
    "teal": "#14B8A6",
    "cyan": "#06B6D4",
}


def _hsl(h: float, s: float, l: float) -> str:
    """HSL to hex with saturation and lightness clamped to 0-100."""
    return hsl_to_hex(HSL(h, max(0, min(100, s)), max(0, min(100, l))))


def generate_gray_scale(seed_gray: Optional[str] = None) -> ColorScale:
    """Generate an eleven-stop gray scale.

    The seed contributes its hue and (capped) saturation. Light stops are
    desaturated more heavily than dark ones so the extremes stay neutral
    while mid-tones carry a faint cast of the seed hue.

    Args:
        seed_gray: Optional hex color to tint the grays with

    Returns:
        ColorScale from 50 (near white) to 950 (near black)
    """
    base = hex_to_hsl(seed_gray) if seed_gray else DEFAULT_GRAY_BASE
    hue = base.h
    base_sat = min(base.s, GRAY_SATURATION_CAP)

    return ColorScale.model_validate({
        stop: _hsl(hue, base_sat * factor, lightness)
        for stop, (factor, lightness) in GRAY_SCALE_LADDER.items()
    })


def generate_accent_shades(seed_color: str) -> AccentColors:
    """Generate light mode accent shades; darker shades are floored."""
    h, s, l = hex_to_hsl(seed_color)

    return AccentColors(
        subtle=_hsl(h, min(s, 30), 97),
        muted=_hsl(h, s * 0.9, 80),
        default=normalize_hex(seed_color),
        emphasis=_hsl(h, s * 1.1, max(l - 10, 30)),
        text=_hsl(h, s * 1.2, max(l - 20, 25)),
    )


def generate_dark_accent_shades(seed_color: str) -> AccentColors:
    """Generate dark mode accent shades; text shades lighten toward a ceiling."""
    h, s, l = hex_to_hsl(seed_color)

    return AccentColors(
        subtle=_hsl(h, s * 0.8, 20),
        muted=_hsl(h, s * 0.9, 40),
        default=normalize_hex(seed_color),
        emphasis=_hsl(h, s * 0.9, min(l + 15, 75)),
        text=_hsl(h, s * 0.7, min(l + 30, 85)),
    )


def generate_semantic_colors(seed_accent: str) -> SemanticColors:
    """Generate light mode semantic colors.

    Success, warning and error use fixed hues; info follows the seed.
    """
    accent = hex_to_hsl(seed_accent)

    return SemanticColors(
        success=_hsl(SUCCESS_HUE, 72, 50),
        success_muted=_hsl(SUCCESS_HUE, 55, 92),
        warning=_hsl(WARNING_HUE, 92, 55),
        warning_muted=_hsl(WARNING_HUE, 80, 92),
        error=_hsl(ERROR_HUE, 84, 60),
        error_muted=_hsl(ERROR_HUE, 80, 93),
        info=normalize_hex(seed_accent),
        info_muted=_hsl(accent.h, accent.s * 0.6, 92),
    )


def generate_dark_semantic_colors(seed_accent: str) -> SemanticColors:
    """Generate dark mode semantic colors with dark muted backgrounds."""
    accent = hex_to_hsl(seed_accent)

    return SemanticColors(
        success=_hsl(SUCCESS_HUE, 72, 50),
        success_muted=_hsl(SUCCESS_HUE, 60, 25),
        warning=_hsl(WARNING_HUE, 92, 55),
        warning_muted=_hsl(WARNING_HUE, 70, 25),
        error=_hsl(ERROR_HUE, 84, 60),
        error_muted=_hsl(ERROR_HUE, 70, 30),
        info=normalize_hex(seed_accent),
        info_muted=_hsl(accent.h, accent.s * 0.7, 30),
    )


def generate_palette_from_seed(seed_color: str) -> PalettePair:
    """Generate light and dark palettes from a seed accent color.

    The gray scale is tinted with the seed hue at low saturation and shared
    by both modes; accent and semantic colors are tuned per mode.
    """
    accent = hex_to_hsl(seed_color)
    gray_scale = generate_gray_scale(_hsl(accent.h, 10, 50))

    return PalettePair(
        light=ColorPalette(
            gray=gray_scale,
            accent=generate_accent_shades(seed_color),
            semantic=generate_semantic_colors(seed_color),
        ),
        dark=ColorPalette(
            gray=gray_scale,
            accent=generate_dark_accent_shades(seed_color),
            semantic=generate_dark_semantic_colors(seed_color),
        ),
    )


def get_preset_palette(preset: str) -> PalettePair:
    """Generate the palette for a named preset seed.

    Raises:
        KeyError: If the preset name is unknown
    """
    try:
        seed = PALETTE_PRESETS[preset]
    except KeyError:
        raise KeyError(
            f"Unknown palette preset '{preset}'. "
            f"Available: {', '.join(PALETTE_PRESETS)}"
        ) from None
    return generate_palette_from_seed(seed)
