"""ui-vault Color Engine Package.

This package derives complete light/dark color palettes from a single seed
color and audits palettes against WCAG 2.1 contrast requirements, including
hex/RGB/HSL conversion, color manipulation, and accessible color suggestions.
"""

from .engine import PaletteEngine
from .schema import (
    # Color values
    RGB,
    HSL,

    # Palette models
    ColorScale,
    AccentColors,
    SemanticColors,
    ColorPalette,
    PalettePair,

    # Accessibility models
    AccessibilityIssue,
    WCAGResult,
    ColorPairAnalysis,
    AuditReport,

    # Enums
    ColorMode,
    WCAGLevel,
    IssueSeverity,
    IssueType,
)
from .utils import (
    is_valid_hex,
    normalize_hex,
    hex_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    hsl_to_rgb,
    hex_to_hsl,
    hsl_to_hex,
    adjust_lightness,
    adjust_saturation,
    rotate_hue,
    mix_colors,
    get_complementary,
    get_analogous,
    get_triadic,
    get_split_complementary,
)
from .generator import (
    PALETTE_PRESETS,
    generate_gray_scale,
    generate_accent_shades,
    generate_dark_accent_shades,
    generate_semantic_colors,
    generate_dark_semantic_colors,
    generate_palette_from_seed,
    get_preset_palette,
)
from .accessibility import (
    WCAG_THRESHOLDS,
    get_relative_luminance,
    get_luminance_from_hex,
    calculate_contrast_ratio,
    format_contrast_ratio,
    get_wcag_level,
    get_wcag_level_style,
    evaluate_wcag,
    suggest_accessible_alternative,
    analyze_color_pairs,
    audit_palette,
    calculate_accessibility_score,
    build_audit_report,
    apply_suggestion,
    apply_all_suggestions,
    is_light_color,
    get_text_color_for_background,
)

__all__ = [
    # Main class
    "PaletteEngine",

    # Schema models
    "RGB",
    "HSL",
    "ColorScale",
    "AccentColors",
    "SemanticColors",
    "ColorPalette",
    "PalettePair",
    "AccessibilityIssue",
    "WCAGResult",
    "ColorPairAnalysis",
    "AuditReport",

    # Enums
    "ColorMode",
    "WCAGLevel",
    "IssueSeverity",
    "IssueType",

    # Conversion and manipulation
    "is_valid_hex",
    "normalize_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hex_to_hsl",
    "hsl_to_hex",
    "adjust_lightness",
    "adjust_saturation",
    "rotate_hue",
    "mix_colors",
    "get_complementary",
    "get_analogous",
    "get_triadic",
    "get_split_complementary",

    # Generation
    "PALETTE_PRESETS",
    "generate_gray_scale",
    "generate_accent_shades",
    "generate_dark_accent_shades",
    "generate_semantic_colors",
    "generate_dark_semantic_colors",
    "generate_palette_from_seed",
    "get_preset_palette",

    # Accessibility
    "WCAG_THRESHOLDS",
    "get_relative_luminance",
    "get_luminance_from_hex",
    "calculate_contrast_ratio",
    "format_contrast_ratio",
    "get_wcag_level",
    "get_wcag_level_style",
    "evaluate_wcag",
    "suggest_accessible_alternative",
    "analyze_color_pairs",
    "audit_palette",
    "calculate_accessibility_score",
    "build_audit_report",
    "apply_suggestion",
    "apply_all_suggestions",
    "is_light_color",
    "get_text_color_for_background",
]
