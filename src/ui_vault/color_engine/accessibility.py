"""WCAG 2.1 accessibility utilities for the color engine.

This module computes relative luminance and contrast ratios, classifies
ratios into WCAG conformance levels, searches for accessible replacement
colors, and audits generated palettes.

See https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
"""

from typing import Dict, Iterable, List, Optional, Tuple, Union

from .schema import (
    RGB,
    AccessibilityIssue,
    AuditReport,
    ColorMode,
    ColorPairAnalysis,
    ColorPairInput,
    ColorPalette,
    IssueSeverity,
    IssueType,
    WCAGLevel,
    WCAGResult,
)
from .utils import adjust_lightness, hex_to_rgb


# WCAG 2.1 contrast requirements. Large text is 18pt (24px) and up, or
# 14pt (18.66px) bold and up.
WCAG_THRESHOLDS: Dict[str, float] = {
    'AA_NORMAL': 4.5,
    'AA_LARGE': 3.0,
    'AAA_NORMAL': 7.0,
    'AAA_LARGE': 4.5,
}

SUGGESTION_STEP = 5
SUGGESTION_MAX_ITERATIONS = 20

WHITE = "#FFFFFF"
BLACK = "#000000"

# Luminance above which a color counts as light
LIGHT_COLOR_LUMINANCE = 0.179

# Rich styles for rendering a level badge
WCAG_LEVEL_STYLES: Dict[WCAGLevel, str] = {
    WCAGLevel.AAA: "bold green",
    WCAGLevel.AA: "bold blue",
    WCAGLevel.AA_LARGE: "bold yellow",
    WCAGLevel.FAIL: "bold red",
}

ModeInput = Union[ColorMode, str, bool]


def get_relative_luminance(rgb: RGB) -> float:
    """Calculate the WCAG 2.1 relative luminance of an RGB color.

    Args:
        rgb: RGB values 0-255

    Returns:
        Relative luminance 0.0-1.0
    """
    def gamma_expand(value: float) -> float:
        normalized = value / 255
        if normalized <= 0.03928:
            return normalized / 12.92
        return ((normalized + 0.055) / 1.055) ** 2.4

    r, g, b = (gamma_expand(channel) for channel in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def get_luminance_from_hex(hex_color: str) -> float:
    return get_relative_luminance(hex_to_rgb(hex_color))


def calculate_contrast_ratio(foreground: str, background: str) -> float:
    """Calculate WCAG contrast ratio between two colors.

    The ratio is order-independent.

    Args:
        foreground, background: Hex color strings

    Returns:
        Contrast ratio 1.0-21.0 (higher is more contrast)
    """
    lum1 = get_luminance_from_hex(foreground)
    lum2 = get_luminance_from_hex(background)

    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)

    return (lighter + 0.05) / (darker + 0.05)


def format_contrast_ratio(ratio: float) -> str:
    """Format a contrast ratio for display, e.g. '4.5:1'."""
    return f"{ratio:.1f}:1"


def get_wcag_level(ratio: float) -> WCAGLevel:
    """Get the WCAG conformance level for a contrast ratio."""
    if ratio >= WCAG_THRESHOLDS['AAA_NORMAL']:
        return WCAGLevel.AAA
    if ratio >= WCAG_THRESHOLDS['AA_NORMAL']:
        return WCAGLevel.AA
    if ratio >= WCAG_THRESHOLDS['AA_LARGE']:
        return WCAGLevel.AA_LARGE
    return WCAGLevel.FAIL


def get_wcag_level_style(level: Union[WCAGLevel, str]) -> str:
    """Rich style used to render a WCAG level badge."""
    return WCAG_LEVEL_STYLES[WCAGLevel(level)]


def evaluate_wcag(foreground: str, background: str) -> WCAGResult:
    """Get detailed WCAG evaluation results for a color pair."""
    ratio = calculate_contrast_ratio(foreground, background)

    return WCAGResult(
        level=get_wcag_level(ratio),
        ratio=ratio,
        passes_aa=ratio >= WCAG_THRESHOLDS['AA_NORMAL'],
        passes_aaa=ratio >= WCAG_THRESHOLDS['AAA_NORMAL'],
        passes_aa_large=ratio >= WCAG_THRESHOLDS['AA_LARGE'],
        passes_aaa_large=ratio >= WCAG_THRESHOLDS['AAA_LARGE'],
    )


def _target_ratio(target_level: Union[WCAGLevel, str]) -> float:
    if target_level == WCAGLevel.AAA:
        return WCAG_THRESHOLDS['AAA_NORMAL']
    return WCAG_THRESHOLDS['AA_NORMAL']


def suggest_accessible_alternative(foreground: str, background: str,
                                   target_level: Union[WCAGLevel, str] = "AA") -> str:
    """Suggest an accessible alternative for a failing foreground color.

    A foreground more luminous than the background is darkened, otherwise
    it is lightened, in steps of 5 lightness points until the target ratio
    is met. If the search runs out of steps, the higher-contrast of white
    or black is returned instead.

    Args:
        foreground: The text/foreground color
        background: The background color
        target_level: 'AA' (4.5:1) or 'AAA' (7:1)

    Returns:
        Hex color meeting the target, the unchanged foreground if it already
        passes, or the white/black fallback
    """
    target_ratio = _target_ratio(target_level)

    if calculate_contrast_ratio(foreground, background) >= target_ratio:
        return foreground

    fg_luminance = get_luminance_from_hex(foreground)
    bg_luminance = get_luminance_from_hex(background)
    step = -SUGGESTION_STEP if fg_luminance > bg_luminance else SUGGESTION_STEP

    adjustment = 0
    for _ in range(SUGGESTION_MAX_ITERATIONS):
        adjustment += step
        adjusted = adjust_lightness(foreground, adjustment)
        if calculate_contrast_ratio(adjusted, background) >= target_ratio:
            return adjusted

    white_ratio = calculate_contrast_ratio(WHITE, background)
    black_ratio = calculate_contrast_ratio(BLACK, background)
    return WHITE if white_ratio > black_ratio else BLACK


def _unpack_pair(pair: ColorPairInput) -> Tuple[str, str, Optional[str]]:
    if isinstance(pair, dict):
        return pair['foreground'], pair['background'], pair.get('name')
    if len(pair) == 3:
        return pair[0], pair[1], pair[2]
    return pair[0], pair[1], None


def analyze_color_pairs(pairs: Iterable[ColorPairInput]) -> List[ColorPairAnalysis]:
    """Analyze multiple color pairs for accessibility.

    Args:
        pairs: (foreground, background[, name]) tuples or dicts with
            'foreground', 'background' and optional 'name' keys

    Returns:
        One analysis per pair; pairs below AA carry an AA suggestion
    """
    results = []

    for pair in pairs:
        foreground, background, name = _unpack_pair(pair)
        ratio = calculate_contrast_ratio(foreground, background)
        level = get_wcag_level(ratio)

        suggestion = None
        if level in (WCAGLevel.FAIL, WCAGLevel.AA_LARGE):
            suggestion = suggest_accessible_alternative(foreground, background, "AA")

        results.append(ColorPairAnalysis(
            foreground=foreground,
            background=background,
            ratio=ratio,
            level=level,
            name=name,
            suggestion=suggestion,
        ))

    return results


def _resolve_mode(mode: ModeInput) -> ColorMode:
    if isinstance(mode, bool):
        return ColorMode.DARK if mode else ColorMode.LIGHT
    return ColorMode(mode)


def _text_checks(palette: ColorPalette, mode: ColorMode) -> List[Tuple[str, str, str, str]]:
    """(id, label, foreground token, background token) for each text check."""
    bg_token = "gray.950" if mode == ColorMode.DARK else "gray.50"

    checks = [
        ("text-dark-on-bg", "Dark text on background", "gray.900", bg_token),
        ("text-muted-on-bg", "Muted text on background", "gray.700", bg_token),
        ("accent-text-on-bg", "Accent text on background", "accent.text", bg_token),
        ("accent-text-on-subtle", "Accent text on accent subtle", "accent.text", "accent.subtle"),
    ]

    if mode == ColorMode.DARK:
        # Dark mode reads light text on the dark background
        checks.extend([
            ("text-light-on-bg", "Light text on background", "gray.100", bg_token),
            ("text-muted-light-on-bg", "Muted light text on background", "gray.300", bg_token),
        ])

    return checks


def audit_palette(palette: ColorPalette, mode: ModeInput = ColorMode.LIGHT) -> List[AccessibilityIssue]:
    """Audit a color palette for accessibility issues.

    Args:
        palette: Palette for a single color mode
        mode: Which mode the palette is for (ColorMode, 'light'/'dark',
            or True for dark)

    Returns:
        Issues in check order; an empty list means every check passes AA
    """
    mode = _resolve_mode(mode)
    issues: List[AccessibilityIssue] = []

    for check_id, label, fg_token, bg_token in _text_checks(palette, mode):
        fg = palette.get_token(fg_token)
        bg = palette.get_token(bg_token)
        ratio = calculate_contrast_ratio(fg, bg)
        level = get_wcag_level(ratio)

        if level == WCAGLevel.FAIL:
            severity = IssueSeverity.ERROR
            message = f"{label} fails WCAG AA ({format_contrast_ratio(ratio)})"
        elif level == WCAGLevel.AA_LARGE:
            severity = IssueSeverity.WARNING
            message = f"{label} only passes for large text ({format_contrast_ratio(ratio)})"
        else:
            continue

        issues.append(AccessibilityIssue(
            id=check_id,
            type=IssueType.TEXT_ON_BACKGROUND,
            severity=severity,
            foreground=fg,
            background=bg,
            ratio=ratio,
            message=message,
            suggestion=suggest_accessible_alternative(fg, bg, "AA"),
            token=fg_token,
        ))

    # Semantic colors sit on varying backgrounds; check the better of white/black
    for role, color in palette.semantic.base_colors().items():
        ratio_on_white = calculate_contrast_ratio(color, WHITE)
        ratio_on_black = calculate_contrast_ratio(color, BLACK)
        best_ratio = max(ratio_on_white, ratio_on_black)
        level = get_wcag_level(best_ratio)

        if level == WCAGLevel.FAIL:
            severity = IssueSeverity.ERROR
        elif level == WCAGLevel.AA_LARGE:
            severity = IssueSeverity.WARNING
        else:
            continue

        issues.append(AccessibilityIssue(
            id=f"semantic-{role}",
            type=IssueType.SEMANTIC,
            severity=severity,
            foreground=color,
            background=WHITE if ratio_on_white > ratio_on_black else BLACK,
            ratio=best_ratio,
            message=f"{role.capitalize()} color may be hard to see ({format_contrast_ratio(best_ratio)})",
            token=f"semantic.{role}",
        ))

    return issues


def calculate_accessibility_score(issues: Iterable[AccessibilityIssue]) -> int:
    """Display score for a set of audit issues.

    100 for no issues, otherwise 100 minus 15 per error and 5 per warning,
    floored at 0.
    """
    issues = list(issues)
    if not issues:
        return 100

    errors = sum(1 for issue in issues if issue.severity == IssueSeverity.ERROR)
    warnings = sum(1 for issue in issues if issue.severity == IssueSeverity.WARNING)
    return max(0, 100 - errors * 15 - warnings * 5)


def build_audit_report(palette: ColorPalette, mode: ModeInput = ColorMode.LIGHT) -> AuditReport:
    """Audit a palette and bundle the issues with their score."""
    mode = _resolve_mode(mode)
    issues = audit_palette(palette, mode)
    return AuditReport(mode=mode, issues=issues, score=calculate_accessibility_score(issues))


def apply_suggestion(palette: ColorPalette, issue: AccessibilityIssue) -> ColorPalette:
    """Return a palette with the issue's suggested color written to its token."""
    if not issue.suggestion or not issue.token:
        return palette
    return palette.with_token(issue.token, issue.suggestion)


def apply_all_suggestions(palette: ColorPalette,
                          issues: Iterable[AccessibilityIssue]) -> ColorPalette:
    for issue in issues:
        palette = apply_suggestion(palette, issue)
    return palette


def is_light_color(hex_color: str) -> bool:
    """Check if a color is considered light."""
    return get_luminance_from_hex(hex_color) > LIGHT_COLOR_LUMINANCE


def get_text_color_for_background(background: str) -> str:
    """Recommended text color (black or white) for a background."""
    return BLACK if is_light_color(background) else WHITE
