"""Palette schema definitions for the ui-vault color engine.

This module defines the Pydantic models that validate and structure palette
data: the gray scale, accent shades, semantic colors, light/dark palette
pairs, and the accessibility audit results derived from them.
"""

from typing import Dict, Any, Optional, List, NamedTuple, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator, computed_field
from enum import Enum
import re


HEX_COLOR_PATTERN = re.compile(r'^#[0-9A-Fa-f]{6}$')

# Stop names of a ColorScale, lightest to darkest
SCALE_STOPS: Tuple[str, ...] = (
    "50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950",
)


class RGB(NamedTuple):
    """RGB color, integer channels 0-255"""
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """HSL color: hue 0-360, saturation and lightness 0-100"""
    h: float
    s: float
    l: float


class ColorMode(str, Enum):
    """Palette color modes"""
    LIGHT = "light"
    DARK = "dark"


class WCAGLevel(str, Enum):
    """WCAG 2.1 conformance levels for a contrast ratio"""
    AAA = "AAA"
    AA = "AA"
    AA_LARGE = "AA-Large"
    FAIL = "Fail"


class IssueSeverity(str, Enum):
    """Accessibility issue severity"""
    ERROR = "error"
    WARNING = "warning"


class IssueType(str, Enum):
    """Kinds of accessibility checks"""
    TEXT_ON_BACKGROUND = "text-on-background"
    SEMANTIC = "semantic"
    CONTRAST = "contrast"


def _validate_hex(value: Any) -> Any:
    """Normalize a hex color field to uppercase #RRGGBB."""
    if isinstance(value, str) and HEX_COLOR_PATTERN.fullmatch(value):
        return value.upper()
    raise ValueError(f"Invalid hex color: {value!r} (expected #RRGGBB)")


class _ColorGroup(BaseModel):
    """Base for records whose every field is a hex color"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator('*', mode='before')
    @classmethod
    def validate_color_format(cls, v):
        return _validate_hex(v)

    def as_dict(self) -> Dict[str, str]:
        """Return the colors keyed by their external (alias) names."""
        return self.model_dump(by_alias=True)


class ColorScale(_ColorGroup):
    """Eleven-stop neutral scale, lightest (50) to darkest (950)"""

    shade_50: str = Field(..., alias="50")
    shade_100: str = Field(..., alias="100")
    shade_200: str = Field(..., alias="200")
    shade_300: str = Field(..., alias="300")
    shade_400: str = Field(..., alias="400")
    shade_500: str = Field(..., alias="500")
    shade_600: str = Field(..., alias="600")
    shade_700: str = Field(..., alias="700")
    shade_800: str = Field(..., alias="800")
    shade_900: str = Field(..., alias="900")
    shade_950: str = Field(..., alias="950")

    @staticmethod
    def _field_for(stop: Union[str, int]) -> str:
        stop = str(stop)
        if stop not in SCALE_STOPS:
            raise KeyError(f"Unknown scale stop: {stop}")
        return f"shade_{stop}"

    def __getitem__(self, stop: Union[str, int]) -> str:
        return getattr(self, self._field_for(stop))

    def with_stops(self, stops: Dict[Union[str, int], str]) -> 'ColorScale':
        """Return a copy with the given stops replaced."""
        data = self.as_dict()
        for stop, color in stops.items():
            self._field_for(stop)
            data[str(stop)] = color
        return ColorScale.model_validate(data)


class AccentColors(_ColorGroup):
    """Accent shades in increasing intensity against the background"""

    subtle: str = Field(..., description="Near-background tint")
    muted: str = Field(..., description="Soft accent")
    default: str = Field(..., description="The seed color")
    emphasis: str = Field(..., description="Stronger accent")
    text: str = Field(..., description="Accent suitable for text")


class SemanticColors(_ColorGroup):
    """Status colors, each with a muted background companion"""

    success: str
    success_muted: str = Field(..., alias="successMuted")
    warning: str
    warning_muted: str = Field(..., alias="warningMuted")
    error: str
    error_muted: str = Field(..., alias="errorMuted")
    info: str
    info_muted: str = Field(..., alias="infoMuted")

    def base_colors(self) -> Dict[str, str]:
        """Base color of each role, in success/warning/error/info order."""
        return {
            "success": self.success,
            "warning": self.warning,
            "error": self.error,
            "info": self.info,
        }


class ColorPalette(BaseModel):
    """Complete token set for one color mode"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    gray: ColorScale
    accent: AccentColors
    semantic: SemanticColors

    def _split_token(self, path: str) -> Tuple[str, str]:
        group, _, key = path.partition(".")
        if group not in ("gray", "accent", "semantic") or not key:
            raise KeyError(f"Unknown palette token: {path}")
        return group, key

    def get_token(self, path: str) -> str:
        """Resolve a dotted token path such as 'gray.900' or 'accent.text'."""
        group, key = self._split_token(path)
        colors = getattr(self, group).as_dict()
        if key not in colors:
            raise KeyError(f"Unknown palette token: {path}")
        return colors[key]

    def with_token(self, path: str, color: str) -> 'ColorPalette':
        """Return a copy of the palette with one token replaced."""
        group, key = self._split_token(path)
        colors = getattr(self, group).as_dict()
        if key not in colors:
            raise KeyError(f"Unknown palette token: {path}")
        colors[key] = color
        updated = type(getattr(self, group)).model_validate(colors)
        return self.model_copy(update={group: updated})

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return self.model_dump(by_alias=True)


class PalettePair(BaseModel):
    """Light and dark palettes generated together from one seed"""

    model_config = ConfigDict(frozen=True)

    light: ColorPalette
    dark: ColorPalette

    def for_mode(self, mode: Union[ColorMode, str]) -> ColorPalette:
        return self.dark if ColorMode(mode) == ColorMode.DARK else self.light

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class AccessibilityIssue(BaseModel):
    """A foreground/background pair that does not meet WCAG AA"""

    model_config = ConfigDict(frozen=True)

    id: str
    type: IssueType
    severity: IssueSeverity
    foreground: str
    background: str
    ratio: float
    message: str
    suggestion: Optional[str] = None
    # Dotted palette path of the checked foreground, e.g. "gray.700"
    token: Optional[str] = None


class WCAGResult(BaseModel):
    """Detailed WCAG evaluation of one color pair"""

    model_config = ConfigDict(frozen=True)

    level: WCAGLevel
    ratio: float
    passes_aa: bool
    passes_aaa: bool
    passes_aa_large: bool
    passes_aaa_large: bool


class ColorPairAnalysis(BaseModel):
    """Contrast analysis of one named color pair"""

    model_config = ConfigDict(frozen=True)

    foreground: str
    background: str
    ratio: float
    level: WCAGLevel
    name: Optional[str] = None
    suggestion: Optional[str] = None


class AuditReport(BaseModel):
    """Audit issues for one palette with the derived display score"""

    model_config = ConfigDict(frozen=True)

    mode: ColorMode
    issues: List[AccessibilityIssue] = Field(default_factory=list)
    score: int = 100

    @computed_field
    @property
    def errors(self) -> int:
        return sum(1 for issue in self.issues if issue.severity == IssueSeverity.ERROR)

    @computed_field
    @property
    def warnings(self) -> int:
        return sum(1 for issue in self.issues if issue.severity == IssueSeverity.WARNING)

    @computed_field
    @property
    def is_perfect(self) -> bool:
        return not self.issues


# Type aliases for convenience
PaletteDict = Dict[str, Dict[str, str]]
ColorPairInput = Union[Tuple[str, str], Tuple[str, str, str], Dict[str, str]]
