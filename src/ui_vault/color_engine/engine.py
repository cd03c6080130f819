"""Palette engine for the ui-vault color system.

This module provides the PaletteEngine class that ties generation, presets,
auditing and suggestions together for the application layer, with an
injectable cache of generated palettes keyed by seed color.
"""

from typing import Dict, List, MutableMapping, Optional, Union
import logging

from .schema import AuditReport, ColorMode, ColorPalette, PalettePair, WCAGLevel
from .generator import PALETTE_PRESETS, generate_palette_from_seed
from .accessibility import build_audit_report, suggest_accessible_alternative
from .utils import is_valid_hex, normalize_hex

logger = logging.getLogger(__name__)


class PaletteEngine:
    """Generates, caches and audits palettes."""

    def __init__(self, cache: Optional[MutableMapping[str, PalettePair]] = None,
                 use_cache: bool = True,
                 target_level: Union[WCAGLevel, str] = WCAGLevel.AA,
                 custom_presets: Optional[Dict[str, str]] = None):
        """Initialize the palette engine.

        Args:
            cache: Optional mapping to store generated palettes in; a private
                dict is used when omitted
            use_cache: Disable to regenerate palettes on every call
            target_level: Default WCAG level for suggestions ('AA' or 'AAA')
            custom_presets: Extra preset name -> seed color entries
        """
        self.use_cache = use_cache
        self._palette_cache: MutableMapping[str, PalettePair] = cache if cache is not None else {}
        self.target_level = WCAGLevel(target_level)
        self.custom_presets: Dict[str, str] = dict(custom_presets or {})

        logger.debug(f"PaletteEngine initialized (cache={use_cache}, target={self.target_level.value})")

    @classmethod
    def from_config(cls, config, cache: Optional[MutableMapping[str, PalettePair]] = None) -> 'PaletteEngine':
        """Create palette engine from application config.

        Args:
            config: Application configuration object
            cache: Optional shared palette cache

        Returns:
            PaletteEngine instance
        """
        return cls(
            cache=cache,
            use_cache=getattr(config, 'cache_palettes', True),
            target_level=getattr(config, 'target_level', WCAGLevel.AA),
            custom_presets=getattr(config, 'custom_presets', None),
        )

    def generate(self, seed_color: str) -> PalettePair:
        """Generate (or fetch from cache) the light/dark palettes for a seed."""
        if not is_valid_hex(seed_color):
            logger.warning(f"Seed color '{seed_color}' is not #RRGGBB; it converts as {normalize_hex(seed_color)}")

        cache_key = normalize_hex(seed_color)

        if self.use_cache and cache_key in self._palette_cache:
            logger.debug(f"Palette cache hit for {cache_key}")
            return self._palette_cache[cache_key]

        palettes = generate_palette_from_seed(seed_color)

        if self.use_cache:
            self._palette_cache[cache_key] = palettes
        logger.debug(f"Generated palette for seed {cache_key}")
        return palettes

    def list_presets(self) -> Dict[str, str]:
        """Built-in presets merged with custom presets (custom wins)."""
        presets = dict(PALETTE_PRESETS)
        presets.update(self.custom_presets)
        return presets

    def generate_preset(self, name: str) -> PalettePair:
        """Generate the palette for a named preset.

        Raises:
            KeyError: If the preset name is unknown
        """
        presets = self.list_presets()
        if name not in presets:
            raise KeyError(f"Unknown palette preset '{name}'. Available: {', '.join(sorted(presets))}")
        return self.generate(presets[name])

    def audit(self, palette: Union[str, ColorPalette, PalettePair],
              mode: Union[ColorMode, str] = ColorMode.LIGHT) -> AuditReport:
        """Audit a palette for one mode.

        Args:
            palette: Seed color, palette pair, or single-mode palette
            mode: Color mode to audit

        Returns:
            AuditReport with issues and score
        """
        mode = ColorMode(mode)
        if isinstance(palette, str):
            palette = self.generate(palette)
        if isinstance(palette, PalettePair):
            palette = palette.for_mode(mode)

        report = build_audit_report(palette, mode)
        if report.issues:
            logger.info(f"Audit ({mode.value}) found {report.errors} errors, {report.warnings} warnings")
        return report

    def suggest(self, foreground: str, background: str,
                level: Optional[Union[WCAGLevel, str]] = None) -> str:
        """Suggest an accessible foreground, defaulting to the engine's target level."""
        return suggest_accessible_alternative(foreground, background, level or self.target_level)

    def cached_seeds(self) -> List[str]:
        return list(self._palette_cache)

    def clear_cache(self) -> None:
        """Clear the palette cache."""
        self._palette_cache.clear()
        logger.debug("Palette engine cache cleared")
