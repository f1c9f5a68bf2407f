"""
swatch_namer
============

Does: Root package for naming clothing swatches: hex color → nearest named color
      via CIE Lab ΔE, plus labeling and name → hex helpers.
Returns: Re-exports the everyday entry points.
Used by: Stock/cart tooling and the `swatch-namer` CLI.
"""

from swatch_namer.naming.color.logic import (
    ColorMatcher,
    MatchResult,
    MatchStatus,
    display_color_label,
    find_nearest_color_name,
    label_color_variants,
    lookup_color_hex,
)
from swatch_namer.naming.color.vocab import ColorPalette, NamedColor, load_palette

__all__ = [
    "ColorMatcher",
    "ColorPalette",
    "MatchResult",
    "MatchStatus",
    "NamedColor",
    "display_color_label",
    "find_nearest_color_name",
    "label_color_variants",
    "load_palette",
    "lookup_color_hex",
]
__docformat__ = "google"
