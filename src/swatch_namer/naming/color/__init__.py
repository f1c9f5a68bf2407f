"""
color.
=====

Does: Color-domain package: Lab constants, hex/Lab utilities, named palettes,
      and the nearest-name matching logic.
"""

from .constants import D65_WHITE, DEFAULT_SWATCH_HEX
from .vocab import ColorPalette, NamedColor, get_default_palette, load_palette

__all__ = [
    "D65_WHITE",
    "DEFAULT_SWATCH_HEX",
    "ColorPalette",
    "NamedColor",
    "get_default_palette",
    "load_palette",
]
