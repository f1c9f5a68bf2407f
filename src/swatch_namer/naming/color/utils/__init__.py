"""
utils package.
=============

Does: Provide hex parsing, sRGB/XYZ/Lab conversions and color distances
      shared by the matcher, palettes and labeling helpers.
"""

from .lab import (
    RGB,
    ColorParseError,
    Lab,
    delta_e,
    format_hex,
    hex_to_lab,
    lab_distance,
    parse_hex,
    rgb_distance,
    rgb_to_lab,
    rgb_to_xyz,
    srgb_to_linear,
    xyz_to_lab,
)

__all__ = [
    "RGB",
    "Lab",
    "ColorParseError",
    "parse_hex",
    "format_hex",
    "srgb_to_linear",
    "rgb_to_xyz",
    "xyz_to_lab",
    "rgb_to_lab",
    "hex_to_lab",
    "delta_e",
    "lab_distance",
    "rgb_distance",
]

__docformat__ = "google"
