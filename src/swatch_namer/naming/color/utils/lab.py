"""
lab.py
======

Does: Parse hex swatches into RGB, convert sRGB → linear → XYZ → CIE Lab
      (D65), and compute ΔE76 / sRGB distances.
Used By: Nearest-name matching, palette precomputation, labeling helpers.
Returns: RGB triples, XYZ/Lab float triples, distances (float).
"""

from __future__ import annotations

import logging
import math
import re

from swatch_namer.naming.color.constants import (
    D65_WHITE,
    LAB_EPSILON,
    LAB_KAPPA_SLOPE,
    LAB_OFFSET,
    SRGB_GAMMA,
    SRGB_LINEAR_SLOPE,
    SRGB_LINEAR_THRESHOLD,
    SRGB_OFFSET,
    SRGB_SCALE,
    SRGB_TO_XYZ,
    XYZ_SCALE,
)

# Public surface
__all__ = [
    "RGB",
    "XYZ",
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

logger = logging.getLogger(__name__)

# ── Types ─────────────────────────────────────────────────────────────────────
RGB = tuple[int, int, int]
XYZ = tuple[float, float, float]
Lab = tuple[float, float, float]

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{6})")


class ColorParseError(ValueError):
    """Raise when a swatch string is not a 6-digit hex color."""


# =============================================================================
# 1) PARSING
# =============================================================================

def parse_hex(hex_str: str) -> RGB:
    """Does: Parse '#RRGGBB' / 'RRGGBB' (any case) into an RGB triple.

    Raises:
        ColorParseError: empty, shorthand ('fff'), non-hex, or non-string input.
    """
    if not isinstance(hex_str, str):
        raise ColorParseError(f"Expected a hex string, got {type(hex_str).__name__}")
    m = _HEX_RE.fullmatch(hex_str)
    if m is None:
        raise ColorParseError(f"Malformed hex color: {hex_str!r}")
    value = int(m.group(1), 16)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def _validate_rgb(rgb: RGB) -> None:
    r, g, b = rgb
    if not (0 <= r <= 255 and 0 <= g <= 255 and 0 <= b <= 255):
        raise ValueError(f"RGB out of bounds: {rgb}")


def format_hex(rgb: RGB) -> str:
    """Does: Render an RGB triple as upper-case '#RRGGBB'."""
    _validate_rgb(rgb)
    r, g, b = rgb
    return f"#{r:02X}{g:02X}{b:02X}"


# =============================================================================
# 2) CONVERSIONS
# =============================================================================

def srgb_to_linear(channel: float) -> float:
    """Does: Map an 8-bit sRGB channel to linear light in [0, 1]."""
    v = channel / 255.0
    if v <= SRGB_LINEAR_THRESHOLD:
        return v / SRGB_LINEAR_SLOPE
    return ((v + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA


def rgb_to_xyz(rgb: RGB) -> XYZ:
    """Does: Convert sRGB to CIE XYZ (D65, 2°), scaled to Y=100 for white."""
    lin = [srgb_to_linear(float(c)) for c in rgb]
    x, y, z = (
        XYZ_SCALE * sum(coef * c for coef, c in zip(row, lin))
        for row in SRGB_TO_XYZ
    )
    return x, y, z


def _f_lab(t: float) -> float:
    return t ** (1 / 3) if t > LAB_EPSILON else LAB_KAPPA_SLOPE * t + LAB_OFFSET


def xyz_to_lab(xyz: XYZ) -> Lab:
    """Does: Convert XYZ to CIE Lab against the D65 reference white."""
    Xn, Yn, Zn = D65_WHITE
    X, Y, Z = xyz
    fx, fy, fz = _f_lab(X / Xn), _f_lab(Y / Yn), _f_lab(Z / Zn)
    L = 116 * fy - 16
    a = 500 * (fx - fy)
    b = 200 * (fy - fz)
    return L, a, b


def rgb_to_lab(rgb: RGB) -> Lab:
    """Does: sRGB → Lab in one call."""
    return xyz_to_lab(rgb_to_xyz(rgb))


def hex_to_lab(hex_str: str) -> Lab:
    """Does: Parse a hex swatch and return its Lab coordinates."""
    return rgb_to_lab(parse_hex(hex_str))


# =============================================================================
# 3) DISTANCES
# =============================================================================

def delta_e(lab1: Lab, lab2: Lab) -> float:
    """Does: ΔE76, i.e. Euclidean distance between two Lab colors."""
    dL = lab1[0] - lab2[0]
    da = lab1[1] - lab2[1]
    db = lab1[2] - lab2[2]
    return math.sqrt(dL * dL + da * da + db * db)


def lab_distance(rgb1: RGB, rgb2: RGB) -> float:
    """Does: ΔE76 between two RGB triples (bounds checked)."""
    _validate_rgb(rgb1)
    _validate_rgb(rgb2)
    return delta_e(rgb_to_lab(rgb1), rgb_to_lab(rgb2))


def rgb_distance(rgb1: RGB, rgb2: RGB) -> float:
    """Does: Naive Euclidean distance in sRGB space."""
    _validate_rgb(rgb1)
    _validate_rgb(rgb2)
    return sum((a - b) ** 2 for a, b in zip(rgb1, rgb2)) ** 0.5
