# constants.py
# ============

"""
constants.
=========

Does: Define the immutable numeric constants of the sRGB → XYZ → Lab chain
      (transfer function, D65/2° matrix, reference white, Lab companding).
Used By: color.utils.lab conversions and the nearest-name matcher.
Returns: Pure data only (no side effects).

Notes:
- Values are kept exactly as published so names resolve identically across
  implementations; near-ties are the only thing a deviation would move.
"""

# ── 1) sRGB inverse transfer (gamma expansion) ───────────────────────────────
SRGB_LINEAR_THRESHOLD = 0.04045
SRGB_LINEAR_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_SCALE = 1.055
SRGB_GAMMA = 2.4


# ── 2) Linear sRGB → XYZ (D65, 2° observer), rows X/Y/Z ───────────────────────
SRGB_TO_XYZ: tuple[tuple[float, float, float], ...] = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)
XYZ_SCALE = 100.0


# ── 3) XYZ → Lab ─────────────────────────────────────────────────────────────
D65_WHITE: tuple[float, float, float] = (95.047, 100.0, 108.883)

LAB_EPSILON = 0.008856
LAB_KAPPA_SLOPE = 7.787
LAB_OFFSET = 16 / 116


# ── 4) Defaults ──────────────────────────────────────────────────────────────
DEFAULT_SWATCH_HEX = "#000000"  # colorCode used by new variants
