# naming/general/token/normalize.py
# ──────────────────────────────────────────────────────────────
# Shared utilities for color-name normalization
# ──────────────────────────────────────────────────────────────
"""
normalize.

Does: Provide deterministic token normalization (lowercasing, spacing,
      optional hyphen preservation) with light Unicode hygiene.
Returns: normalize_token().
Used by: Palette name keys and name → hex lookup.
"""

from __future__ import annotations

import re
import unicodedata

__all__ = [
    "normalize_token",
]

# Common “fancy” Unicode punctuation we want to normalize early
_FANCY_HYPHENS = {"‐", "‑", "‒", "–", "—", "−"}  # ‐ - ‒ – — −
_FANCY_QUOTES = {"‘", "’", "‛", "′", "ʼ"}  # ‘ ’ ‛ ′ ʼ


def _unicode_hygiene(s: str) -> str:
    """
    Does: Apply light Unicode normalization:
          - NFKC fold
          - map fancy hyphens to ASCII '-'
          - map curly quotes to ASCII "'"
    Returns: Cleaned string (best-effort).
    """
    if not isinstance(s, str):
        return ""
    s = unicodedata.normalize("NFKC", s)
    for ch in _FANCY_HYPHENS:
        s = s.replace(ch, "-")
    for ch in _FANCY_QUOTES:
        s = s.replace(ch, "'")
    return s


def normalize_token(token: str, keep_hyphens: bool = False) -> str:
    """
    Does: Normalize `token`:
          - Unicode hygiene (NFKC; map fancy hyphens/quotes)
          - lowercase + trim
          - '_' → space; collapse internal whitespace
          - hyphens kept & tightened (keep_hyphens=True) OR converted to spaces
    Returns: Normalized token/phrase ("" for non-strings).
    """
    if not isinstance(token, str):
        return ""
    s = _unicode_hygiene(token).lower().strip().replace("_", " ")
    s = re.sub(r"\s+", " ", s)

    if keep_hyphens:
        s = re.sub(r"\s*-\s*", "-", s)
    else:
        s = s.replace("-", " ")
        s = re.sub(r"\s+", " ", s).strip()

    return s
