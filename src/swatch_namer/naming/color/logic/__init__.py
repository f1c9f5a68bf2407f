"""
logic
=====

Matching and presentation logic on top of the color utilities.

Public API:
- matcher    : ColorMatcher, MatchResult, MatchStatus, find_nearest_color_name,
               get_default_matcher
- labeling   : display_color_label, label_color_variants, is_probably_id
- name_lookup: lookup_color_hex
"""

from __future__ import annotations

from .labeling import display_color_label, is_probably_id, label_color_variants
from .matcher import (
    ColorMatcher,
    MatchResult,
    MatchStatus,
    find_nearest_color_name,
    get_default_matcher,
)
from .name_lookup import lookup_color_hex

__all__ = [
    "ColorMatcher",
    "MatchResult",
    "MatchStatus",
    "find_nearest_color_name",
    "get_default_matcher",
    "display_color_label",
    "label_color_variants",
    "is_probably_id",
    "lookup_color_hex",
]
