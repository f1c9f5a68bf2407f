"""
labeling.py
===========

Does: Produce the color label shown for a cart line or stock variant: keep a
      human-entered color name, otherwise name the swatch hex, otherwise show
      the hex itself.
Used By: Receipts / payment screens, variant backfills, CLI.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from swatch_namer.naming.color.constants import DEFAULT_SWATCH_HEX
from swatch_namer.naming.color.logic.matcher import ColorMatcher, find_nearest_color_name

__all__ = ["is_probably_id", "display_color_label", "label_color_variants"]

logger = logging.getLogger(__name__)

# Generated variant ids look like "cv123…" or "x-…-…"; real names do not.
_ID_LIKE_RE = re.compile(r"(^cv|[-_].+-)")


def is_probably_id(value: str | None) -> bool:
    return isinstance(value, str) and bool(value) and _ID_LIKE_RE.search(value) is not None


def display_color_label(
    selected_color: str | None,
    color_code: str | None,
    *,
    matcher: ColorMatcher | None = None,
) -> str:
    """Does: Pick the label for a swatch.

    Returns `selected_color` when it is a real name; otherwise the nearest
    palette name for `color_code` (default '#000000'); otherwise the hex.
    """
    hex_str = color_code or DEFAULT_SWATCH_HEX
    if isinstance(selected_color, str) and selected_color and not is_probably_id(selected_color):
        return selected_color
    if matcher is None:
        # default palette problems are logged there and yield ""
        name = find_nearest_color_name(hex_str)
    else:
        name = matcher.find_nearest_color_name(hex_str)
    return name or hex_str


def label_color_variants(
    variants: Iterable[Mapping[str, Any]],
    *,
    matcher: ColorMatcher | None = None,
) -> list[dict[str, Any]]:
    """Does: Return copies of stock color variants with `color` filled from `colorCode`.

    Variants whose `color` is blank or an id get the detected label; others
    pass through unchanged. Non-string `color` values count as blank.
    """
    out: list[dict[str, Any]] = []
    for variant in variants:
        item = dict(variant)
        color = item.get("color")
        color = color.strip() if isinstance(color, str) else ""
        if not color or is_probably_id(color):
            item["color"] = display_color_label(None, item.get("colorCode"), matcher=matcher)
            logger.debug("Labelled variant %r as %r", item.get("colorCode"), item["color"])
        out.append(item)
    return out
