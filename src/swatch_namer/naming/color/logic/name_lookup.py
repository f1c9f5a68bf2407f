"""
name_lookup.py

Does: Resolve a typed color name back to a palette hex: exact normalized match
      first, then a rapidfuzz best match above a cutoff.
Returns: '#RRGGBB' or None.
Used by: Variant entry (name typed, swatch wanted), CLI `--name`.
"""

from __future__ import annotations

import logging

from rapidfuzz import fuzz, process

from swatch_namer.naming.color.vocab import ColorPalette, get_default_palette, name_key

__all__ = ["lookup_color_hex", "DEFAULT_CUTOFF"]

log = logging.getLogger(__name__)

DEFAULT_CUTOFF = 80.0


def lookup_color_hex(
    name: str,
    palette: ColorPalette | None = None,
    *,
    cutoff: float = DEFAULT_CUTOFF,
) -> str | None:
    """
    Does: Find the hex of the palette color best matching `name`.
    Returns: Hex string, or None if `name` is blank or no score reaches `cutoff`.
    """
    query = name_key(name)
    if not query:
        return None
    pal = palette if palette is not None else get_default_palette()

    exact = pal.hex_for(name)
    if exact is not None:
        return exact

    choices = {i: name_key(c.name) for i, c in enumerate(pal.entries)}
    hit = process.extractOne(query, choices, scorer=fuzz.WRatio, score_cutoff=cutoff)
    if hit is None:
        log.debug("No palette name close to %r (cutoff=%s)", name, cutoff)
        return None
    _, score, idx = hit
    entry = pal.entries[idx]
    log.debug("Fuzzy name %r → %r (score=%.1f)", name, entry.name, score)
    return entry.hex
