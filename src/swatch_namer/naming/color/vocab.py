"""
vocab
=====

Does: Define the named reference palette (ordered, immutable name/hex entries)
      and build it from the bundled hex → name table, CSS3 names (webcolors)
      or XKCD survey colors (matplotlib).
Used By: Nearest-name matcher, name → hex lookup, labeling helpers, CLI.
Returns: Frozen NamedColor / ColorPalette values and loader functions
         (no side effects beyond lazy caching).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

import webcolors

from swatch_namer.naming.general.token import normalize_token
from swatch_namer.naming.general.utils import ConfigTypeError, load_config

__all__ = [
    "NamedColor",
    "name_key",
    "ColorPalette",
    "PALETTE_SOURCES",
    "PALETTE_ENV",
    "load_palette",
    "get_default_palette",
]

log = logging.getLogger(__name__)

PALETTE_ENV = "SWATCH_NAMER_PALETTE"
PALETTE_SOURCES = ("bundled", "css3", "xkcd")
BUNDLED_TABLE = "color_names"


# ── Values ───────────────────────────────────────────────────────────────────
def name_key(name: str) -> str:
    """Lookup key for a color name: normalized, spaces dropped ("Dark Slate Gray" → "darkslategray")."""
    return normalize_token(name).replace(" ", "")


def _tidy_hex(hex_str: str) -> str:
    """Upper-case and '#'-prefix a hex string; content is validated later, by the matcher."""
    s = str(hex_str).strip().upper()
    return s if s.startswith("#") else f"#{s}"


@dataclass(frozen=True)
class NamedColor:
    """One palette entry: display name and its '#RRGGBB' swatch."""

    name: str
    hex: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "hex", _tidy_hex(self.hex))


@dataclass(frozen=True)
class ColorPalette:
    """Ordered, read-only table of named reference colors.

    Table order is significant: the matcher breaks distance ties in favour of
    the earliest entry.
    """

    entries: tuple[NamedColor, ...] = ()
    source: str = "custom"
    _by_name: dict[str, str] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))
        index: dict[str, str] = {}
        for entry in self.entries:
            index.setdefault(name_key(entry.name), entry.hex)
        object.__setattr__(self, "_by_name", index)

    @classmethod
    def from_hex_map(cls, mapping: Mapping[str, str], source: str = "custom") -> ColorPalette:
        """Build from a hex → name mapping (shape of the bundled table)."""
        return cls(tuple(NamedColor(name, hx) for hx, name in mapping.items()), source)

    @classmethod
    def from_name_map(cls, mapping: Mapping[str, str], source: str = "custom") -> ColorPalette:
        """Build from a name → hex mapping (shape of CSS/XKCD tables)."""
        return cls(tuple(NamedColor(name, hx) for name, hx in mapping.items()), source)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[NamedColor]:
        return iter(self.entries)

    def names(self) -> list[str]:
        return [e.name for e in self.entries]

    def hex_for(self, name: str) -> str | None:
        """Exact (normalized, case-insensitive) name → hex lookup."""
        return self._by_name.get(name_key(name))


# ── Loaders ──────────────────────────────────────────────────────────────────
def _validate_hex_table(data: dict[str, Any]) -> dict[str, Any]:
    bad = [k for k, v in data.items() if not isinstance(k, str) or not isinstance(v, str)]
    if bad:
        raise ConfigTypeError(f"expected hex → name strings, bad keys: {bad[:3]}")
    return data


def _load_bundled() -> ColorPalette:
    table = load_config(BUNDLED_TABLE, validator=_validate_hex_table)
    return ColorPalette.from_hex_map(table, source="bundled")


def _load_css3() -> ColorPalette:
    names = webcolors.names(webcolors.CSS3)
    return ColorPalette.from_name_map(
        {n: webcolors.name_to_hex(n, spec=webcolors.CSS3) for n in names},
        source="css3",
    )


def _load_xkcd() -> ColorPalette:
    from matplotlib.colors import XKCD_COLORS  # lazy: heavy import

    return ColorPalette.from_name_map(
        {k.replace("xkcd:", ""): hx for k, hx in XKCD_COLORS.items()},
        source="xkcd",
    )


_LOADERS = {
    "bundled": _load_bundled,
    "css3": _load_css3,
    "xkcd": _load_xkcd,
}


def load_palette(source: str = "bundled") -> ColorPalette:
    """Does: Build a fresh palette from one of PALETTE_SOURCES.

    Raises:
        ValueError: unknown source.
    """
    key = (source or "").strip().lower()
    loader = _LOADERS.get(key)
    if loader is None:
        raise ValueError(f"Unknown palette source {source!r}; expected one of {PALETTE_SOURCES}")
    palette = loader()
    log.debug("Loaded %d named colors from %s palette", len(palette), key)
    return palette


@lru_cache(maxsize=1)
def get_default_palette() -> ColorPalette:
    """Does: Return the process-wide palette, chosen by SWATCH_NAMER_PALETTE (default 'bundled')."""
    return load_palette(os.getenv(PALETTE_ENV, "bundled"))
