# tests/test_color_name_lookup.py
"""Name → hex lookup: exact normalized hits, rapidfuzz fallback, cutoffs and blanks."""

from __future__ import annotations

import importlib

import pytest

NL = importlib.import_module("swatch_namer.naming.color.logic.name_lookup")
V = importlib.import_module("swatch_namer.naming.color.vocab")


@pytest.fixture
def palette():
    return V.ColorPalette.from_name_map(
        {"red": "#FF0000", "green": "#008000", "darkslategray": "#2F4F4F", "navy": "#000080"}
    )


@pytest.mark.parametrize("name", ["red", "RED", " Red ", "dark slate gray", "Dark_Slate-Gray"])
def test_exact_normalized_hits(palette, name):
    expect = "#FF0000" if "red" in name.lower() else "#2F4F4F"
    assert NL.lookup_color_hex(name, palette) == expect


def test_fuzzy_typo_resolves(palette):
    assert NL.lookup_color_hex("grean", palette, cutoff=70) == "#008000"
    assert NL.lookup_color_hex("darkslategrey", palette) == "#2F4F4F"


@pytest.mark.parametrize("name", ["", "   ", None])
def test_blank_returns_none(palette, name):
    assert NL.lookup_color_hex(name, palette) is None


def test_nothing_above_cutoff_returns_none(palette):
    assert NL.lookup_color_hex("qqqqqqqq", palette, cutoff=95) is None


def test_default_palette_lookup():
    V.get_default_palette.cache_clear()
    assert NL.lookup_color_hex("dodger blue") == "#1E90FF"
    assert NL.lookup_color_hex("dodgerblu") == "#1E90FF"
