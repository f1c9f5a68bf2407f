# tests/test_color_logic_labeling.py
"""Swatch label tests: human names kept, ids replaced by detected names, hex fallback."""

from __future__ import annotations

import importlib

import pytest

L = importlib.import_module("swatch_namer.naming.color.logic.labeling")
M = importlib.import_module("swatch_namer.naming.color.logic.matcher")
V = importlib.import_module("swatch_namer.naming.color.vocab")


@pytest.fixture
def matcher():
    return M.ColorMatcher(
        V.ColorPalette.from_hex_map({"#000000": "black", "#FF0000": "red", "#000080": "navy"})
    )


@pytest.mark.parametrize(
    "value,expect",
    [
        ("cv123", True),
        ("cv_red", True),
        ("abc-def-ghi", True),
        ("x_12-", True),
        ("navy blue", False),
        ("off-white", False),
        ("", False),
        (None, False),
    ],
)
def test_is_probably_id(value, expect):
    assert L.is_probably_id(value) is expect


def test_human_selected_color_is_kept(matcher):
    assert L.display_color_label("Midnight", "#FF0000", matcher=matcher) == "Midnight"


def test_id_or_missing_selection_uses_detected_name(matcher):
    assert L.display_color_label("cv42", "#FE0000", matcher=matcher) == "red"
    assert L.display_color_label(None, "#00007F", matcher=matcher) == "navy"
    assert L.display_color_label("", None, matcher=matcher) == "black"


def test_unnameable_swatch_falls_back_to_hex(matcher):
    assert L.display_color_label(None, "not-a-hex", matcher=matcher) == "not-a-hex"
    empty = M.ColorMatcher(V.ColorPalette())
    assert L.display_color_label(None, "#123456", matcher=empty) == "#123456"


def test_label_color_variants_fills_blank_and_id_colors(matcher):
    variants = [
        {"color": "", "colorCode": "#FF0101", "barcode": "A1"},
        {"color": "cv-9-x", "colorCode": "#000001"},
        {"color": "Burgundy", "colorCode": "#800020"},
        {"colorCode": "#000080"},
    ]
    out = L.label_color_variants(variants, matcher=matcher)
    assert [v["color"] for v in out] == ["red", "black", "Burgundy", "navy"]
    assert out[0]["barcode"] == "A1"
    assert variants[0]["color"] == ""  # inputs untouched


def test_default_matcher_used_when_none_given():
    assert L.display_color_label(None, "#FF0000") == "red"


def test_non_string_color_counts_as_blank(matcher):
    out = L.label_color_variants([{"color": 5, "colorCode": "#FF0000"}], matcher=matcher)
    assert out[0]["color"] == "red"
    assert L.is_probably_id(5) is False


# ──────────────────────────────────────────────────────────────────────────────
# Default palette unavailable: labels degrade to the hex
# ──────────────────────────────────────────────────────────────────────────────
@pytest.fixture
def no_default_palette(tmp_path, monkeypatch):
    empty = tmp_path / "data"
    empty.mkdir()
    monkeypatch.delenv(V.PALETTE_ENV, raising=False)
    monkeypatch.setenv("SWATCH_NAMER_DATA_DIR", str(empty))
    V.get_default_palette.cache_clear()
    monkeypatch.setattr(M, "_DEFAULT_MATCHER", None)
    yield
    V.get_default_palette.cache_clear()


def test_missing_default_palette_falls_back_to_hex(no_default_palette):
    assert L.display_color_label(None, "#FF0000") == "#FF0000"
    assert L.display_color_label("cv-1-2", None) == "#000000"


def test_missing_default_palette_variants_fall_back_to_hex(no_default_palette):
    out = L.label_color_variants([{"color": "", "colorCode": "#123456"}, {"color": "Teal"}])
    assert [v["color"] for v in out] == ["#123456", "Teal"]
