from __future__ import annotations

import pytest

from swatch_namer.naming.general.token import normalize as N

"""
Tests: general/token/normalize.py

- lowercase/trim/whitespace collapse
- hyphen handling in both modes
- Unicode hygiene (fancy hyphens, NFKC)
"""


@pytest.mark.parametrize(
    "raw,expect",
    [
        ("  Navy   Blue ", "navy blue"),
        ("dark_slate_gray", "dark slate gray"),
        ("Off-White", "off white"),
        ("off – white", "off white"),
        ("ＲＥＤ", "red"),
    ],
)
def test_normalize_token_default(raw, expect):
    assert N.normalize_token(raw) == expect


@pytest.mark.parametrize(
    "raw,expect",
    [
        ("Off - White", "off-white"),
        ("blue‐grey‐green", "blue-grey-green"),
        ("navy  blue", "navy blue"),
    ],
)
def test_normalize_token_keep_hyphens(raw, expect):
    assert N.normalize_token(raw, keep_hyphens=True) == expect


@pytest.mark.parametrize("bad", [None, 12, ["red"]])
def test_normalize_token_non_string(bad):
    assert N.normalize_token(bad) == ""
