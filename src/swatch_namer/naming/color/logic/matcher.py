"""
matcher.py
==========

Does: Resolve an arbitrary hex swatch to the perceptually nearest palette name
      (ΔE76 in CIE Lab, D65), with an explicit result type and a best-effort
      string API that never raises.
Returns: MatchResult (status/name/hex/distance), ranked candidates, or the
         bare name ("" on any failure).
Used By: Swatch labeling, CLI, any caller that needs a color name for a hex.
"""

from __future__ import annotations

import enum
import logging
import math
import threading
from dataclasses import dataclass

from swatch_namer.naming.color.utils.lab import (
    ColorParseError,
    Lab,
    delta_e,
    hex_to_lab,
)
from swatch_namer.naming.color.vocab import ColorPalette, NamedColor, get_default_palette
from swatch_namer.naming.general.utils.log import debug

__all__ = [
    "MatchStatus",
    "MatchResult",
    "ColorMatcher",
    "find_nearest_color_name",
    "get_default_matcher",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


class MatchStatus(enum.Enum):
    MATCHED = "matched"
    INVALID_INPUT = "invalid_input"
    EMPTY_PALETTE = "empty_palette"
    COMPUTATION_ERROR = "computation_error"


@dataclass(frozen=True)
class MatchResult:
    """Outcome of one lookup; `name` is "" unless status is MATCHED."""

    status: MatchStatus
    name: str = ""
    hex: str | None = None
    distance: float = math.inf

    def __bool__(self) -> bool:
        return self.status is MatchStatus.MATCHED

    @classmethod
    def failed(cls, status: MatchStatus) -> MatchResult:
        return cls(status=status)


class ColorMatcher:
    """Nearest-name matcher bound to one immutable palette.

    Reference Lab values are computed on first use and reused afterwards.
    A palette entry whose hex cannot be parsed poisons every lookup
    (COMPUTATION_ERROR), mirroring an all-or-nothing pass over the table.
    """

    def __init__(self, palette: ColorPalette):
        self.palette = palette
        self._lock = threading.Lock()
        self._reference: tuple[tuple[NamedColor, Lab], ...] | None = None
        self._reference_error: str | None = None

    def _reference_labs(self) -> tuple[tuple[NamedColor, Lab], ...] | None:
        with self._lock:
            if self._reference is None and self._reference_error is None:
                try:
                    self._reference = tuple((c, hex_to_lab(c.hex)) for c in self.palette)
                except ColorParseError as e:
                    self._reference_error = str(e)
                    logger.warning("Palette %r has an unusable entry: %s", self.palette.source, e)
            return self._reference

    def _ranked(self, hex_str: str) -> tuple[MatchStatus, list[MatchResult]]:
        if len(self.palette) == 0:
            return MatchStatus.EMPTY_PALETTE, []
        try:
            target = hex_to_lab(hex_str)
        except ColorParseError as e:
            debug(f"invalid swatch {hex_str!r}: {e}", topic="matcher")
            return MatchStatus.INVALID_INPUT, []

        reference = self._reference_labs()
        if reference is None:
            return MatchStatus.COMPUTATION_ERROR, []

        scored: list[MatchResult] = []
        for color, lab in reference:
            d = delta_e(target, lab)
            if not math.isfinite(d):
                logger.warning("Non-finite ΔE for %r vs %r", hex_str, color.name)
                return MatchStatus.COMPUTATION_ERROR, []
            scored.append(MatchResult(MatchStatus.MATCHED, color.name, color.hex, d))
        # stable: equal distances keep table order
        scored.sort(key=lambda r: r.distance)
        return MatchStatus.MATCHED, scored

    def match(self, hex_str: str) -> MatchResult:
        """Does: Find the palette entry with minimum ΔE to `hex_str`.

        Ties go to the first entry in table order. Never raises.
        """
        status, scored = self._ranked(hex_str)
        if not scored:
            return MatchResult.failed(status)
        best = scored[0]
        debug(f"{hex_str} → {best.name} (ΔE={best.distance:.3f})", topic="matcher")
        return best

    def find_nearest_color_name(self, hex_str: str) -> str:
        """Does: Best-effort name for `hex_str`; "" on any failure."""
        return self.match(hex_str).name

    def nearest_color_names(self, hex_str: str, top_k: int = 3) -> list[MatchResult]:
        """Does: Return up to `top_k` candidates, nearest first; [] on failure.

        Raises:
            ValueError: top_k < 1.
        """
        if top_k < 1:
            raise ValueError(f"top_k must be >= 1, got {top_k}")
        _, scored = self._ranked(hex_str)
        return scored[:top_k]


_DEFAULT_MATCHER: ColorMatcher | None = None
_DEFAULT_LOCK = threading.Lock()


def get_default_matcher() -> ColorMatcher:
    """Does: Return the process-wide matcher over get_default_palette()."""
    global _DEFAULT_MATCHER
    with _DEFAULT_LOCK:
        if _DEFAULT_MATCHER is None or _DEFAULT_MATCHER.palette is not get_default_palette():
            _DEFAULT_MATCHER = ColorMatcher(get_default_palette())
        return _DEFAULT_MATCHER


def find_nearest_color_name(hex_str: str, palette: ColorPalette | None = None) -> str:
    """Does: Name the nearest palette color for a hex swatch.

    Args:
        hex_str: '#RRGGBB' or 'RRGGBB', any case.
        palette: Palette to search; the process default when omitted.

    Returns:
        The palette name, or "" for malformed input, an empty palette,
        or any computation failure.
    """
    if palette is not None:
        return ColorMatcher(palette).find_nearest_color_name(hex_str)
    try:
        matcher = get_default_matcher()
    except (FileNotFoundError, ValueError, TypeError):
        # missing/broken palette resource: no name rather than a crash in UI code
        logger.exception("Default palette unavailable")
        return ""
    return matcher.find_nearest_color_name(hex_str)
