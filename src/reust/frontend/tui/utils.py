"""Terminal text measurement: ANSI stripping, display width, truncation."""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth

__all__ = ["strip_ansi", "visible_width", "truncate_to_width"]

_STRIP_RE = re.compile(
    r"\x1b\[[0-9;?]*[A-Za-z]"          # CSI
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"  # OSC
)

# Bounded cache of non-ASCII widths
_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def strip_ansi(text: str) -> str:
    return _STRIP_RE.sub("", text)


def _grapheme_width(g: str) -> int:
    """Terminal display width of one grapheme cluster.

    Control characters and lone marks are 0 columns, emoji sequences are 2,
    everything else is whatever wcwidth says about the base codepoint.
    """
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        # VS16, ZWJ, skin tones, regional indicators
        if cp in (0xFE0F, 0x200D) or 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2

    first = g[0]
    if ord(first) >= 0x1F000 or 0x2600 <= ord(first) <= 0x27BF:
        return 2

    cat = unicodedata.category(first)
    if cat.startswith("M") or cat == "Cf":
        return 0
    return max(_wcwidth.wcwidth(first), 0)


def visible_width(text: str) -> int:
    """Number of terminal columns *text* occupies, ignoring escape codes."""
    if not text:
        return 0
    stripped = strip_ansi(text).replace("\t", "   ")
    if stripped.isascii() and stripped.isprintable():
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = sum(_grapheme_width(g) for g in grapheme.graphemes(stripped))
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[stripped] = total
    return total


def truncate_to_width(text: str, max_width: int, ellipsis: str = "") -> str:
    """Cut *text* at a grapheme boundary so it fits in *max_width* columns.

    *ellipsis* is appended when something was cut and counts towards the
    width.  Escape codes are dropped from truncated results.
    """
    if max_width <= 0:
        return ""
    if visible_width(text) <= max_width:
        return text

    target = max_width - visible_width(ellipsis)
    if target <= 0:
        return truncate_to_width(ellipsis, max_width)

    out: list[str] = []
    cols = 0
    for g in grapheme.graphemes(strip_ansi(text)):
        w = _grapheme_width(g)
        if cols + w > target:
            break
        out.append(g)
        cols += w
    return "".join(out) + ellipsis
