"""Key and mouse report parsing.

Handles the SGR (``CSI < b ; x ; y M/m``) and legacy X10 (``CSI M bxy``)
mouse encodings and the small set of keys the frame loop cares about.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

__all__ = ["MouseEvent", "MouseEventKind", "parse_mouse", "parse_key"]

MouseEventKind = Literal["press", "release", "drag", "wheel"]

_SGR_MOUSE_RE = re.compile(r"^\x1b\[<(\d+);(\d+);(\d+)([Mm])$")

# Button-code bits shared by both encodings
_MOTION_BIT = 32
_WHEEL_BIT = 64


@dataclass(frozen=True)
class MouseEvent:
    """A mouse report in 1-based terminal cell coordinates."""

    kind: MouseEventKind
    button: int
    left: int
    top: int


def _classify(code: int, released: bool) -> tuple[MouseEventKind, int]:
    button = code & 0b11
    if code & _WHEEL_BIT:
        return "wheel", button
    if released:
        return "release", button
    if code & _MOTION_BIT:
        return "drag", button
    return "press", button


def parse_mouse(data: str) -> MouseEvent | None:
    """Parse a single mouse report, or return ``None`` if *data* is not one."""
    m = _SGR_MOUSE_RE.match(data)
    if m:
        code, left, top = int(m.group(1)), int(m.group(2)), int(m.group(3))
        kind, button = _classify(code, released=m.group(4) == "m")
        return MouseEvent(kind, button, left, top)

    if data.startswith("\x1b[M") and len(data) == 6:
        code, left, top = (ord(ch) - 32 for ch in data[3:])
        # X10 reports a release as button 3 without saying which one.
        released = code & 0b11 == 3 and not code & (_MOTION_BIT | _WHEEL_BIT)
        kind, button = _classify(code, released)
        return MouseEvent(kind, button, left, top)

    return None


def parse_key(data: str) -> str | None:
    """Return a key identifier such as ``"q"`` or ``"ctrl+c"`` for *data*."""
    if not data:
        return None
    if data == "\x1b":
        return "escape"
    if data in ("\r", "\n"):
        return "enter"
    if data == "\t":
        return "tab"
    if data == " ":
        return "space"
    if data in ("\x7f", "\x08"):
        return "backspace"

    # Ctrl + letter (0x01 - 0x1a)
    if len(data) == 1 and 1 <= ord(data) <= 26:
        return "ctrl+" + chr(ord(data) + ord("a") - 1)

    # Alt + key (ESC prefix)
    if len(data) == 2 and data[0] == "\x1b" and data[1].isprintable():
        return "alt+" + data[1].lower()

    if len(data) == 1 and data.isprintable():
        return data
    return None
