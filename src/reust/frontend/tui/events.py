"""Input dispatch against the previously rendered tree.

Clicks are resolved depth-first in drawing order and stop at the first node
whose click handler fires.  A disabled node swallows clicks for its whole
subtree.
"""

from __future__ import annotations

import logging
from typing import Iterable

from reust.element import RenderedContainer, RenderedEl, RenderedNode
from reust.frontend.tui.keys import parse_key, parse_mouse
from reust.frontend.tui.node import TUINode

__all__ = ["QUIT_KEYS", "aabb_contains", "track_mouse_clicked", "process_events"]

logger = logging.getLogger(__name__)

QUIT_KEYS = frozenset({"q", "ctrl+c"})


def aabb_contains(
    left: int,
    top: int,
    width: int,
    height: int,
    point_left: int,
    point_top: int,
) -> bool:
    """Inclusive on every edge."""
    return (
        left <= point_left <= left + width
        and top <= point_top <= top + height
    )


def track_mouse_clicked(rendered: RenderedEl[TUINode], left: int, top: int) -> bool:
    """Fire the first click handler hit at (*left*, *top*).

    Returns ``True`` once a handler has been invoked.
    """
    if rendered is None:
        return False
    if isinstance(rendered, RenderedContainer):
        return any(track_mouse_clicked(ch, left, top) for ch in rendered.children)
    if not isinstance(rendered, RenderedNode):
        raise TypeError(f"cannot hit-test {type(rendered).__qualname__}")

    b = rendered.payload
    if b.disabled:
        return False

    on_click = b.event_handlers.on_click
    if on_click is not None and aabb_contains(
        b.pos.left, b.pos.top, b.dim.width, b.dim.height, left, top
    ):
        logger.debug("click at (%d, %d) hit %s", left, top, rendered.path)
        on_click()
        return True

    return any(track_mouse_clicked(ch, left, top) for ch in rendered.children)


def process_events(events: Iterable[str], rendered: RenderedEl[TUINode]) -> bool:
    """Dispatch raw input *events*; return ``True`` if the user asked to quit."""
    for data in events:
        mouse = parse_mouse(data)
        if mouse is not None:
            if mouse.kind == "release":
                track_mouse_clicked(rendered, mouse.left, mouse.top)
            continue
        if parse_key(data) in QUIT_KEYS:
            return True
    return False
