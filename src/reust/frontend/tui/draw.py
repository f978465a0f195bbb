"""Paints a resolved ``TUINode`` tree with cursor-addressed writes."""

from __future__ import annotations

from reust.element import RenderedContainer, RenderedEl, RenderedNode
from reust.frontend.tui.node import TUINode
from reust.frontend.tui.terminal import Terminal, goto
from reust.frontend.tui.utils import truncate_to_width, visible_width

__all__ = ["draw_graph", "draw_node"]

_FG_YELLOW = "\x1b[33m"
_FG_RESET = "\x1b[39m"

_BORDER_TOP = "▀"
_BORDER_BOTTOM = "▄"
_BORDER_SIDE = "█"


def draw_graph(terminal: Terminal, rendered: RenderedEl[TUINode]) -> None:
    """Clear the screen and paint *rendered*, then flush."""
    terminal.clear_screen()
    terminal.hide_cursor()
    _draw(terminal, rendered)
    terminal.flush()


def _draw(terminal: Terminal, rendered: RenderedEl[TUINode]) -> None:
    if rendered is None:
        return
    if isinstance(rendered, RenderedContainer):
        for ch in rendered.children:
            _draw(terminal, ch)
        return
    if isinstance(rendered, RenderedNode):
        draw_node(terminal, rendered.payload)
        for ch in rendered.children:
            _draw(terminal, ch)
        return
    raise TypeError(f"cannot draw {type(rendered).__qualname__}")


def draw_node(terminal: Terminal, b: TUINode) -> None:
    """Paint a single payload (children are the caller's business)."""
    left, top = b.pos.left, b.pos.top
    width, height = b.dim.width, b.dim.height
    text = b.text or ""

    if b.disabled:
        terminal.write(_FG_YELLOW)

    if b.style.border and height >= 3:
        inner = max(width - 2, 0)
        label = truncate_to_width(text, inner)
        terminal.write(goto(left + 1, top) + _BORDER_TOP * inner)
        terminal.write(goto(left + 1, top + height - 1) + _BORDER_BOTTOM * inner)
        if label:
            label_left = max(left, left + width // 2 - visible_width(label) // 2)
            terminal.write(goto(label_left, top + height // 2) + label)
        for line in range(top, top + height):
            if width >= 1:
                terminal.write(goto(left, line) + _BORDER_SIDE)
            if width >= 2:
                terminal.write(goto(left + width - 1, line) + _BORDER_SIDE)
    else:
        terminal.write(goto(left, top) + text)

    if b.disabled:
        terminal.write(_FG_RESET)
