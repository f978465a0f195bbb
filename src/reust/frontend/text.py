"""Static text frontend: prints the resolved tree as an indented outline."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Callable, TextIO

from reust.config import Config
from reust.element import El, Node, RenderedContainer, RenderedEl, RenderedNode
from reust.engine import render
from reust.state import StateStore
from reust.vsync import VSync

__all__ = ["TextNode", "node", "format_graph", "draw_graph", "run_text"]

logger = logging.getLogger(__name__)

_CLEAR_SCREEN = "\x1b[0;0H\x1b[2J"
_INDENT = "    "


@dataclass(frozen=True)
class TextNode:
    text: str


def node(text: str) -> Node[TextNode]:
    return Node(TextNode(text))


def format_graph(rendered: RenderedEl[TextNode], level: int = 0) -> list[str]:
    """Return one indented line per node.  Containers add no indentation."""
    if rendered is None:
        return []
    if isinstance(rendered, RenderedContainer):
        lines: list[str] = []
        for ch in rendered.children:
            lines.extend(format_graph(ch, level))
        return lines
    if isinstance(rendered, RenderedNode):
        lines = [_INDENT * level + rendered.payload.text]
        for ch in rendered.children:
            lines.extend(format_graph(ch, level + 1))
        return lines
    raise TypeError(f"cannot draw {type(rendered).__qualname__}")


def draw_graph(rendered: RenderedEl[TextNode], out: TextIO | None = None) -> None:
    """Clear the screen and print *rendered*."""
    out = out or sys.stdout
    out.write(_CLEAR_SCREEN + "\n")
    for line in format_graph(rendered):
        out.write(line + "\n")
    out.flush()


def run_text(
    app: Callable[[], El[TextNode]],
    config: Config,
    *,
    store: StateStore | None = None,
    out: TextIO | None = None,
    max_frames: int | None = None,
    vsync: VSync | None = None,
) -> StateStore:
    """Render *app* every frame until *max_frames* (forever if ``None``).

    Returns the store so callers can inspect the final state.
    """
    store = store if store is not None else StateStore()
    vsync = vsync or VSync(config.frame_seconds)
    frame = 0
    logger.info("text frame loop started (%d ms per frame)", config.frame_ms)
    while max_frames is None or frame < max_frames:
        draw_graph(render(app(), store), out)
        frame += 1
        if max_frames is not None and frame >= max_frames:
            break
        vsync.wait()
    logger.info("text frame loop stopped after %d frames", frame)
    return store
