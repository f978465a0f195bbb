"""Interactive terminal frontend: cell payloads, drawing, mouse hit testing."""

from reust.frontend.tui.app import run_tui
from reust.frontend.tui.draw import draw_graph, draw_node
from reust.frontend.tui.events import aabb_contains, process_events, track_mouse_clicked
from reust.frontend.tui.keys import MouseEvent, parse_key, parse_mouse
from reust.frontend.tui.node import (
    Dimension,
    EventHandlers,
    MouseClickHandler,
    Position,
    Style,
    TUINode,
    tui_node,
)
from reust.frontend.tui.stdin_buffer import InputBuffer
from reust.frontend.tui.terminal import ProcessTerminal, Terminal, goto
from reust.frontend.tui.utils import strip_ansi, truncate_to_width, visible_width

__all__ = [
    # Payload
    "Dimension",
    "EventHandlers",
    "MouseClickHandler",
    "Position",
    "Style",
    "TUINode",
    "tui_node",
    # Drawing
    "draw_graph",
    "draw_node",
    # Input
    "InputBuffer",
    "MouseEvent",
    "aabb_contains",
    "parse_key",
    "parse_mouse",
    "process_events",
    "track_mouse_clicked",
    # Terminal
    "ProcessTerminal",
    "Terminal",
    "goto",
    # Frame loop
    "run_tui",
    # Utilities
    "strip_ansi",
    "truncate_to_width",
    "visible_width",
]
