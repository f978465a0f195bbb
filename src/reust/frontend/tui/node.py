"""Terminal-cell payload: position, size, border, text and click handler."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable

from reust.element import Node

__all__ = [
    "MouseClickHandler",
    "Position",
    "Dimension",
    "Style",
    "EventHandlers",
    "TUINode",
    "tui_node",
]

MouseClickHandler = Callable[[], None]


@dataclass(frozen=True)
class Position:
    """1-based terminal cell coordinates."""

    left: int = 1
    top: int = 1


@dataclass(frozen=True)
class Dimension:
    width: int = 1
    height: int = 1


@dataclass(frozen=True)
class Style:
    border: bool = False


@dataclass(frozen=True)
class EventHandlers:
    on_click: MouseClickHandler | None = None


@dataclass(frozen=True)
class TUINode:
    """Payload drawn by the terminal frontend.

    Builders return new payloads; a payload is shared read-only by the
    resolved tree and anything holding on to it (e.g. the previous frame
    kept for hit testing).
    """

    pos: Position = field(default_factory=Position)
    dim: Dimension = field(default_factory=Dimension)
    style: Style = field(default_factory=Style)
    text: str | None = None
    disabled: bool = False
    event_handlers: EventHandlers = field(default_factory=EventHandlers)

    @classmethod
    def at(cls, left: int, top: int) -> TUINode:
        return cls(pos=Position(left, top))

    def disable(self, disabled: bool = True) -> TUINode:
        return replace(self, disabled=disabled)

    def set_border(self, border: bool) -> TUINode:
        return replace(self, style=replace(self.style, border=border))

    def set_text(self, text: str | None) -> TUINode:
        return replace(self, text=text)

    def set_dimension(self, width: int, height: int) -> TUINode:
        return replace(self, dim=Dimension(width, height))

    def set_on_click(self, handler: MouseClickHandler | None) -> TUINode:
        return replace(self, event_handlers=EventHandlers(on_click=handler))


def tui_node(payload: TUINode) -> Node[TUINode]:
    return Node(payload)
