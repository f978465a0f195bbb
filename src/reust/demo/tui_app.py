"""Demo application for the terminal frontend: a clickable progress setting."""

from __future__ import annotations

from dataclasses import dataclass

from reust.element import Container, El
from reust.frontend.tui.node import MouseClickHandler, Position, TUINode, tui_node
from reust.state import Component, SetState, StateReceiver

# ---------------------------------------------------------------------------
# Stateless building blocks
# ---------------------------------------------------------------------------


def header(pos: Position, text: str) -> El[TUINode]:
    return tui_node(TUINode(pos=pos).set_text(f"# {text}"))


def button(
    pos: Position,
    title: str,
    on_click: MouseClickHandler | None = None,
    disable: bool = False,
) -> El[TUINode]:
    return tui_node(
        TUINode(pos=pos)
        .set_text(title)
        .set_border(True)
        .set_dimension(12 + len(title), 5)
        .disable(disable)
        .set_on_click(on_click)
    )


def progress_bar(pos: Position, percent: int) -> El[TUINode]:
    return tui_node(
        TUINode(pos=pos)
        .set_text(f"{percent} %")
        .set_border(True)
        .set_dimension(max(percent, 0), 3)
    )


def message(pos: Position, text: str) -> El[TUINode]:
    return tui_node(TUINode(pos=pos).set_text(text))


# ---------------------------------------------------------------------------
# SettingsControls
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SettingsControlsState:
    percent: int


class SettingsControls(Component[TUINode], StateReceiver[SettingsControlsState]):
    """Less / Moar! buttons moving a percentage between 0 and 100."""

    def __init__(self, increment: int) -> None:
        self.increment = increment

    def initial_state(self) -> SettingsControlsState:
        return SettingsControlsState(percent=50)

    def render(self, state: object, set_state: SetState) -> El[TUINode]:
        s = self.must_receive_state_ref(state)

        if s.percent <= 0:
            bound = message(Position(50, 27), "Can't go lower than 0!")
        elif s.percent >= 100:
            bound = message(Position(50, 27), "You're at the maximum!")
        else:
            bound = None

        return Container.of(
            button(
                Position(10, 10),
                "Less",
                on_click=self._on_less(s, set_state),
                disable=s.percent <= 0,
            ),
            button(
                Position(45, 10),
                "Moar!",
                on_click=self._on_more(s, set_state),
                disable=s.percent >= 100,
            ),
            progress_bar(Position(10, 20), s.percent),
            bound,
        )

    def _on_less(self, s: SettingsControlsState, set_state: SetState) -> MouseClickHandler:
        def handler() -> None:
            set_state(SettingsControlsState(percent=max(s.percent - self.increment, 0)))

        return handler

    def _on_more(self, s: SettingsControlsState, set_state: SetState) -> MouseClickHandler:
        def handler() -> None:
            set_state(SettingsControlsState(percent=min(s.percent + self.increment, 100)))

        return handler


def app(increment: int = 10) -> El[TUINode]:
    return Container.of(
        header(Position(1, 1), "Reactive TUI experiment with Python"),
        SettingsControls(increment=increment),
    )
