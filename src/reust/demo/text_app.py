"""Demo application for the text frontend."""

from __future__ import annotations

from dataclasses import dataclass

from reust.demo.counter import CounterComponent
from reust.element import Container, El
from reust.frontend.text import TextNode, node
from reust.state import Component, SetState, StateReceiver


class AppComponent(Component[TextNode]):
    """Root outline with two independent counters."""

    def __init__(self, increment: int) -> None:
        self.increment = increment

    def render(self, state: object, set_state: SetState) -> El[TextNode]:
        return node("Root").add_children(
            [
                node("# Header A"),
                CounterComponent(initial_counter=26, increment=self.increment),
                node("----------------------------").add_child(
                    CounterComponent(initial_counter=-80, increment=self.increment)
                ),
                node("Ctrl-c to quit"),
            ]
        )


@dataclass
class AppState:
    value: int


class HeaderCounter(Component[TextNode], StateReceiver[AppState]):
    """Counter kept in the root component, laid out through a container."""

    def __init__(self, increment: int) -> None:
        self.increment = increment

    def initial_state(self) -> AppState:
        return AppState(value=0)

    def render(self, state: object, set_state: SetState) -> El[TextNode]:
        s = self.must_receive_state_ref(state)
        set_state(AppState(value=s.value + self.increment))

        return Container.of(
            node("# Header A").add_child(node(f"The counter is {s.value}")),
            node("Ctrl-c to quit"),
        )


def app(increment: int = 1) -> El[TextNode]:
    return AppComponent(increment=increment)
