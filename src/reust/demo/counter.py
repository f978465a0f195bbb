"""Counter and leaf components for the text frontend."""

from __future__ import annotations

from dataclasses import dataclass

from reust.element import El
from reust.frontend.text import TextNode, node
from reust.state import Component, SetState, StateReceiver


@dataclass
class CounterState:
    num: int


class LeafComponent(Component[TextNode]):
    """Stateless: its output depends only on its props."""

    def __init__(self, over_100: bool) -> None:
        self.over_100 = over_100

    def render(self, state: object, set_state: SetState) -> El[TextNode]:
        if self.over_100:
            return node("It's OVER 9000! (jk 100)")
        return node("The leaf")


class CounterComponent(Component[TextNode], StateReceiver[CounterState]):
    """Shows its counter and asks for it to be bumped on every pass.

    Multiples of ten are rendered as a one-line "skipping" notice instead of
    the usual counter with its sub-tree.
    """

    def __init__(self, initial_counter: int, increment: int) -> None:
        self.initial_counter = initial_counter
        self.increment = increment

    def initial_state(self) -> CounterState:
        return CounterState(num=self.initial_counter)

    def render(self, state: object, set_state: SetState) -> El[TextNode]:
        s = self.must_receive_state(state)
        counter = s.num

        s.num += self.increment
        set_state(s)

        if counter % 10 == 0:
            return node(f"{counter} IS %10!; skipping!")
        return node(f"The counter is: {counter}").add_child(
            node("Sub element").add_child(LeafComponent(over_100=counter > 100))
        )
