"""Tests for reust.frontend.tui.draw -- painting TUINode trees."""

from __future__ import annotations

from reust.element import Container, Node
from reust.engine import render
from reust.frontend.tui.draw import draw_graph
from reust.frontend.tui.node import Position, TUINode
from reust.frontend.tui.terminal import goto
from reust.state import StateStore

from .virtual_terminal import VirtualTerminal


def paint(el) -> VirtualTerminal:
    terminal = VirtualTerminal()
    draw_graph(terminal, render(el, StateStore()))
    return terminal


class TestGoto:
    def test_row_then_column(self) -> None:
        assert goto(5, 2) == "\x1b[2;5H"


class TestPlainText:
    def test_text_at_position(self) -> None:
        screen = paint(Node(TUINode.at(3, 2).set_text("hello"))).screen()
        assert screen[1] == "  hello"

    def test_no_text_paints_nothing(self) -> None:
        screen = paint(Node(TUINode.at(3, 2))).screen()
        assert all(row == "" for row in screen)

    def test_children_painted_after_parent(self) -> None:
        tree = Node(TUINode.at(1, 1).set_text("aaaa")).add_child(
            Node(TUINode.at(2, 1).set_text("b"))
        )
        assert paint(tree).screen()[0] == "abaa"

    def test_container_paints_every_element(self) -> None:
        tree = Container.of(
            Node(TUINode.at(1, 1).set_text("one")),
            None,
            Node(TUINode.at(1, 2).set_text("two")),
        )
        screen = paint(tree).screen()
        assert screen[:2] == ["one", "two"]

    def test_border_ignored_below_three_rows(self) -> None:
        payload = TUINode.at(1, 1).set_text("flat").set_border(True).set_dimension(10, 2)
        assert paint(Node(payload)).screen()[0] == "flat"


class TestBorderedBox:
    def test_box_outline_and_centered_label(self) -> None:
        payload = (
            TUINode(pos=Position(10, 10))
            .set_text("Less")
            .set_border(True)
            .set_dimension(16, 5)
        )
        screen = paint(Node(payload)).screen()

        assert screen[9] == " " * 9 + "█" + "▀" * 14 + "█"
        assert screen[10] == " " * 9 + "█" + " " * 14 + "█"
        assert screen[11] == " " * 9 + "█" + " " * 5 + "Less" + " " * 5 + "█"
        assert screen[13] == " " * 9 + "█" + "▄" * 14 + "█"

    def test_label_truncated_to_inner_width(self) -> None:
        payload = TUINode.at(1, 1).set_text("abcdefgh").set_border(True).set_dimension(6, 3)
        screen = paint(Node(payload)).screen()
        assert screen[1] == "█abcd█"

    def test_zero_width_box(self) -> None:
        payload = TUINode.at(4, 4).set_text("0 %").set_border(True).set_dimension(0, 3)
        screen = paint(Node(payload)).screen()
        assert all(row == "" for row in screen)

    def test_wide_characters_are_centered_by_columns(self) -> None:
        payload = TUINode.at(1, 1).set_text("世界").set_border(True).set_dimension(10, 3)
        frame = paint(Node(payload)).last_frame
        # 4 columns wide -> starts at 1 + 5 - 2
        assert goto(4, 2) + "世界" in frame


class TestFrame:
    def test_clears_and_hides_cursor_then_flushes(self) -> None:
        terminal = paint(Node(TUINode.at(1, 1).set_text("x")))
        assert len(terminal.frames) == 1
        assert terminal.last_frame.startswith("\x1b[2J\x1b[H\x1b[?25l")
        assert not terminal.cursor_visible

    def test_disabled_node_is_yellow(self) -> None:
        frame = paint(Node(TUINode.at(1, 1).set_text("off").disable())).last_frame
        assert "\x1b[33m" + goto(1, 1) + "off" + "\x1b[39m" in frame

    def test_enabled_node_has_no_color(self) -> None:
        frame = paint(Node(TUINode.at(1, 1).set_text("on"))).last_frame
        assert "\x1b[33m" not in frame
