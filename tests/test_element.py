"""Tests for reust.element -- element builders and resolved-tree walking."""

from __future__ import annotations

import pytest

from reust.element import Container, Node, RenderedContainer, RenderedNode, walk


class TestNode:
    def test_defaults_to_no_children(self) -> None:
        assert Node("x").children == ()

    def test_list_children_become_tuple(self) -> None:
        n = Node("x", [Node("a"), None])
        assert n.children == (Node("a"), None)

    def test_add_child_returns_new_node(self) -> None:
        base = Node("x")
        grown = base.add_child(Node("a"))
        assert base.children == ()
        assert grown.children == (Node("a"),)
        assert grown.payload == "x"

    def test_add_children_appends_in_order(self) -> None:
        n = Node("x").add_child(Node("a")).add_children([Node("b"), Node("c")])
        assert [ch.payload for ch in n.children] == ["a", "b", "c"]

    def test_is_immutable(self) -> None:
        with pytest.raises(AttributeError):
            Node("x").payload = "y"  # type: ignore[misc]


class TestContainer:
    def test_of(self) -> None:
        assert Container.of(Node("a"), None).elements == (Node("a"), None)

    def test_list_elements_become_tuple(self) -> None:
        assert Container([Node("a")]).elements == (Node("a"),)


class TestWalk:
    def test_none(self) -> None:
        assert list(walk(None)) == []

    def test_pre_order_through_containers(self) -> None:
        tree = RenderedNode(
            "/r",
            "root",
            [
                RenderedContainer([RenderedNode("/a", "a"), None]),
                RenderedNode("/b", "b", [RenderedNode("/c", "c")]),
            ],
        )
        assert [n.payload for n in walk(tree)] == ["root", "a", "b", "c"]

    def test_container_root(self) -> None:
        tree = RenderedContainer([RenderedNode("/a", "a"), RenderedNode("/b", "b")])
        assert [n.path for n in walk(tree)] == ["/a", "/b"]
