"""Render engine: turns an element tree plus stored state into a resolved tree.

Every position in the tree gets a deterministic path built during one
top-down traversal::

    path(child) = path(parent) + "/" + sibling_index + "~" + discriminator

Two elements occupying the same path on consecutive passes are the same
instance; that is the whole identity model, there are no keys.
"""

from __future__ import annotations

import logging
import time
from typing import Any, TypeVar

from reust.element import (
    Container,
    El,
    Node,
    RenderedContainer,
    RenderedEl,
    RenderedNode,
)
from reust.state import Component, SetState, StateStore

__all__ = ["ROOT_PATH", "child_path", "discriminator", "render"]

logger = logging.getLogger(__name__)

P = TypeVar("P")

ROOT_PATH = ""


def discriminator(el: Any) -> str:
    """Return the path discriminator of a non-``None`` element."""
    if isinstance(el, Node):
        return "Node"
    if isinstance(el, Container):
        return "Container"
    if isinstance(el, Component):
        cls = type(el)
        return f"{cls.__module__}.{cls.__qualname__}"
    raise TypeError(f"cannot render element of type {type(el).__qualname__}")


def child_path(parent_path: str, index: int, el: Any) -> str:
    return f"{parent_path}/{index}~{discriminator(el)}"


class _RenderPass:
    """State shared by one traversal: the store handle and a few counters."""

    def __init__(self, store: StateStore) -> None:
        self.store = store
        self.nodes = 0
        self.containers = 0
        self.components = 0

    def render(self, el: El[P], parent_path: str, sibling_num: int) -> RenderedEl[P]:
        if el is None:
            return None
        path = child_path(parent_path, sibling_num, el)
        if isinstance(el, Node):
            return self._render_node(el, path)
        if isinstance(el, Container):
            return self._render_container(el, path)
        return self._render_component(el, path, sibling_num)

    def _render_node(self, n: Node[P], path: str) -> RenderedNode[P]:
        self.nodes += 1
        children = [self.render(ch, path, i) for i, ch in enumerate(n.children)]
        return RenderedNode(path=path, payload=n.payload, children=children)

    def _render_container(self, c: Container[P], path: str) -> RenderedContainer[P]:
        self.containers += 1
        children = [self.render(el, path, i) for i, el in enumerate(c.elements)]
        return RenderedContainer(children=children)

    def _render_component(
        self, c: Component[P], path: str, sibling_num: int
    ) -> RenderedEl[P]:
        self.components += 1
        store = self.store

        if store.has(path):
            state = store.get(path)
        else:
            state = c.initial_state()
            store.set(path, state)

        child = c.render(state, SetState(path, store))
        # The component is transparent: its child sits under its own slot
        # with the same sibling index.
        return self.render(child, path, sibling_num)


def render(root: El[P], store: StateStore) -> RenderedEl[P]:
    """Resolve *root* against *store* in one complete pass.

    Components are invoked exactly once each.  State changes they request
    are written to *store* immediately but only observed on the next pass.
    """
    started = time.perf_counter()
    rp = _RenderPass(store)
    rendered = rp.render(root, ROOT_PATH, 0)
    logger.debug(
        "render pass: %d nodes, %d containers, %d components in %.2f ms",
        rp.nodes,
        rp.containers,
        rp.components,
        (time.perf_counter() - started) * 1000.0,
    )
    return rendered
