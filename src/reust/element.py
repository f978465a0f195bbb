"""Element and resolved trees.

An ``El`` is the declarative description of a UI that application code
builds from scratch on every frame.  Rendering turns it into a
``RenderedEl``: the same shape with every component resolved and every node
tagged with its structural path.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Generic, Iterable, Iterator, TypeVar, Union

if TYPE_CHECKING:
    from reust.state import Component

__all__ = [
    "El",
    "Node",
    "Container",
    "RenderedEl",
    "RenderedNode",
    "RenderedContainer",
    "walk",
]

P = TypeVar("P")

# ---------------------------------------------------------------------------
# Element tree
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Node(Generic[P]):
    """A payload-bearing element with declared children."""

    payload: P
    children: tuple[El[P], ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable so callers can pass plain lists.
        object.__setattr__(self, "children", tuple(self.children))

    def add_child(self, el: El[P]) -> Node[P]:
        """Return a copy of this node with *el* appended to its children."""
        return replace(self, children=(*self.children, el))

    def add_children(self, els: Iterable[El[P]]) -> Node[P]:
        """Return a copy of this node with every element of *els* appended."""
        return replace(self, children=(*self.children, *els))


@dataclass(frozen=True)
class Container(Generic[P]):
    """Transparent grouping of sibling elements.

    Contributes its elements as if they were inline, but forms its own path
    segment: its elements are indexed among themselves.
    """

    elements: tuple[El[P], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))

    @classmethod
    def of(cls, *elements: El[P]) -> Container[P]:
        return cls(elements)


El = Union[None, Node[P], Container[P], "Component[P]"]

# ---------------------------------------------------------------------------
# Resolved tree
# ---------------------------------------------------------------------------


@dataclass
class RenderedNode(Generic[P]):
    """A resolved node.  ``payload`` is the very object the element carried."""

    path: str
    payload: P
    children: list[RenderedEl[P]] = field(default_factory=list)


@dataclass
class RenderedContainer(Generic[P]):
    """A resolved container: a flat list of resolved elements, no payload."""

    children: list[RenderedEl[P]] = field(default_factory=list)


RenderedEl = Union[None, RenderedNode[P], RenderedContainer[P]]


def walk(rendered: RenderedEl[P]) -> Iterator[RenderedNode[P]]:
    """Yield every ``RenderedNode`` of *rendered*, depth-first, pre-order."""
    if rendered is None:
        return
    if isinstance(rendered, RenderedNode):
        yield rendered
    for child in rendered.children:
        yield from walk(child)
