"""reust: a minimal reactive rendering engine.

Application code describes the UI as a fresh element tree every frame; the
engine resolves components against a path-keyed state store and returns a
component-free tree for a frontend to draw.
"""

# Element trees
from reust.element import (
    Container,
    El,
    Node,
    RenderedContainer,
    RenderedEl,
    RenderedNode,
    walk,
)

# Render engine
from reust.engine import ROOT_PATH, child_path, discriminator, render

# State
from reust.state import (
    Component,
    SetState,
    StateMismatch,
    StateReceiver,
    StateStore,
    StateTypeError,
    is_mismatch,
)

# Frame pacing
from reust.vsync import VSync, frame_delay

__all__ = [
    # Element trees
    "Container",
    "El",
    "Node",
    "RenderedContainer",
    "RenderedEl",
    "RenderedNode",
    "walk",
    # Render engine
    "ROOT_PATH",
    "child_path",
    "discriminator",
    "render",
    # State
    "Component",
    "SetState",
    "StateMismatch",
    "StateReceiver",
    "StateStore",
    "StateTypeError",
    "is_mismatch",
    # Frame pacing
    "VSync",
    "frame_delay",
]
