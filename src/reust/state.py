"""Per-instance component state.

Provides the path-keyed ``StateStore``, the ``SetState`` handle a component
uses to request a change, the ``Component`` contract and the
``StateReceiver`` mixin that recovers a component's concrete state type from
the opaque stored value.
"""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Any,
    ClassVar,
    Generic,
    Iterator,
    TypeVar,
    Union,
    get_args,
    get_origin,
)

if TYPE_CHECKING:
    from reust.element import El

__all__ = [
    "StateStore",
    "SetState",
    "Component",
    "StateReceiver",
    "StateMismatch",
    "StateTypeError",
    "is_mismatch",
]

logger = logging.getLogger(__name__)

P = TypeVar("P")
S = TypeVar("S")

# ---------------------------------------------------------------------------
# StateStore
# ---------------------------------------------------------------------------


class StateStore:
    """Mapping from structural path to an opaque state value.

    Lives for the whole frame loop.  Entries are created lazily and never
    deleted; a component that stops being rendered leaves an inert entry.
    """

    def __init__(self) -> None:
        self._state: dict[str, Any] = {}

    def set(self, path: str, state: Any) -> None:
        """Create or overwrite the entry at *path*."""
        logger.debug("set state %s -> %r", path, state)
        self._state[path] = state

    def get(self, path: str) -> Any | None:
        """Return the value at *path*, or ``None`` if it was never written.

        A stored ``None`` is indistinguishable from an absent entry here; use
        :meth:`has` when that matters.
        """
        return self._state.get(path)

    def has(self, path: str) -> bool:
        return path in self._state

    def paths(self) -> list[str]:
        return list(self._state)

    def __contains__(self, path: object) -> bool:
        return path in self._state

    def __len__(self) -> int:
        return len(self._state)

    def __iter__(self) -> Iterator[str]:
        return iter(self._state)


@dataclass(frozen=True)
class SetState:
    """State-change request bound to one path of one store.

    Calling it overwrites the entry for ``path``.  The element tree being
    built in the current pass is unaffected; the new value is observed from
    the next pass on.
    """

    path: str
    store: StateStore

    def __call__(self, state: Any) -> None:
        self.store.set(self.path, state)


# ---------------------------------------------------------------------------
# Component contract
# ---------------------------------------------------------------------------


class Component(ABC, Generic[P]):
    """A stateful, opaque element resolved by invoking it once per pass."""

    def initial_state(self) -> Any:
        """Return the state stored the first time this path is rendered.

        Stateless components keep the default.
        """
        return None

    @abstractmethod
    def render(self, state: Any, set_state: SetState) -> El[P]:
        """Produce this pass's subtree from *state*."""
        ...


# ---------------------------------------------------------------------------
# Typed state access
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StateMismatch:
    """Result of a failed fallible state read.  Carries the untouched value."""

    expected: type
    state: Any

    def __bool__(self) -> bool:
        return False


class StateTypeError(TypeError):
    """The stored state is not of the type the reading component expects.

    Raised by the ``must_*`` accessors; aborts the current render pass.
    """

    def __init__(self, expected: type, state: Any) -> None:
        super().__init__(
            f"expected state of type {expected.__qualname__}, "
            f"got {type(state).__qualname__}; two components share a path "
            "or the store is read by the wrong component"
        )
        self.expected = expected
        self.state = state


def is_mismatch(value: object) -> bool:
    return isinstance(value, StateMismatch)


def _runtime_type(tp: Any) -> type | None:
    """Strip subscription (``list[int]`` -> ``list``) for ``isinstance``."""
    if isinstance(tp, TypeVar):
        return None
    origin = get_origin(tp)
    if origin is not None:
        return origin if isinstance(origin, type) else None
    return tp if isinstance(tp, type) else None


class StateReceiver(Generic[S]):
    """Mixin declaring that a component's state is of type ``S``.

    ``S`` is picked up from the generic parameter::

        class Counter(Component[TextNode], StateReceiver[CounterState]):
            ...

    A subclass may instead set ``state_type`` explicitly.
    """

    state_type: ClassVar[type]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "state_type" in cls.__dict__:
            return
        for base in cls.__dict__.get("__orig_bases__", ()):
            if get_origin(base) is StateReceiver:
                args = get_args(base)
                resolved = _runtime_type(args[0]) if args else None
                if resolved is not None:
                    cls.state_type = resolved
                return

    def _expected_state_type(self) -> type:
        try:
            return type(self).state_type
        except AttributeError:
            raise TypeError(
                f"{type(self).__qualname__} does not declare its state type"
            ) from None

    def receive_state_ref(self, state: Any) -> Union[S, StateMismatch]:
        """Return *state* itself if it has the expected type.

        The returned object is shared with the store and must be treated as
        read-only; request changes through ``SetState`` instead.
        """
        expected = self._expected_state_type()
        if isinstance(state, expected):
            return state
        return StateMismatch(expected, state)

    def receive_state(self, state: Any) -> Union[S, StateMismatch]:
        """Return an independent copy of *state* if it has the expected type."""
        result = self.receive_state_ref(state)
        if isinstance(result, StateMismatch):
            return result
        return copy.deepcopy(result)

    def must_receive_state_ref(self, state: Any) -> S:
        result = self.receive_state_ref(state)
        if isinstance(result, StateMismatch):
            raise StateTypeError(result.expected, result.state)
        return result

    def must_receive_state(self, state: Any) -> S:
        result = self.receive_state(state)
        if isinstance(result, StateMismatch):
            raise StateTypeError(result.expected, result.state)
        return result
