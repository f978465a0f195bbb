"""Tests for reust.state -- StateStore, SetState and typed state access."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from reust.state import (
    Component,
    SetState,
    StateMismatch,
    StateReceiver,
    StateStore,
    StateTypeError,
    is_mismatch,
)


@dataclass
class Settings:
    volume: int = 3
    tags: list[str] = field(default_factory=list)


class SettingsPanel(StateReceiver[Settings]):
    pass


# ---------------------------------------------------------------------------
# StateStore
# ---------------------------------------------------------------------------


class TestStateStore:
    def test_get_absent_returns_none(self) -> None:
        store = StateStore()
        assert store.get("/0~Node") is None
        assert not store.has("/0~Node")

    def test_set_then_get(self) -> None:
        store = StateStore()
        store.set("/a", 1)
        assert store.get("/a") == 1

    def test_set_overwrites(self) -> None:
        store = StateStore()
        store.set("/a", 1)
        store.set("/a", "two")
        assert store.get("/a") == "two"
        assert len(store) == 1

    def test_stored_none_is_present(self) -> None:
        store = StateStore()
        store.set("/a", None)
        assert store.has("/a")
        assert "/a" in store
        assert store.get("/a") is None

    def test_no_type_validation_on_write(self) -> None:
        store = StateStore()
        store.set("/a", Settings())
        store.set("/a", object())
        assert not isinstance(store.get("/a"), Settings)

    def test_paths_and_iteration(self) -> None:
        store = StateStore()
        store.set("/b", 2)
        store.set("/a", 1)
        assert sorted(store.paths()) == ["/a", "/b"]
        assert sorted(store) == ["/a", "/b"]


# ---------------------------------------------------------------------------
# SetState
# ---------------------------------------------------------------------------


class TestSetState:
    def test_call_writes_bound_path(self) -> None:
        store = StateStore()
        set_state = SetState("/0~Node", store)
        set_state(5)
        assert store.get("/0~Node") == 5

    def test_handles_for_different_paths_are_independent(self) -> None:
        store = StateStore()
        SetState("/a", store)(1)
        SetState("/b", store)(2)
        assert store.get("/a") == 1
        assert store.get("/b") == 2

    def test_is_a_value(self) -> None:
        store = StateStore()
        assert SetState("/a", store) == SetState("/a", store)
        with pytest.raises(AttributeError):
            SetState("/a", store).path = "/b"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Component contract
# ---------------------------------------------------------------------------


class TestComponent:
    def test_render_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Component()  # type: ignore[abstract]

    def test_default_initial_state_is_none(self) -> None:
        class Stateless(Component[str]):
            def render(self, state: object, set_state: SetState) -> None:
                return None

        assert Stateless().initial_state() is None


# ---------------------------------------------------------------------------
# StateReceiver
# ---------------------------------------------------------------------------


class TestStateTypeResolution:
    def test_resolved_from_generic_parameter(self) -> None:
        assert SettingsPanel.state_type is Settings

    def test_subscripted_generic_resolves_to_origin(self) -> None:
        class Tags(StateReceiver[list[str]]):
            pass

        assert Tags.state_type is list

    def test_explicit_state_type_wins(self) -> None:
        class Explicit(StateReceiver[Settings]):
            state_type = int

        assert Explicit.state_type is int

    def test_inherited_by_subclasses(self) -> None:
        class Louder(SettingsPanel):
            pass

        assert Louder.state_type is Settings

    def test_undeclared_state_type(self) -> None:
        class Vague(StateReceiver):  # type: ignore[type-arg]
            pass

        with pytest.raises(TypeError, match="does not declare"):
            Vague().receive_state(1)


class TestFallibleAccess:
    def test_receive_state_returns_copy(self) -> None:
        stored = Settings(tags=["a"])
        got = SettingsPanel().receive_state(stored)
        assert got == stored
        assert got is not stored
        got.tags.append("b")
        assert stored.tags == ["a"]

    def test_receive_state_ref_returns_shared_object(self) -> None:
        stored = Settings()
        assert SettingsPanel().receive_state_ref(stored) is stored

    def test_mismatch_carries_untouched_value(self) -> None:
        stored = {"volume": 3}
        result = SettingsPanel().receive_state(stored)
        assert isinstance(result, StateMismatch)
        assert is_mismatch(result)
        assert result.state is stored
        assert result.expected is Settings

    def test_mismatch_is_falsy(self) -> None:
        assert not SettingsPanel().receive_state_ref(None)

    def test_subclass_instances_are_accepted(self) -> None:
        @dataclass
        class LoudSettings(Settings):
            boost: bool = True

        stored = LoudSettings()
        assert SettingsPanel().receive_state_ref(stored) is stored


class TestAssertiveAccess:
    def test_must_receive_state(self) -> None:
        stored = Settings(volume=9)
        got = SettingsPanel().must_receive_state(stored)
        assert got.volume == 9
        assert got is not stored

    def test_must_receive_state_ref(self) -> None:
        stored = Settings()
        assert SettingsPanel().must_receive_state_ref(stored) is stored

    def test_mismatch_raises(self) -> None:
        with pytest.raises(StateTypeError) as excinfo:
            SettingsPanel().must_receive_state(42)
        assert excinfo.value.expected is Settings
        assert excinfo.value.state == 42
        assert "Settings" in str(excinfo.value)

    def test_error_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            SettingsPanel().must_receive_state_ref("nope")
