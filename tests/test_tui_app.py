"""Tests for reust.frontend.tui.app -- the terminal frame loop."""

from __future__ import annotations

import asyncio

import pytest

from reust.config import Config
from reust.demo.tui_app import SettingsControlsState, app
from reust.frontend.tui.app import run_tui
from reust.vsync import VSync

from .virtual_terminal import VirtualTerminal


class ScriptedVSync(VSync):
    """Types one scripted chunk of input into the terminal per tick."""

    def __init__(self, terminal: VirtualTerminal, script: list[str]) -> None:
        super().__init__(0.0, sleep=lambda _s: None)
        self._terminal = terminal
        self._script = list(script)

    async def wait_async(self) -> None:
        if self._script:
            self._terminal.simulate_input(self._script.pop(0))
        await super().wait_async()


def run(script: list[str], max_frames: int | None = None, factory=None) -> tuple[VirtualTerminal, object]:
    terminal = VirtualTerminal()
    store = asyncio.run(
        run_tui(
            factory or (lambda: app(10)),
            Config(mode="tui", frame_ms=0),
            terminal=terminal,
            max_frames=max_frames,
            vsync=ScriptedVSync(terminal, script),
        )
    )
    return terminal, store


class TestRunTui:
    def test_draws_initial_frame(self) -> None:
        terminal, _ = run([], max_frames=1)
        assert terminal.frames
        assert "# Reactive TUI experiment with Python" in terminal.last_frame
        assert "50 %" in terminal.last_frame

    def test_click_on_moar_raises_percent(self) -> None:
        terminal, store = run(["\x1b[<0;50;12m"], max_frames=2)
        assert "60 %" in terminal.last_frame
        assert SettingsControlsState(percent=60) in [store.get(p) for p in store.paths()]

    def test_press_alone_does_nothing(self) -> None:
        terminal, _ = run(["\x1b[<0;50;12M"], max_frames=2)
        assert "50 %" in terminal.last_frame

    def test_click_outside_buttons_does_nothing(self) -> None:
        terminal, _ = run(["\x1b[<0;90;30m"], max_frames=2)
        assert "50 %" in terminal.last_frame

    def test_q_quits(self) -> None:
        terminal, _ = run(["q"])
        assert len(terminal.frames) == 1
        assert terminal.stopped

    def test_ctrl_c_quits(self) -> None:
        terminal, _ = run(["\x03"])
        assert len(terminal.frames) == 1

    def test_terminal_stopped_when_render_fails(self) -> None:
        def broken():
            raise RuntimeError("boom")

        terminal = VirtualTerminal()
        with pytest.raises(RuntimeError):
            asyncio.run(
                run_tui(broken, Config(mode="tui", frame_ms=0), terminal=terminal, max_frames=1)
            )
        assert terminal.stopped
