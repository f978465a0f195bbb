"""Terminal frame loop."""

from __future__ import annotations

import logging
from typing import Callable

from reust.config import Config
from reust.element import El, RenderedEl
from reust.engine import render
from reust.frontend.tui.draw import draw_graph
from reust.frontend.tui.events import process_events
from reust.frontend.tui.node import TUINode
from reust.frontend.tui.terminal import ProcessTerminal, Terminal
from reust.state import StateStore
from reust.vsync import VSync

__all__ = ["run_tui"]

logger = logging.getLogger(__name__)


async def run_tui(
    app: Callable[[], El[TUINode]],
    config: Config,
    *,
    terminal: Terminal | None = None,
    store: StateStore | None = None,
    max_frames: int | None = None,
    vsync: VSync | None = None,
) -> StateStore:
    """Drive *app* until the user quits or *max_frames* have been drawn.

    Input collected between ticks is dispatched against the tree drawn on
    the previous tick, so click handlers only ever run between passes.
    """
    if terminal is None:
        terminal = ProcessTerminal(write_log_path=config.write_log)
    store = store if store is not None else StateStore()
    vsync = vsync or VSync(config.frame_seconds)

    pending: list[str] = []
    current: RenderedEl[TUINode] = None
    frame = 0

    terminal.start(pending.append)
    logger.info("tui frame loop started (%d ms per frame)", config.frame_ms)
    try:
        while max_frames is None or frame < max_frames:
            events = pending[:]
            pending.clear()
            if process_events(events, current):
                logger.info("quit requested")
                break

            current = render(app(), store)
            draw_graph(terminal, current)
            frame += 1
            await vsync.wait_async()
    finally:
        terminal.stop()
        logger.info("tui frame loop stopped after %d frames", frame)
    return store
