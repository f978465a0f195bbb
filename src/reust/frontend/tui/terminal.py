"""Terminal abstraction for raw-mode stdin/stdout interaction.

Provides a ``Terminal`` protocol and a ``ProcessTerminal`` implementation
that manages raw mode, mouse reporting, cursor visibility and screen
clearing via ANSI escape sequences.  Input is read from an asyncio reader on
stdin and handed out one complete sequence at a time.
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys
import termios
import tty
from typing import Callable, Protocol

from reust.frontend.tui.stdin_buffer import InputBuffer

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

# Button press/release tracking, SGR extended coordinates
_MOUSE_ENABLE = "\x1b[?1000h\x1b[?1006h"
_MOUSE_DISABLE = "\x1b[?1006l\x1b[?1000l"

_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_CLEAR_SCREEN = "\x1b[2J\x1b[H"
_GOTO_FMT = "\x1b[{};{}H"

# How long an incomplete escape sequence may wait for its tail
_INPUT_TIMEOUT = 0.01


def goto(left: int, top: int) -> str:
    """Cursor-addressing sequence for 1-based (*left*, *top*)."""
    return _GOTO_FMT.format(top, left)


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for terminal I/O operations."""

    def start(self, on_input: Callable[[str], None]) -> None: ...

    def stop(self) -> None: ...

    def write(self, data: str) -> None: ...

    def flush(self) -> None: ...

    @property
    def columns(self) -> int: ...

    @property
    def rows(self) -> int: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def clear_screen(self) -> None: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal backed by ``sys.stdin``/``sys.stdout``.

    ``start`` must be called from within a running event loop so the stdin
    reader can be registered.
    """

    def __init__(self, write_log_path: str | None = None) -> None:
        self._input_handler: Callable[[str], None] | None = None
        self._input_buffer = InputBuffer()
        self._flush_handle: asyncio.TimerHandle | None = None
        self._reader_active = False
        self._original_termios: list | None = None
        self._write_log_path = write_log_path or ""
        self._pending: list[str] = []

    # -- properties ---------------------------------------------------------

    @property
    def columns(self) -> int:
        try:
            return os.get_terminal_size(sys.stdout.fileno()).columns
        except (ValueError, OSError):
            return 80

    @property
    def rows(self) -> int:
        try:
            return os.get_terminal_size(sys.stdout.fileno()).lines
        except (ValueError, OSError):
            return 24

    # -- start / stop -------------------------------------------------------

    def start(self, on_input: Callable[[str], None]) -> None:
        """Enable raw mode and mouse reporting, and begin reading stdin."""
        self._input_handler = on_input

        fd = sys.stdin.fileno()
        self._original_termios = termios.tcgetattr(fd)
        tty.setraw(fd)

        self._raw_write(_MOUSE_ENABLE + _HIDE_CURSOR)
        self._start_stdin_reader()
        logger.debug("terminal started (%dx%d)", self.columns, self.rows)

    def stop(self) -> None:
        """Restore terminal state and clean up all handlers."""
        if self._flush_handle is not None:
            self._flush_handle.cancel()
            self._flush_handle = None
        self._remove_stdin_reader()

        self._raw_write(_MOUSE_DISABLE + _SHOW_CURSOR + _CLEAR_SCREEN)

        if self._original_termios is not None:
            termios.tcsetattr(
                sys.stdin.fileno(), termios.TCSADRAIN, self._original_termios
            )
            self._original_termios = None

        self._input_handler = None
        logger.debug("terminal stopped")

    # -- output -------------------------------------------------------------

    def write(self, data: str) -> None:
        """Queue *data*; nothing reaches stdout until :meth:`flush`."""
        self._pending.append(data)

    def flush(self) -> None:
        data = "".join(self._pending)
        self._pending.clear()
        if not data:
            return
        self._raw_write(data)

        if self._write_log_path:
            try:
                with open(self._write_log_path, "a") as f:
                    f.write(data)
            except OSError:
                logger.warning("cannot append to write log %s", self._write_log_path)

    def hide_cursor(self) -> None:
        self.write(_HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.write(_SHOW_CURSOR)

    def clear_screen(self) -> None:
        self.write(_CLEAR_SCREEN)

    # -- private: stdin reading --------------------------------------------

    def _start_stdin_reader(self) -> None:
        if self._reader_active:
            return
        loop = asyncio.get_running_loop()
        loop.add_reader(sys.stdin.fileno(), self._on_stdin_readable)
        self._reader_active = True

    def _remove_stdin_reader(self) -> None:
        if not self._reader_active:
            return
        try:
            asyncio.get_running_loop().remove_reader(sys.stdin.fileno())
        except RuntimeError:
            # Loop already gone; the reader went with it.
            pass
        self._reader_active = False

    def _on_stdin_readable(self) -> None:
        try:
            raw = os.read(sys.stdin.fileno(), 4096)
        except OSError:
            return
        if not raw:
            return

        if self._flush_handle is not None:
            self._flush_handle.cancel()
            self._flush_handle = None

        self._emit(self._input_buffer.feed(raw.decode("utf-8", errors="replace")))

        if self._input_buffer.pending:
            loop = asyncio.get_running_loop()
            self._flush_handle = loop.call_later(_INPUT_TIMEOUT, self._flush_input)

    def _flush_input(self) -> None:
        self._flush_handle = None
        self._emit(self._input_buffer.flush())

    def _emit(self, sequences: list[str]) -> None:
        if self._input_handler is None:
            return
        for seq in sequences:
            self._input_handler(seq)

    # -- private: raw write ------------------------------------------------

    def _raw_write(self, data: str) -> None:
        try:
            sys.stdout.write(data)
            sys.stdout.flush()
        except OSError as e:
            logger.debug("dropped %d bytes of terminal output: %s", len(data), e)
