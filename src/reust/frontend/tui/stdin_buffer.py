"""Splits raw stdin chunks into complete key and mouse sequences.

Input arrives in arbitrary chunks; an escape sequence (a mouse report in
particular) may be split across two reads.  ``InputBuffer`` holds back an
incomplete tail until the rest arrives or the caller flushes it.
"""

from __future__ import annotations

from typing import Literal

__all__ = ["ESC", "InputBuffer", "split_sequences", "sequence_status"]

ESC = "\x1b"

Status = Literal["complete", "incomplete", "not-escape"]


def sequence_status(data: str) -> Status:
    """Classify *data* as a complete escape sequence, a prefix of one, or text."""
    if not data.startswith(ESC):
        return "not-escape"
    if len(data) == 1:
        return "incomplete"

    intro = data[1]
    if intro == "[":
        # Legacy X10 mouse report: ESC [ M <button> <col> <row>
        if data.startswith(f"{ESC}[M"):
            return "complete" if len(data) >= 6 else "incomplete"
        return _csi_status(data)
    if intro == "]":
        if data.endswith("\x07") or data.endswith(f"{ESC}\\"):
            return "complete"
        return "incomplete"
    if intro == "O":
        return "complete" if len(data) >= 3 else "incomplete"
    # ESC followed by one character: alt+key
    return "complete"


def _csi_status(data: str) -> Status:
    if len(data) < 3:
        return "incomplete"
    payload = data[2:]
    # Parameter bytes (digits, ';', '<' for SGR mouse) run up to a final byte;
    # malformed reports end there too and are dropped by the parser.
    if not 0x40 <= ord(payload[-1]) <= 0x7E:
        return "incomplete"
    return "complete"


def split_sequences(buffer: str) -> tuple[list[str], str]:
    """Split *buffer* into complete sequences and an incomplete remainder."""
    sequences: list[str] = []
    pos = 0
    while pos < len(buffer):
        if buffer[pos] != ESC:
            sequences.append(buffer[pos])
            pos += 1
            continue

        end = pos + 1
        while True:
            if end > len(buffer):
                return sequences, buffer[pos:]
            status = sequence_status(buffer[pos:end])
            if status != "incomplete":
                break
            end += 1
        sequences.append(buffer[pos:end])
        pos = end
    return sequences, ""


class InputBuffer:
    """Accumulates raw input and hands out complete sequences."""

    def __init__(self) -> None:
        self._buffer = ""

    @property
    def pending(self) -> str:
        """Incomplete tail waiting for more input."""
        return self._buffer

    def feed(self, data: str) -> list[str]:
        sequences, self._buffer = split_sequences(self._buffer + data)
        return sequences

    def flush(self) -> list[str]:
        """Give up waiting: emit whatever is buffered as one sequence."""
        if not self._buffer:
            return []
        data, self._buffer = self._buffer, ""
        return [data]
