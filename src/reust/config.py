"""Runtime configuration for the frame loops."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal, Mapping

Mode = Literal["text", "tui"]

# Frame period per frontend: the text frontend redraws the whole screen, so
# it ticks slowly enough to be readable.
DEFAULT_FRAME_MS: dict[str, int] = {"text": 500, "tui": 16}
DEFAULT_INCREMENT: dict[str, int] = {"text": 1, "tui": 10}

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_log_level(env: Mapping[str, str], default: str = "warning") -> str:
    raw = env.get("REUST_LOG_LEVEL", "").strip().lower()
    if not raw:
        return default
    if raw not in LOG_LEVELS:
        raise ValueError(
            f"REUST_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {raw!r}"
        )
    return raw


@dataclass
class Config:
    """Frame loop configuration."""

    mode: Mode = "text"
    frame_ms: int = 500
    increment: int = 1
    log_level: str = "warning"
    log_file: str | None = None
    # Append every byte written to the terminal to this file (debugging aid).
    write_log: str | None = None

    @property
    def frame_seconds(self) -> float:
        return max(0, self.frame_ms) / 1000.0

    @classmethod
    def from_env(cls, mode: Mode = "text", env: Mapping[str, str] | None = None) -> Config:
        """Build a config for *mode* from ``REUST_*`` environment variables."""
        if env is None:
            env = os.environ
        return cls(
            mode=mode,
            frame_ms=_env_int(env, "REUST_FRAME_MS", DEFAULT_FRAME_MS[mode]),
            increment=_env_int(env, "REUST_INCREMENT", DEFAULT_INCREMENT[mode]),
            log_level=_env_log_level(env),
            log_file=env.get("REUST_LOG_FILE") or None,
            write_log=env.get("REUST_WRITE_LOG") or None,
        )
