"""CLI entry point: runs the demo apps on the text or terminal frontend."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from reust.config import LOG_LEVELS, Config
from reust.state import StateTypeError

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="reust",
        description="Reactive rendering engine demos",
    )
    sub = parser.add_subparsers(dest="mode", required=True)

    for mode, help_text in (
        ("text", "Redraw an indented text outline every frame"),
        ("tui", "Interactive terminal UI (click the buttons, q to quit)"),
    ):
        p = sub.add_parser(mode, help=help_text)
        p.add_argument("--frame-ms", type=int, help="Milliseconds per frame")
        p.add_argument("--increment", type=int, help="Counter / percent step")
        p.add_argument("--frames", type=int, help="Stop after this many frames")
        p.add_argument(
            "--log-level", choices=LOG_LEVELS
        )
        p.add_argument("--log-file", help="Write logs to this file")
        if mode == "tui":
            p.add_argument("--write-log", help="Append raw terminal output to this file")

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    """Environment first, then command-line overrides."""
    config = Config.from_env(args.mode)
    if args.frame_ms is not None:
        config.frame_ms = args.frame_ms
    if args.increment is not None:
        config.increment = args.increment
    if args.log_level:
        config.log_level = args.log_level
    if args.log_file:
        config.log_file = args.log_file
    if getattr(args, "write_log", None):
        config.write_log = args.write_log
    return config


def configure_logging(config: Config) -> None:
    handlers: list[logging.Handler]
    if config.log_file:
        handlers = [logging.FileHandler(config.log_file)]
    elif config.mode == "tui":
        # The screen belongs to the renderer.
        handlers = [logging.NullHandler()]
    else:
        handlers = [logging.StreamHandler(sys.stderr)]
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper()),
        format=_LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    configure_logging(config)

    try:
        if config.mode == "text":
            from reust.demo.text_app import app
            from reust.frontend.text import run_text

            run_text(lambda: app(config.increment), config, max_frames=args.frames)
        else:
            from reust.demo.tui_app import app
            from reust.frontend.tui.app import run_tui

            asyncio.run(
                run_tui(lambda: app(config.increment), config, max_frames=args.frames)
            )
    except KeyboardInterrupt:
        pass
    except StateTypeError as e:
        logger.exception("render pass aborted")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
