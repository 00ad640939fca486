"""CLI entry point — ``signup-server``."""

from __future__ import annotations

import argparse
import asyncio
import sys

from signup_server import __version__
from signup_server.config import Settings
from signup_server.logging_config import setup_logging
from signup_server.server import serve


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"signup-server {__version__}")
        return

    settings = _load_settings(args)
    setup_logging(settings.log_level)
    sys.exit(asyncio.run(serve(settings)))


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="signup-server",
        description="Text routes and a user signup endpoint.",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Bind address (default: HOST or 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=None,
        help="Listen port (default: PORT or 7777)",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy database URL (default: DATABASE_URL)",
    )
    return parser


def _load_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with command-line overrides applied."""
    overrides = {
        key: value
        for key, value in (
            ("host", args.host),
            ("port", args.port),
            ("database_url", args.database_url),
        )
        if value is not None
    }
    return Settings(**overrides)
