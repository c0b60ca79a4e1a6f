"""Command line entry point.

Usage:
    wold [-l <address>:<port>] [-b <address>:<port>] [--log-level LEVEL]

Options not given on the command line fall back to WOLD_* environment
variables, then to the built-in defaults.
"""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from pydantic import ValidationError

from wold.config import (
    DEFAULT_BROADCAST_ADDR,
    DEFAULT_LISTEN_ADDR,
    LOG_LEVELS,
    ConfigError,
    Settings,
    parse_endpoint,
)


def _endpoint(value: str) -> str:
    try:
        return str(parse_endpoint(value))
    except ConfigError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wold",
        description="Relay HTTP requests to Wake-on-LAN magic packets.",
    )
    parser.add_argument(
        "-l",
        dest="listen_addr",
        metavar="<address>:<port>",
        type=_endpoint,
        help=f"start a server with a provided address (default: {DEFAULT_LISTEN_ADDR})",
    )
    parser.add_argument(
        "-b",
        "-d",
        dest="broadcast_addr",
        metavar="<address>:<port>",
        type=_endpoint,
        help=f"send magic packets to a provided address (default: {DEFAULT_BROADCAST_ADDR})",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="logging level (default: INFO)",
    )
    return parser


def parse_command_line(argv: Optional[Sequence[str]] = None) -> Settings:
    """Parse ``argv`` into frozen Settings. Exits with status 2 on bad input."""
    parser = build_parser()
    args = parser.parse_args(argv)
    overrides = {k: v for k, v in vars(args).items() if v is not None}
    try:
        return Settings(**overrides)
    except ValidationError as e:
        # Malformed WOLD_* environment values
        parser.error(str(e))


def main(argv: Optional[Sequence[str]] = None) -> None:
    from wold.main import run

    settings = parse_command_line(argv)
    run(settings)


if __name__ == "__main__":
    main()
