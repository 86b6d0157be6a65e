"""Command line configuration."""

from __future__ import annotations

import argparse
import codecs
from dataclasses import dataclass, field
from typing import Sequence

import rich_argparse

from .fetcher import DEFAULT_USER_AGENT
from .registry import DEFAULT_TITLE

__all__ = ["ExplorerConfig", "ExplorerHelpFormatter", "build_parser", "parse_config"]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ExplorerHelpFormatter(rich_argparse.RichHelpFormatter):
    pass


@dataclass
class ExplorerConfig:
    addresses: list[str] = field(default_factory=list)
    default_title: str = DEFAULT_TITLE
    timeout: float | None = None
    encoding: str = "utf-8"
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "WARNING"
    log_file: str | None = None


def _timeout(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if seconds <= 0:
        raise argparse.ArgumentTypeError("timeout must be positive")
    return seconds


def _encoding(value: str) -> str:
    try:
        return codecs.lookup(value).name
    except LookupError:
        raise argparse.ArgumentTypeError(f"unknown encoding: {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="source-explorer",
        description="Show the raw source of web pages, one page per tab.",
        epilog="Keys: ctrl+t new tab, ctrl+w close tab, ctrl+q quit.",
        formatter_class=ExplorerHelpFormatter,
    )
    parser.add_argument(
        "addresses",
        nargs="*",
        metavar="ADDRESS",
        help="addresses to open at startup, one tab each",
    )
    parser.add_argument(
        "--default-title",
        default=DEFAULT_TITLE,
        help="label given to newly opened tabs (default: %(default)s)",
    )
    parser.add_argument(
        "--timeout",
        type=_timeout,
        default=None,
        help="seconds to wait for a page before giving up (default: wait forever)",
    )
    parser.add_argument("--encoding", type=_encoding, default="utf-8", help="text encoding of fetched pages")
    parser.add_argument("--user-agent", default=DEFAULT_USER_AGENT, help="User-Agent header to send")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="minimum level for log records (default: %(default)s)",
    )
    parser.add_argument("--log-file", default=None, help="also write log records to this file")
    return parser


def parse_config(argv: Sequence[str] | None = None) -> ExplorerConfig:
    args = build_parser().parse_args(argv)
    return ExplorerConfig(
        addresses=list(args.addresses),
        default_title=args.default_title,
        timeout=args.timeout,
        encoding=args.encoding,
        user_agent=args.user_agent,
        log_level=args.log_level,
        log_file=args.log_file,
    )
