"""Command-line entry point: send one message to a Slack channel.

Usage:
    slack-cli -c '#ops' -m 'Build passed' --color good
    echo 'deploy finished' | slack-cli -c C12345 -t 'CI Status'
    slack-cli -c C12345 --blocks layout.json -m 'fallback text'
    cat layout.json | slack-cli -c C12345 --blocks
"""

from __future__ import annotations

import argparse
import sys
from typing import IO, List, Optional

from . import __version__
from .credentials import resolve_token
from .errors import EmptyMessage, InputReadError, MalformedBlocks, SlackCliError
from .log import get_logger, setup_logging
from .schemas.request import MessageRequest, parse_blocks_json
from .slack.client import send_message

logger = get_logger("slack_cli")

STDIN_MARKER = "-"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="slack-cli", description="Send messages to Slack")
    p.add_argument("-c", "--channel", required=True, help="Channel ID or name (e.g. C12345 or #general)")
    p.add_argument("-m", "--message", help="Message text (mrkdwn). Read from stdin when omitted")
    p.add_argument("--color", help="Sidebar color: #RRGGBB or good, success, warning, danger, error")
    p.add_argument("-t", "--title", help="Header shown above the message")
    p.add_argument(
        "--blocks",
        nargs="?",
        const=STDIN_MARKER,
        metavar="PATH",
        help="Block Kit JSON array from PATH, or stdin when PATH is omitted or '-'",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    p.add_argument("--version", action="version", version=f"slack-cli v{__version__}")
    return p


def read_stdin_message(stdin: IO[str]) -> str:
    if stdin.isatty():
        raise EmptyMessage()
    try:
        text = stdin.read().strip()
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"Failed to read stdin: {e}") from e
    if not text:
        raise EmptyMessage()
    return text


def read_blocks(source: str, stdin: IO[str]):
    if source == STDIN_MARKER:
        if stdin.isatty():
            raise MalformedBlocks("no input piped to stdin")
        try:
            raw = stdin.read()
        except (OSError, UnicodeDecodeError) as e:
            raise MalformedBlocks(f"Failed to read stdin: {e}") from e
    else:
        try:
            with open(source, "r", encoding="utf-8") as f:
                raw = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise MalformedBlocks(f"failed to read file '{source}': {e}") from e
    return parse_blocks_json(raw)


def request_from_args(args: argparse.Namespace, stdin: IO[str]) -> MessageRequest:
    if args.blocks is not None:
        return MessageRequest(
            channel=args.channel,
            text=args.message,
            title=args.title,
            color=args.color,
            raw_blocks=read_blocks(args.blocks, stdin),
        )

    message = args.message
    if message is None:
        message = read_stdin_message(stdin)
    return MessageRequest(
        channel=args.channel,
        text=message,
        title=args.title,
        color=args.color,
    )


def run(argv: Optional[List[str]] = None, stdin: Optional[IO[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None)
    stdin = stdin or sys.stdin

    request = request_from_args(args, stdin)
    token = resolve_token()

    result = send_message(request, token)
    logger.debug(f"Posted message {result.ts} to {result.channel}")
    for warning in result.warnings:
        logger.warning(f"Warning: {warning}")


def main(argv: Optional[List[str]] = None, stdin: Optional[IO[str]] = None) -> int:
    try:
        run(argv, stdin)
    except SlackCliError as e:
        logger.error(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
