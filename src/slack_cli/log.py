"""Logging configuration with Rich formatting.

Provides setup_logging() for CLI initialization and get_logger() for module-level loggers.
All output goes to stderr so stdout stays free for piping.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from .config import get_settings

def setup_logging(level: Optional[str] = None):
    settings = get_settings()
    logging.basicConfig(
        level=level or settings.LOG_LEVEL,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)],
        force=True,
    )

    # Warnings from the CLI itself are always shown, even with LOG_LEVEL=ERROR
    root_level = logging.getLogger().level
    logging.getLogger("slack_cli").setLevel(min(root_level, logging.WARNING))

    # Quiet down some noisy libraries
    logging.getLogger("slack_sdk").setLevel(logging.WARNING)

def get_logger(name: str):
    return logging.getLogger(name)
