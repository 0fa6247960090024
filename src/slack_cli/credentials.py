"""Slack API token discovery.

Sources are tried in order, first non-empty value wins:
SLACK_API_KEY (environment or .env), the per-user token file, the system-wide token file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .config import Settings, get_settings
from .errors import TokenNotFound, TokenReadError
from .log import get_logger

logger = get_logger("credentials")

Lookup = Callable[[], Optional[str]]


def _from_value(value: Optional[str]) -> Lookup:
    return lambda: value


def _from_file(path: str) -> Lookup:
    def read() -> Optional[str]:
        p = Path(path).expanduser()
        if not p.is_file():
            return None
        try:
            return p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TokenReadError(str(p), e) from e
    return read


def token_lookups(settings: Settings) -> List[Tuple[str, Lookup]]:
    return [
        ("SLACK_API_KEY", _from_value(settings.SLACK_API_KEY)),
        (settings.SLACK_USER_TOKEN_FILE, _from_file(settings.SLACK_USER_TOKEN_FILE)),
        (settings.SLACK_SYSTEM_TOKEN_FILE, _from_file(settings.SLACK_SYSTEM_TOKEN_FILE)),
    ]


def resolve_token(settings: Optional[Settings] = None) -> str:
    settings = settings or get_settings()
    lookups = token_lookups(settings)
    for source, lookup in lookups:
        value = lookup()
        token = value.strip() if value else ""
        if token:
            logger.debug(f"Using Slack token from {source}")
            return token
    raise TokenNotFound([source for source, _ in lookups])
