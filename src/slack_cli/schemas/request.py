"""Validated caller input.

MessageRequest is the only way inputs reach the payload builder. Its
constructor fails fast on illegal combinations, so the builder can rely on
them having been checked.
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from ..errors import ConflictingOptions, EmptyMessage, InvalidColor, MalformedBlocks

MAX_BLOCKS = 100

COLOR_KEYWORDS = {
    "good": "#36a64f",
    "success": "#36a64f",
    "warning": "#daa038",
    "danger": "#a30200",
    "error": "#a30200",
}

_HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


def resolve_color(token: str) -> str:
    """
    Map a color keyword (case-insensitive) or #RRGGBB to a lower-case hex string.
    """
    lowered = token.lower()
    if lowered in COLOR_KEYWORDS:
        return COLOR_KEYWORDS[lowered]
    if _HEX_COLOR_RE.match(token):
        return lowered
    raise InvalidColor(token)


def check_blocks(value: Any) -> List[Dict[str, Any]]:
    if not isinstance(value, list):
        raise MalformedBlocks("expected a JSON array")
    if not value:
        raise MalformedBlocks("blocks array is empty")
    if len(value) > MAX_BLOCKS:
        raise MalformedBlocks(f"too many blocks (max {MAX_BLOCKS})")
    for item in value:
        if not isinstance(item, dict):
            raise MalformedBlocks("each block must be a JSON object")
    return value


def parse_blocks_json(raw: str) -> List[Dict[str, Any]]:
    """Parse raw Block Kit JSON read from a file or stdin."""
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedBlocks(str(e)) from e
    return check_blocks(value)


class MessageRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    channel: str
    text: Optional[str] = None
    title: Optional[str] = None
    color: Optional[str] = None
    raw_blocks: Optional[List[Dict[str, Any]]] = None

    @model_validator(mode="before")
    @classmethod
    def check_combination(cls, data: Any) -> Any:
        # Runs before field coercion so malformed blocks surface as MalformedBlocks,
        # not as a pydantic ValidationError.
        if not isinstance(data, dict):
            return data
        data = dict(data)

        text = data.get("text")
        if isinstance(text, str) and not text.strip():
            data["text"] = text = None

        blocks = data.get("raw_blocks")
        if blocks is not None:
            check_blocks(blocks)
            if data.get("title") is not None:
                raise ConflictingOptions()
        elif text is None:
            raise EmptyMessage()
        return data

    @field_validator("color")
    @classmethod
    def normalize_color(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return resolve_color(v)
