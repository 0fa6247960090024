"""Slack message payload builders.

Picks one of the three chat.postMessage shapes for a MessageRequest:
raw blocks (optionally wrapped in a colored attachment), a colored legacy
attachment, or plain Block Kit.
"""

from __future__ import annotations

from typing import List, Optional

from ..errors import ConflictingOptions, EmptyMessage
from ..schemas.payloads import (
    Attachment,
    AttachmentPayload,
    Block,
    BlockKitPayload,
    BlocksAttachment,
    BuildResult,
    FormatWarning,
    HeaderBlock,
    RawBlocksPayload,
    SectionBlock,
)
from ..schemas.request import MessageRequest

# Slack truncates or rejects legacy attachment text above this.
ATTACHMENT_TEXT_MAX = 4000


def build_mrkdwn_blocks(text: str, title: Optional[str] = None) -> List[Block]:
    """
    Header block (when titled) followed by a single mrkdwn section.
    """
    blocks: List[Block] = []
    if title is not None:
        blocks.append(HeaderBlock.of(title))
    blocks.append(SectionBlock.of(text))
    return blocks


def build_raw_blocks_payload(request: MessageRequest) -> RawBlocksPayload:
    if request.title is not None:
        raise ConflictingOptions()
    if request.color is None:
        return RawBlocksPayload(
            channel=request.channel,
            text=request.text,
            blocks=request.raw_blocks,
        )
    return RawBlocksPayload(
        channel=request.channel,
        text=request.text,
        attachments=[BlocksAttachment(color=request.color, blocks=request.raw_blocks)],
    )


def build_attachment_payload(request: MessageRequest) -> AttachmentPayload:
    return AttachmentPayload(
        channel=request.channel,
        attachments=[
            Attachment(
                color=request.color,
                text=request.text,
                fallback=request.text,
                title=request.title,
            )
        ],
    )


def build_block_kit_payload(request: MessageRequest) -> BlockKitPayload:
    return BlockKitPayload(
        channel=request.channel,
        text=request.text,
        blocks=build_mrkdwn_blocks(request.text, request.title),
    )


def build_payload(request: MessageRequest) -> BuildResult:
    """
    Select and build the payload for chat.postMessage.

    Raw blocks win over everything else. Color is only expressible through a
    legacy attachment, so text longer than ATTACHMENT_TEXT_MAX is sent uncolored
    and a FormatWarning is returned instead of printed.
    """
    if request.raw_blocks is not None:
        return BuildResult(payload=build_raw_blocks_payload(request))

    if request.text is None:
        raise EmptyMessage()

    if request.color is None:
        return BuildResult(payload=build_block_kit_payload(request))

    if len(request.text) <= ATTACHMENT_TEXT_MAX:
        return BuildResult(payload=build_attachment_payload(request))

    warning = FormatWarning(
        code="color_dropped",
        message=f"color dropped: message exceeds {ATTACHMENT_TEXT_MAX} characters",
    )
    return BuildResult(payload=build_block_kit_payload(request), warning=warning)
