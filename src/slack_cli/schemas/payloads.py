"""Wire shapes for chat.postMessage.

OutgoingPayload is a closed union of three variants discriminated on `kind`.
`kind` is never serialized; to_api() produces the request body.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TextObject(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["plain_text", "mrkdwn"]
    text: str


class HeaderBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["header"] = "header"
    text: TextObject

    @classmethod
    def of(cls, title: str) -> "HeaderBlock":
        return cls(text=TextObject(type="plain_text", text=title))


class SectionBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["section"] = "section"
    text: TextObject

    @classmethod
    def of(cls, text: str) -> "SectionBlock":
        return cls(text=TextObject(type="mrkdwn", text=text))


Block = Union[HeaderBlock, SectionBlock]


class _Payload(BaseModel):
    model_config = ConfigDict(frozen=True)

    def to_api(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class BlockKitPayload(_Payload):
    kind: Literal["block_kit"] = Field("block_kit", exclude=True)
    channel: str
    text: str
    blocks: List[Block]


class Attachment(BaseModel):
    model_config = ConfigDict(frozen=True)

    color: str
    text: str
    fallback: str
    title: Optional[str] = None


class AttachmentPayload(_Payload):
    kind: Literal["attachment"] = Field("attachment", exclude=True)
    channel: str
    attachments: List[Attachment] = Field(..., min_length=1, max_length=1)


class BlocksAttachment(BaseModel):
    model_config = ConfigDict(frozen=True)

    color: str
    blocks: List[Dict[str, Any]]


class RawBlocksPayload(_Payload):
    """
    Caller-built layout. Either top-level `blocks`, or exactly one colored
    attachment wrapping them; never both.
    """
    kind: Literal["raw_blocks"] = Field("raw_blocks", exclude=True)
    channel: str
    text: Optional[str] = None
    blocks: Optional[List[Dict[str, Any]]] = None
    attachments: Optional[List[BlocksAttachment]] = Field(None, min_length=1, max_length=1)

    @model_validator(mode="after")
    def check_single_container(self) -> "RawBlocksPayload":
        if (self.blocks is None) == (self.attachments is None):
            raise ValueError("exactly one of blocks or attachments must be set")
        return self

    def to_api(self) -> Dict[str, Any]:
        # Caller blocks go out as given, including any null values inside them
        body = self.model_dump(exclude_none=True, exclude={"blocks", "attachments"})
        if self.blocks is not None:
            body["blocks"] = self.blocks
        else:
            body["attachments"] = [{"color": a.color, "blocks": a.blocks} for a in self.attachments]
        return body


OutgoingPayload = Annotated[
    Union[BlockKitPayload, AttachmentPayload, RawBlocksPayload],
    Field(discriminator="kind"),
]


class FormatWarning(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    message: str

    def __str__(self) -> str:
        return self.message


class BuildResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    payload: OutgoingPayload
    warning: Optional[FormatWarning] = None
