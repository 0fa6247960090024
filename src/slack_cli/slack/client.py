from typing import Any, Dict, List, Optional

from pydantic import BaseModel
from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError, SlackClientError
from ..config import get_settings
from ..errors import SlackApiCallError
from ..log import get_logger
from ..schemas.request import MessageRequest
from .post_blocks import build_payload

logger = get_logger("slack_client")


class SendResult(BaseModel):
    ok: bool
    channel: Optional[str] = None
    ts: Optional[str] = None
    warnings: List[str] = []


class SlackClientWrapper:
    def __init__(self, token: str, base_url: Optional[str] = None):
        self.client = WebClient(token=token, base_url=base_url or get_settings().SLACK_API_URL)

    def post_payload(self, payload: Dict[str, Any]):
        """
        Post a prepared payload (dict) directly to Slack using chat_postMessage.
        No retries: a failed call is reported to the caller as SlackApiCallError.
        """
        try:
            return self.client.chat_postMessage(**payload)
        except SlackApiError as e:
            error = e.response.get("error") or "unknown error"
            logger.debug(f"Slack API error: {error}")
            raise SlackApiCallError(error) from e
        except SlackClientError as e:
            raise SlackApiCallError(str(e)) from e


def send_message(
    request: MessageRequest,
    token: str,
    client: Optional[SlackClientWrapper] = None,
) -> SendResult:
    """
    Build the payload for `request`, post it and collect warnings.
    The builder's warning takes precedence over a warning in Slack's response.
    """
    result = build_payload(request)
    client = client or SlackClientWrapper(token)

    response = client.post_payload(result.payload.to_api())
    if not response.get("ok", False):
        raise SlackApiCallError(response.get("error") or "unknown error")

    warnings: List[str] = []
    if result.warning is not None:
        warnings.append(result.warning.message)
    elif response.get("warning"):
        warnings.append(response["warning"])

    return SendResult(
        ok=True,
        channel=response.get("channel"),
        ts=response.get("ts"),
        warnings=warnings,
    )
