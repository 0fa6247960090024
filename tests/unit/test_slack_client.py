import pytest
from unittest.mock import MagicMock, patch
from slack_sdk.errors import SlackApiError, SlackRequestError

from slack_cli.errors import SlackApiCallError
from slack_cli.schemas.request import MessageRequest
from slack_cli.slack.client import SlackClientWrapper, send_message


def test_wrapper_builds_web_client_with_token_and_base_url():
    with patch("slack_cli.slack.client.WebClient") as mock_cls:
        SlackClientWrapper("xoxb-test", base_url="http://localhost:8080/api/")
        mock_cls.assert_called_once_with(token="xoxb-test", base_url="http://localhost:8080/api/")


def test_post_payload_success(mock_web_client):
    """
    WHY: Verify that our wrapper hands the payload to the official Slack SDK unchanged.
    HOW: Mock the underlying `chat_postMessage` method and post a Block Kit body.
    EXPECTED: `chat_postMessage` is called once with the payload as keyword arguments.
    """
    payload = {"channel": "C1", "text": "Hello", "blocks": [{"type": "divider"}]}
    SlackClientWrapper("xoxb-test").post_payload(payload)

    mock_web_client.chat_postMessage.assert_called_once_with(
        channel="C1", text="Hello", blocks=[{"type": "divider"}]
    )


def test_post_payload_api_error_is_not_retried(mock_web_client):
    """
    WHY: A rejected post must fail the run, and we do not retry.
    HOW: Make `chat_postMessage` raise SlackApiError('channel_not_found').
    EXPECTED: SlackApiCallError carrying the Slack error code, exactly one call.
    """
    mock_web_client.chat_postMessage.side_effect = SlackApiError(
        "channel_not_found", {"ok": False, "error": "channel_not_found"}
    )

    with pytest.raises(SlackApiCallError) as exc:
        SlackClientWrapper("xoxb-test").post_payload({"channel": "C404", "text": "hi"})

    assert exc.value.error == "channel_not_found"
    assert str(exc.value) == "Slack API error: channel_not_found"
    assert mock_web_client.chat_postMessage.call_count == 1


def test_post_payload_transport_error(mock_web_client):
    mock_web_client.chat_postMessage.side_effect = SlackRequestError("connection refused")
    with pytest.raises(SlackApiCallError) as exc:
        SlackClientWrapper("xoxb-test").post_payload({"channel": "C1", "text": "hi"})
    assert "connection refused" in exc.value.error


def test_send_message_posts_attachment_body(mock_web_client):
    result = send_message(MessageRequest(channel="#ops", text="Build passed", color="#36a64f"), "xoxb-test")

    assert result.ok
    assert result.ts == "1700000000.000100"
    assert result.warnings == []
    mock_web_client.chat_postMessage.assert_called_once_with(
        channel="#ops",
        attachments=[{"color": "#36a64f", "text": "Build passed", "fallback": "Build passed"}],
    )


def test_send_message_reports_color_drop(mock_web_client):
    result = send_message(MessageRequest(channel="#ops", text="z" * 4001, color="good"), "xoxb-test")

    kwargs = mock_web_client.chat_postMessage.call_args.kwargs
    assert "attachments" not in kwargs
    assert kwargs["blocks"][0]["type"] == "section"
    assert result.warnings == ["color dropped: message exceeds 4000 characters"]


def test_send_message_passes_slack_warning_through():
    client = MagicMock()
    client.post_payload.return_value = {"ok": True, "warning": "missing_text_in_message"}

    result = send_message(MessageRequest(channel="C1", raw_blocks=[{"type": "divider"}]), "xoxb-test", client=client)

    assert result.warnings == ["missing_text_in_message"]


def test_send_message_builder_warning_wins_over_slack_warning():
    client = MagicMock()
    client.post_payload.return_value = {"ok": True, "warning": "superfluous_charset"}

    result = send_message(MessageRequest(channel="C1", text="q" * 4001, color="good"), "xoxb-test", client=client)

    assert result.warnings == ["color dropped: message exceeds 4000 characters"]


def test_send_message_not_ok_response():
    client = MagicMock()
    client.post_payload.return_value = {"ok": False, "error": "not_in_channel"}

    with pytest.raises(SlackApiCallError) as exc:
        send_message(MessageRequest(channel="C1", text="hi"), "xoxb-test", client=client)
    assert exc.value.error == "not_in_channel"
