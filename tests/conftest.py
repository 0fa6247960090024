import pytest
from unittest.mock import patch

from slack_cli.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    # Never pick up a real token or .env from the developer's machine
    monkeypatch.delenv("SLACK_API_KEY", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings(tmp_path) -> Settings:
    """
    Settings pointing both token files into tmp_path (files not created).
    """
    return Settings(
        _env_file=None,
        SLACK_API_KEY=None,
        SLACK_USER_TOKEN_FILE=str(tmp_path / "user-token"),
        SLACK_SYSTEM_TOKEN_FILE=str(tmp_path / "system-token"),
    )


@pytest.fixture
def mock_web_client():
    """
    Replaces slack_sdk.WebClient inside slack/client.py.
    chat_postMessage succeeds by default.
    """
    with patch("slack_cli.slack.client.WebClient") as mock_cls:
        instance = mock_cls.return_value
        instance.chat_postMessage.return_value = {"ok": True, "channel": "C1", "ts": "1700000000.000100"}
        yield instance
