"""Exception hierarchy for slack-cli.

Everything raised on purpose derives from SlackCliError, so the CLI can catch
one type, print the message and exit 1.
"""

from __future__ import annotations


class SlackCliError(Exception):
    """Base class for all expected failures."""


class FormatError(SlackCliError):
    """The caller's inputs cannot be turned into a payload."""


class ConflictingOptions(FormatError):
    def __init__(self, message: str = "--title cannot be combined with --blocks"):
        super().__init__(message)


class EmptyMessage(FormatError):
    def __init__(self, message: str = "No message provided"):
        super().__init__(message)


class MalformedBlocks(FormatError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid blocks JSON: {reason}")


class InvalidColor(FormatError):
    def __init__(self, color: str):
        self.color = color
        super().__init__(
            f"invalid color '{color}': expected #RRGGBB or keyword "
            "(good, success, warning, danger, error)"
        )


class TokenNotFound(SlackCliError):
    def __init__(self, sources: list[str] | None = None):
        self.sources = sources or []
        super().__init__(
            "Slack API token not found. Set SLACK_API_KEY env var, or place token in "
            "~/.slack/api-token or /etc/slack/api-token"
            + (f" (looked in: {', '.join(self.sources)})" if self.sources else "")
        )


class TokenReadError(SlackCliError):
    def __init__(self, path: str, cause: Exception):
        self.path = path
        super().__init__(f"Failed to read token file {path}: {cause}")


class InputReadError(SlackCliError):
    """stdin or a blocks file could not be read."""


class SlackApiCallError(SlackCliError):
    def __init__(self, error: str):
        self.error = error
        super().__init__(f"Slack API error: {error}")
