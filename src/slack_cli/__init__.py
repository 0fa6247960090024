"""slack-cli - send a single formatted message to a Slack channel.

The interesting part is choosing the chat.postMessage shape for a given set of
inputs (text, title, sidebar color, raw Block Kit); everything else is plumbing.

Components:
- main: argparse entry point (`slack-cli`)
- schemas: validated MessageRequest and the OutgoingPayload union
- slack.post_blocks: payload builder
- slack.client: slack_sdk wrapper and send_message
- credentials: token discovery (env, user file, system file)
"""

__version__ = "0.3.0"
