# Configuration for the Planning Poker slash command. Values come from
# environment variables (a `.env` file is loaded by the entry point).

import os


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    try:
        return int(raw)
    except (TypeError, ValueError):
        return default


# Slack incoming webhook used for channel broadcasts; empty disables sending
SLACK_WEBHOOK_URL = os.getenv("SLACK_WEBHOOK_URL", "")
SLACK_CHANNEL = os.getenv("SLACK_CHANNEL") or None
SLACK_USERNAME = os.getenv("SLACK_USERNAME", "planbot")
SLACK_ICON_EMOJI = os.getenv("SLACK_ICON_EMOJI") or None
SLACK_TIMEOUT = _int_env("SLACK_TIMEOUT", 10)

# Slash command name shown in usage hints
SLASH_COMMAND = os.getenv("SLASH_COMMAND", "/planbot")

# HTTP server
HOST = os.getenv("PLANBOT_HOST", "0.0.0.0")
PORT = _int_env("PLANBOT_PORT", 8080)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

VERSION = "1.0.0"
