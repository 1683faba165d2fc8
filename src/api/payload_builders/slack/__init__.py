"""Builders Slack Web API."""

from .message import build_slack_message, parse_callback_context

__all__ = ["build_slack_message", "parse_callback_context"]
