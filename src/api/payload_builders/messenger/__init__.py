"""Builders Messenger Send API."""

from .message import build_messenger_message

__all__ = ["build_messenger_message"]
