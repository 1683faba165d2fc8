"""Builders Kik Bot API."""

from .message import build_kik_message, build_keyboard

__all__ = ["build_keyboard", "build_kik_message"]
