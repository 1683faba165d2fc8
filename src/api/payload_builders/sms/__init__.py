"""Builders Twilio Messages API."""

from .message import build_sms_message

__all__ = ["build_sms_message"]
