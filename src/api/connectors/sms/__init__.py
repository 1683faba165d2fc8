"""Conector SMS: cliente da Twilio REST API."""

from .client import TwilioHttpClient

__all__ = ["TwilioHttpClient"]
