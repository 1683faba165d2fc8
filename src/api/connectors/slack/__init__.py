"""Conector Slack: cliente da Web API."""

from .client import SlackHttpClient

__all__ = ["SlackHttpClient"]
