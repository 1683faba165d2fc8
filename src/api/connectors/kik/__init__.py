"""Conector Kik: cliente HTTP da Kik Bot API."""

from .client import KikHttpClient

__all__ = ["KikHttpClient"]
