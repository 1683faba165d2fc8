"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AdapterError,
    CredentialsError,
    NotSupportedError,
    PlatformApiError,
    SessionError,
    UnsupportedMessageError,
)

__all__ = [
    "AdapterError",
    "CredentialsError",
    "NotSupportedError",
    "PlatformApiError",
    "SessionError",
    "UnsupportedMessageError",
]
