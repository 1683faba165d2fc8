"""Conector Messenger: Send API, perfis e verificação do webhook."""

from .client import MessengerHttpClient
from .verify import WebhookChallengeError, verify_webhook_challenge

__all__ = [
    "MessengerHttpClient",
    "WebhookChallengeError",
    "verify_webhook_challenge",
]
