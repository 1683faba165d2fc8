"""Handshake GET do webhook de página (hub.mode / hub.verify_token)."""

from __future__ import annotations

import hmac
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

SUBSCRIBE_MODE = "subscribe"


class WebhookChallengeError(ValueError):
    """Handshake recusado; a mensagem é o motivo (usado em log)."""


def verify_webhook_challenge(query: Mapping[str, str], expected_token: str | None) -> str:
    """Confere os parâmetros `hub.*` e devolve o `hub.challenge` a ecoar.

    Raises:
        WebhookChallengeError: Sem token configurado, modo diferente de
            `subscribe` ou token divergente
    """
    if not expected_token:
        raise WebhookChallengeError("missing_verify_token")
    if query.get("hub.mode") != SUBSCRIBE_MODE:
        raise WebhookChallengeError("unexpected_mode")

    received = query.get("hub.verify_token") or ""
    if not hmac.compare_digest(received.encode(), expected_token.encode()):
        raise WebhookChallengeError("verify_token_mismatch")
    return query.get("hub.challenge", "")
