"""Verificação de assinaturas HMAC dos webhooks de plataforma."""

from __future__ import annotations

import hashlib
import hmac
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

SLACK_MAX_CLOCK_SKEW_SECONDS = 60 * 5


@dataclass(frozen=True, slots=True)
class SignatureResult:
    """Resultado da verificação; `skipped` quando não há secret configurado."""

    valid: bool
    skipped: bool = False
    error: str | None = None


def _header(headers: Mapping[str, str], name: str) -> str | None:
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None


def verify_kik_signature(
    raw_body: bytes, headers: Mapping[str, str], api_key: str | None
) -> SignatureResult:
    """Valida X-Kik-Signature (HMAC-SHA1 hex maiúsculo do corpo)."""
    if not api_key:
        return SignatureResult(valid=True, skipped=True)
    received = _header(headers, "X-Kik-Signature")
    if not received:
        return SignatureResult(valid=False, error="missing_signature")
    expected = hmac.new(api_key.encode("utf-8"), raw_body, hashlib.sha1).hexdigest().upper()
    if not hmac.compare_digest(expected, received.upper()):
        return SignatureResult(valid=False, error="signature_mismatch")
    return SignatureResult(valid=True)


def verify_slack_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    signing_secret: str | None,
    now: float | None = None,
) -> SignatureResult:
    """Valida X-Slack-Signature (v0, HMAC-SHA256) e janela de timestamp."""
    if not signing_secret:
        return SignatureResult(valid=True, skipped=True)
    received = _header(headers, "X-Slack-Signature")
    timestamp = _header(headers, "X-Slack-Request-Timestamp")
    if not received or not timestamp:
        return SignatureResult(valid=False, error="missing_signature")
    try:
        skew = abs((now if now is not None else time.time()) - int(timestamp))
    except ValueError:
        return SignatureResult(valid=False, error="invalid_timestamp")
    if skew > SLACK_MAX_CLOCK_SKEW_SECONDS:
        return SignatureResult(valid=False, error="stale_timestamp")

    base = b"v0:" + timestamp.encode("utf-8") + b":" + raw_body
    expected = "v0=" + hmac.new(signing_secret.encode("utf-8"), base, hashlib.sha256).hexdigest()
    if not hmac.compare_digest(expected, received):
        return SignatureResult(valid=False, error="signature_mismatch")
    return SignatureResult(valid=True)


def verify_hub_signature(
    raw_body: bytes, headers: Mapping[str, str], app_secret: str | None
) -> SignatureResult:
    """Valida X-Hub-Signature-256 (Graph API, HMAC-SHA256)."""
    if not app_secret:
        return SignatureResult(valid=True, skipped=True)
    received = _header(headers, "X-Hub-Signature-256")
    if not received or not received.startswith("sha256="):
        return SignatureResult(valid=False, error="missing_signature")
    expected = "sha256=" + hmac.new(app_secret.encode("utf-8"), raw_body, hashlib.sha256).hexdigest()
    if not hmac.compare_digest(expected, received):
        return SignatureResult(valid=False, error="signature_mismatch")
    return SignatureResult(valid=True)
