"""Testes de verificação de assinaturas de webhook."""

from __future__ import annotations

import hashlib
import hmac

from api.connectors.signature import (
    verify_hub_signature,
    verify_kik_signature,
    verify_slack_signature,
)

BODY = b'{"messages": []}'


def test_kik_signature_valid_case_insensitive_header() -> None:
    signature = hmac.new(b"key", BODY, hashlib.sha1).hexdigest()

    result = verify_kik_signature(BODY, {"x-kik-signature": signature}, "key")

    assert result.valid
    assert not result.skipped


def test_kik_signature_mismatch_and_missing() -> None:
    assert verify_kik_signature(BODY, {"X-Kik-Signature": "00"}, "key").error == "signature_mismatch"
    assert verify_kik_signature(BODY, {}, "key").error == "missing_signature"


def test_kik_signature_skipped_without_key() -> None:
    result = verify_kik_signature(BODY, {}, None)

    assert result.valid
    assert result.skipped


def _slack_headers(secret: str, timestamp: str, body: bytes) -> dict[str, str]:
    base = b"v0:" + timestamp.encode() + b":" + body
    digest = hmac.new(secret.encode(), base, hashlib.sha256).hexdigest()
    return {"X-Slack-Signature": f"v0={digest}", "X-Slack-Request-Timestamp": timestamp}


def test_slack_signature_valid() -> None:
    headers = _slack_headers("secret", "1531420618", BODY)

    assert verify_slack_signature(BODY, headers, "secret", now=1531420618).valid


def test_slack_signature_stale_timestamp() -> None:
    headers = _slack_headers("secret", "1531420618", BODY)

    result = verify_slack_signature(BODY, headers, "secret", now=1531420618 + 301)

    assert not result.valid
    assert result.error == "stale_timestamp"


def test_slack_signature_invalid_timestamp_and_mismatch() -> None:
    bad_ts = {"X-Slack-Signature": "v0=abc", "X-Slack-Request-Timestamp": "abc"}
    wrong = _slack_headers("other", "1531420618", BODY)

    assert verify_slack_signature(BODY, bad_ts, "secret").error == "invalid_timestamp"
    assert verify_slack_signature(BODY, wrong, "secret", now=1531420618).error == "signature_mismatch"


def test_slack_signature_skipped_without_secret() -> None:
    assert verify_slack_signature(BODY, {}, "").skipped


def test_hub_signature() -> None:
    digest = hmac.new(b"app", BODY, hashlib.sha256).hexdigest()

    assert verify_hub_signature(BODY, {"X-Hub-Signature-256": f"sha256={digest}"}, "app").valid
    assert not verify_hub_signature(BODY, {"X-Hub-Signature-256": "sha1=abc"}, "app").valid
    assert verify_hub_signature(BODY, {}, None).skipped
