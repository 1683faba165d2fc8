import pytest

from api.connectors.messenger import WebhookChallengeError, verify_webhook_challenge


def _query(**overrides: str) -> dict[str, str]:
    query = {
        "hub.mode": "subscribe",
        "hub.verify_token": "token",
        "hub.challenge": "abc123",
    }
    query.update(overrides)
    return query


def test_verify_webhook_challenge_ok() -> None:
    assert verify_webhook_challenge(_query(), "token") == "abc123"


def test_verify_webhook_challenge_without_challenge_returns_empty() -> None:
    query = _query()
    del query["hub.challenge"]
    assert verify_webhook_challenge(query, "token") == ""


def test_verify_webhook_challenge_missing_token() -> None:
    with pytest.raises(WebhookChallengeError, match="missing_verify_token"):
        verify_webhook_challenge(_query(), None)


def test_verify_webhook_challenge_wrong_mode() -> None:
    with pytest.raises(WebhookChallengeError, match="unexpected_mode"):
        verify_webhook_challenge(_query(**{"hub.mode": "unsubscribe"}), "token")


def test_verify_webhook_challenge_wrong_token() -> None:
    with pytest.raises(WebhookChallengeError, match="verify_token_mismatch"):
        verify_webhook_challenge(_query(**{"hub.verify_token": "other"}), "token")
