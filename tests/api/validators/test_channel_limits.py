"""Testes dos limites outbound por canal."""

from __future__ import annotations

from typing import Any

import pytest

from api.validators import CHANNEL_LIMITS, check_channel_limits, validate_send
from app.protocols.validator import ValidationError


def _activity(content: str = "hi", buttons: int = 0, label: str = "ok") -> Any:
    return validate_send(
        {
            "to": {"id": "U1", "type": "Person"},
            "object": {
                "type": "Note",
                "content": content,
                "attachment": [{"type": "Button", "name": label}] * buttons,
            },
        }
    )


def test_within_limits_passes() -> None:
    check_channel_limits("messenger", _activity(buttons=3))


def test_text_too_long() -> None:
    limit = CHANNEL_LIMITS["messenger"].max_text_length

    with pytest.raises(ValidationError, match="maximum length"):
        check_channel_limits("messenger", _activity(content="a" * (limit + 1)))


def test_too_many_buttons() -> None:
    with pytest.raises(ValidationError, match="buttons exceeded"):
        check_channel_limits("slack", _activity(buttons=6))


def test_button_label_too_long() -> None:
    with pytest.raises(ValidationError, match="button text"):
        check_channel_limits("messenger", _activity(buttons=1, label="x" * 21))


def test_sms_ignores_buttons() -> None:
    check_channel_limits("sms", _activity(buttons=10))


def test_unknown_channel_has_no_limits() -> None:
    check_channel_limits("irc", _activity(content="a" * 100000))
