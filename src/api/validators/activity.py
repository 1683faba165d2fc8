"""Validação de envelopes contra os schemas `activity` e `send`."""

from __future__ import annotations

from typing import Any

import pydantic

from app.protocols.models import Activity, SendActivity
from app.protocols.validator import ValidationError


def _flatten_errors(exc: pydantic.ValidationError) -> list[dict[str, Any]]:
    return [
        {"loc": ".".join(str(part) for part in err["loc"]), "msg": err["msg"]}
        for err in exc.errors()
    ]


def validate_activity(data: dict[str, Any]) -> Activity:
    """Valida atividade inbound.

    Raises:
        ValidationError: Se o envelope não respeita o schema `activity`.
    """
    try:
        return Activity.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ValidationError("invalid_activity", _flatten_errors(exc)) from exc


def validate_send(data: dict[str, Any]) -> SendActivity:
    """Valida requisição outbound.

    Raises:
        ValidationError: Se o envelope não respeita o schema `send`.
    """
    try:
        return SendActivity.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ValidationError("invalid_send_activity", _flatten_errors(exc)) from exc
