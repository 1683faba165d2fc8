"""Extração estrutural de payloads Slack (Events API / interactivity).

Não faz validação de negócio - apenas reduz os envelopes do Slack a um
evento de mensagem plano.
"""

from __future__ import annotations

import json
from typing import Any

INTERACTIVE_MESSAGE = "interactive_message"

# subtypes que não representam mensagem nova de usuário
IGNORED_SUBTYPES = frozenset(
    {
        "message_changed",
        "message_deleted",
        "message_replied",
        "channel_join",
        "channel_leave",
        "group_join",
        "group_leave",
    }
)


def extract_event(payload: dict[str, Any]) -> dict[str, Any] | None:
    """Extrai o evento interno de um envelope `event_callback`."""
    if payload.get("type") != "event_callback":
        return None
    event = payload.get("event")
    if not isinstance(event, dict):
        return None
    extracted = dict(event)
    if payload.get("event_id"):
        extracted["event_id"] = payload["event_id"]
    files = extracted.get("files")
    if not extracted.get("file") and isinstance(files, list) and files:
        extracted["file"] = files[0]
    return extracted


def is_message_event(event: dict[str, Any]) -> bool:
    """True para mensagens novas; subtipos listados em IGNORED_SUBTYPES ficam de fora.

    Mensagens de bot (`bot_id`) passam e viram actor `Application` no parser.
    """
    if event.get("type") != "message":
        return False
    return event.get("subtype") not in IGNORED_SUBTYPES


def parse_interactive_form(form_payload: str | None) -> dict[str, Any] | None:
    """Decodifica o campo `payload` (JSON) do POST de interactivity."""
    if not form_payload:
        return None
    try:
        decoded = json.loads(form_payload)
    except json.JSONDecodeError:
        return None
    return decoded if isinstance(decoded, dict) else None


def extract_interactive_payload(payload: dict[str, Any]) -> dict[str, Any] | None:
    """Achata callback de botão em evento `message` com subtype interactive.

    O texto passa a ser o valor da primeira action; `callback_id` e
    `response_url` seguem para o contexto da atividade.
    """
    if payload.get("type") != INTERACTIVE_MESSAGE:
        return None

    actions = payload.get("actions") or []
    first_action = actions[0] if actions and isinstance(actions[0], dict) else {}
    text = first_action.get("value")
    if text is None:
        selected = first_action.get("selected_options") or []
        if selected and isinstance(selected[0], dict):
            text = selected[0].get("value")

    user = payload.get("user") or {}
    channel = payload.get("channel") or {}
    return {
        "type": "message",
        "subtype": INTERACTIVE_MESSAGE,
        "text": text,
        "user": user.get("id") if isinstance(user, dict) else user,
        "channel": channel.get("id") if isinstance(channel, dict) else channel,
        "callback_id": payload.get("callback_id"),
        "response_url": payload.get("response_url"),
        "ts": payload.get("message_ts") or payload.get("action_ts"),
    }
