"""Extrator de payloads do webhook Messenger (Graph API).

Estrutura:
- object: "page"
- entry[]: {id, time, messaging[]}
- messaging[]: {sender, recipient, timestamp, message | postback}
"""

from __future__ import annotations

from typing import Any


def extract_messaging_events(payload: dict[str, Any]) -> list[dict[str, Any]]:
    """Achata entry[].messaging[] mantendo apenas mensagens e postbacks de usuários."""
    if payload.get("object") != "page":
        return []

    events: list[dict[str, Any]] = []
    for entry in payload.get("entry") or []:
        if not isinstance(entry, dict):
            continue
        for event in entry.get("messaging") or []:
            if not isinstance(event, dict):
                continue
            message = event.get("message")
            if isinstance(message, dict) and message.get("is_echo"):
                continue
            if isinstance(message, dict) or isinstance(event.get("postback"), dict):
                events.append(event)
    return events


def first_media_attachment(attachments: list[dict[str, Any]]) -> tuple[str, str] | None:
    """Retorna (tipo, url) do primeiro anexo image/video com URL."""
    for attachment in attachments:
        if not isinstance(attachment, dict):
            continue
        attachment_type = attachment.get("type")
        payload = attachment.get("payload") or {}
        url = payload.get("url") if isinstance(payload, dict) else None
        if attachment_type in ("image", "video") and url:
            return attachment_type, url
    return None
