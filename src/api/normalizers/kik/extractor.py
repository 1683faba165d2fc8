"""Extrator de payloads do webhook Kik.

Estrutura do webhook:
- {"messages": [{"id", "chatId", "type", "from", "participants",
  "body" | "picUrl" | "videoUrl" | "url", "timestamp", "chatType"}]}
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

SUPPORTED_MESSAGE_TYPES = frozenset({"text", "link", "picture", "video"})


def extract_payload_messages(payload: dict[str, Any]) -> list[dict[str, Any]]:
    """Retorna mensagens suportadas do webhook, na ordem recebida."""
    messages: list[dict[str, Any]] = []
    for message in payload.get("messages") or []:
        if not isinstance(message, dict) or not message.get("id"):
            continue
        message_type = message.get("type")
        if message_type not in SUPPORTED_MESSAGE_TYPES:
            logger.debug("kik_message_type_skipped", extra={"message_type": message_type})
            continue
        messages.append(message)
    return messages


def resolve_chat_type(message: dict[str, Any]) -> str:
    """Tipo de chat; payloads antigos sem `chatType` inferem pelo nº de participantes."""
    chat_type = message.get("chatType")
    if chat_type:
        return chat_type
    participants = message.get("participants") or []
    return "direct" if len(participants) <= 1 else "group"
