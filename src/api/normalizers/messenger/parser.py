"""Parser Messenger: evento normalizado → Activity Streams."""

from __future__ import annotations

from typing import Any

from api.normalizers.messenger.extractor import first_media_attachment
from api.normalizers.shared import BaseParser, clean_nulls, seconds_from_millis
from app.constants.activity import ActorType, CallbackContext, ObjectType


class MessengerParser(BaseParser):
    """Parser do canal Messenger."""

    def normalize(self, raw: dict[str, Any], user_info: dict[str, Any] | None) -> dict[str, Any]:
        message = raw.get("message") or {}
        postback = raw.get("postback") or {}
        sender_id = (raw.get("sender") or {}).get("id")
        return {
            "sender": sender_id,
            "recipient": (raw.get("recipient") or {}).get("id"),
            "timestamp": raw.get("timestamp"),
            "mid": message.get("mid") or postback.get("mid"),
            "text": message.get("text"),
            "attachments": message.get("attachments") or [],
            "quick_reply": (message.get("quick_reply") or {}).get("payload"),
            "postback": postback or None,
            "user": user_info or {"id": sender_id},
        }

    async def parse(self, normalized: dict[str, Any] | None) -> dict[str, Any] | None:
        self.logger.debug("parse_started", extra={"channel": self.generator_name})

        normalized = clean_nulls(normalized)
        if not normalized:
            return None

        object_ = self._build_object(normalized)
        if object_ is None:
            return None

        activity = self.create_activity_stream(seconds_from_millis(normalized.get("timestamp")))
        user = normalized.get("user") or {}
        full_name = " ".join(p for p in (user.get("first_name"), user.get("last_name")) if p)
        activity["actor"] = {
            "id": user.get("id") or normalized.get("sender"),
            "name": full_name or user.get("name"),
            "type": ActorType.PERSON.value,
        }
        page_id = normalized.get("recipient")
        activity["target"] = {"id": page_id, "name": page_id, "type": ActorType.PERSON.value}
        activity["object"] = object_
        return activity

    def _build_object(self, normalized: dict[str, Any]) -> dict[str, Any] | None:
        object_id = normalized.get("mid") or self.create_identifier()
        postback = normalized.get("postback")

        if postback:
            return {
                "content": postback.get("title") or postback.get("payload"),
                "context": _callback_context(CallbackContext.POSTBACK, postback.get("payload")),
                "id": object_id,
                "type": ObjectType.NOTE.value,
            }

        media = first_media_attachment(normalized.get("attachments") or [])
        if media:
            attachment_type, url = media
            return {
                "content": normalized.get("text"),
                "id": object_id,
                "type": ObjectType.IMAGE.value if attachment_type == "image" else ObjectType.VIDEO.value,
                "url": url,
            }

        text = normalized.get("text")
        if not text:
            return None
        object_: dict[str, Any] = {"content": text, "id": object_id, "type": ObjectType.NOTE.value}
        if normalized.get("quick_reply"):
            object_["context"] = _callback_context(
                CallbackContext.QUICK_REPLY, normalized["quick_reply"]
            )
        return object_


def _callback_context(name: CallbackContext, payload: str | None) -> dict[str, Any] | None:
    if not payload:
        return None
    return {"content": payload, "name": name.value, "type": "Object"}
