"""Parser SMS: mensagem Twilio normalizada → Activity Streams."""

from __future__ import annotations

from typing import Any

from api.normalizers.shared import BaseParser, clean_nulls
from api.normalizers.sms.extractor import extract_media
from app.constants.activity import ActorType, ObjectType


class SmsParser(BaseParser):
    """Parser do canal SMS. Twilio não envia timestamp: published = relógio."""

    def normalize(self, raw: dict[str, Any], user_info: dict[str, Any] | None) -> dict[str, Any]:
        from_number = raw.get("From")
        return {
            "message_sid": raw.get("MessageSid") or raw.get("SmsSid"),
            "from": from_number,
            "to": raw.get("To"),
            "body": raw.get("Body"),
            "media": [{"url": url, "content_type": ctype} for url, ctype in extract_media(raw)],
            "user": user_info or {"id": from_number, "name": from_number},
        }

    async def parse(self, normalized: dict[str, Any] | None) -> dict[str, Any] | None:
        self.logger.debug("parse_started", extra={"channel": self.generator_name})

        normalized = clean_nulls(normalized)
        if not normalized:
            return None

        object_ = self._build_object(normalized)
        if object_ is None:
            return None

        activity = self.create_activity_stream()
        user = normalized.get("user") or {}
        activity["actor"] = {
            "id": user.get("id") or normalized.get("from"),
            "name": user.get("name") or normalized.get("from"),
            "type": ActorType.PERSON.value,
        }
        to_number = normalized.get("to")
        activity["target"] = {"id": to_number, "name": to_number, "type": ActorType.PERSON.value}
        activity["object"] = object_
        return activity

    def _build_object(self, normalized: dict[str, Any]) -> dict[str, Any] | None:
        object_id = normalized.get("message_sid") or self.create_identifier()
        body = normalized.get("body")

        for media in normalized.get("media") or []:
            content_type = media.get("content_type") or ""
            if content_type.startswith(("image/", "video/")):
                return {
                    "content": body,
                    "id": object_id,
                    "mediaType": content_type,
                    "type": (
                        ObjectType.IMAGE.value
                        if content_type.startswith("image/")
                        else ObjectType.VIDEO.value
                    ),
                    "url": media.get("url"),
                }

        if not body:
            return None
        return {"content": body, "id": object_id, "type": ObjectType.NOTE.value}
