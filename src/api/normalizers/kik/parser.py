"""Parser Kik: mensagem normalizada → Activity Streams."""

from __future__ import annotations

from typing import Any

from api.normalizers.kik.extractor import resolve_chat_type
from api.normalizers.shared import BaseParser, clean_nulls, seconds_from_millis
from app.constants.activity import ActorType, ObjectType

_MEDIA_FALLBACKS = {
    "picture": (ObjectType.IMAGE, "image/jpeg"),
    "video": (ObjectType.VIDEO, "video/mp4"),
}


class KikParser(BaseParser):
    """Parser do canal Kik."""

    def normalize(self, raw: dict[str, Any], user_info: dict[str, Any] | None) -> dict[str, Any]:
        return {
            "id": raw.get("id"),
            "chat_id": raw.get("chatId"),
            "chat_type": resolve_chat_type(raw),
            "type": raw.get("type"),
            "body": raw.get("body"),
            "pic_url": raw.get("picUrl"),
            "video_url": raw.get("videoUrl"),
            "url": raw.get("url"),
            "title": raw.get("title"),
            "timestamp": raw.get("timestamp"),
            "user": user_info or {"id": raw.get("from"), "username": raw.get("from")},
        }

    async def parse(self, normalized: dict[str, Any] | None) -> dict[str, Any] | None:
        self.logger.debug("parse_started", extra={"channel": self.generator_name})

        normalized = clean_nulls(normalized)
        if not normalized:
            return None

        object_ = await self._build_object(normalized)
        if object_ is None:
            return None

        activity = self.create_activity_stream(seconds_from_millis(normalized.get("timestamp")))
        user = normalized.get("user") or {}
        activity["actor"] = {
            "id": user.get("id") or user.get("username"),
            "name": _display_name(user),
            "type": ActorType.PERSON.value,
        }
        chat_id = normalized.get("chat_id")
        activity["target"] = {
            "id": chat_id,
            "name": chat_id,
            "type": (
                ActorType.PERSON.value
                if normalized.get("chat_type") == "direct"
                else ActorType.GROUP.value
            ),
        }
        activity["object"] = object_
        return activity

    async def _build_object(self, normalized: dict[str, Any]) -> dict[str, Any] | None:
        message_type = normalized.get("type")
        object_id = normalized.get("id") or self.create_identifier()

        if message_type == "text":
            return {"content": normalized.get("body"), "id": object_id, "type": ObjectType.NOTE.value}

        if message_type == "link":
            return {
                "content": normalized.get("url"),
                "id": object_id,
                "name": normalized.get("title"),
                "type": ObjectType.NOTE.value,
            }

        if message_type in _MEDIA_FALLBACKS:
            object_type, fallback = _MEDIA_FALLBACKS[message_type]
            url = normalized.get("pic_url") if message_type == "picture" else normalized.get("video_url")
            if not url:
                return None
            return {
                "id": object_id,
                "mediaType": await self.media_type_of(url, fallback),
                "type": object_type.value,
                "url": url,
            }

        self.logger.debug("kik_unsupported_type", extra={"message_type": message_type})
        return None


def _display_name(user: dict[str, Any]) -> str | None:
    if user.get("displayName"):
        return user["displayName"]
    full_name = " ".join(p for p in (user.get("firstName"), user.get("lastName")) if p)
    return full_name or user.get("username")
