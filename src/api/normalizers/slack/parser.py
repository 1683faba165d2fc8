"""Parser Slack: evento de mensagem normalizado → Activity Streams."""

from __future__ import annotations

from typing import Any

from api.normalizers.shared import BaseParser, clean_nulls, seconds_from_slack_ts
from api.normalizers.slack.extractor import INTERACTIVE_MESSAGE
from app.constants.activity import ActorType, CallbackContext, ObjectType
from app.infra.media import is_url


class SlackParser(BaseParser):
    """Parser do canal Slack."""

    def normalize(
        self,
        raw: dict[str, Any],
        user_info: dict[str, Any] | None,
        channel_info: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Anexa perfis de usuário e canal ao evento.

        `user` e `channel` do Slack chegam como IDs; após normalizar são
        sempre dicts (com pelo menos `id`).
        """
        normalized = dict(raw)
        user_id = raw.get("user")
        channel_id = raw.get("channel")
        normalized["user"] = user_info or ({"id": user_id} if user_id else None)
        normalized["channel"] = channel_info or ({"id": channel_id} if channel_id else None)
        return normalized

    async def parse(self, normalized: dict[str, Any] | None) -> dict[str, Any] | None:
        self.logger.debug("parse_started", extra={"channel": self.generator_name})

        normalized = clean_nulls(normalized)
        if not normalized:
            return None
        text = normalized.get("text")
        # Mensagens sem texto (em geral históricas) são ignoradas
        if not text:
            return None

        ts = normalized.get("thread_ts") or normalized.get("ts")
        activity = self.create_activity_stream(seconds_from_slack_ts(ts))
        activity["actor"] = self._build_actor(normalized.get("user") or {})
        activity["target"] = self._build_target(normalized.get("channel") or {})

        object_: dict[str, Any] | None = None
        url = _unwrap_link(text)
        if url:
            object_ = await self._parse_link(url, normalized)
        elif normalized.get("file"):
            object_ = self._parse_attached_file(normalized)

        if object_ is None:
            object_ = {
                "content": text,
                "id": ts or self.create_identifier(),
                "type": ObjectType.NOTE.value,
            }

        if normalized.get("subtype") == INTERACTIVE_MESSAGE:
            object_["context"] = {
                "content": f"{normalized.get('callback_id')}#{normalized.get('response_url')}",
                "name": CallbackContext.INTERACTIVE_MESSAGE.value,
                "type": "Object",
            }

        activity["object"] = object_
        return activity

    def parse_file(self, attachment: dict[str, Any]) -> dict[str, Any] | None:
        """Converte `file` do Slack em mídia AS (só imagem e vídeo)."""
        mimetype = attachment.get("mimetype") or ""
        if not mimetype.startswith(("image", "video")):
            return None

        media: dict[str, Any] = {
            "mediaType": mimetype,
            "name": attachment.get("name"),
            "type": ObjectType.VIDEO.value if mimetype.startswith("video") else ObjectType.IMAGE.value,
            "url": attachment.get("permalink_public"),
        }
        if attachment.get("thumb_1024"):
            media["preview"] = attachment["thumb_1024"]

        comment = attachment.get("initial_comment")
        if isinstance(comment, list):
            comment = comment[0] if comment else None
        media["content"] = (comment.get("comment") or "") if isinstance(comment, dict) else ""
        return media

    def _parse_attached_file(self, normalized: dict[str, Any]) -> dict[str, Any] | None:
        media = self.parse_file(normalized["file"])
        if media is None:
            return None
        media["id"] = normalized.get("thread_ts") or normalized.get("ts") or self.create_identifier()
        return media

    async def _parse_link(self, url: str, normalized: dict[str, Any]) -> dict[str, Any] | None:
        info = await self._fetch_file_info(url)
        if info.is_image:
            object_type = ObjectType.IMAGE
        elif info.is_video:
            object_type = ObjectType.VIDEO
        else:
            return None
        return {
            "id": normalized.get("event_id") or self.create_identifier(),
            "mediaType": info.mimetype,
            "type": object_type.value,
            "url": url,
        }

    def _build_actor(self, user: dict[str, Any]) -> dict[str, Any]:
        return {
            "id": user.get("id"),
            "name": user.get("name"),
            "type": ActorType.APPLICATION.value if user.get("is_bot") else ActorType.PERSON.value,
        }

    def _build_target(self, channel: dict[str, Any]) -> dict[str, Any]:
        return {
            "id": channel.get("id"),
            "name": channel.get("id") or channel.get("user"),
            "type": ActorType.PERSON.value if channel.get("is_im") else ActorType.GROUP.value,
        }


def _unwrap_link(text: str) -> str | None:
    """Extrai a URL de `<http://...>` ou `<http://...|rótulo>`."""
    if len(text) < 3 or not (text.startswith("<") and text.endswith(">")):
        return None
    candidate = text[1:-1].split("|", 1)[0]
    return candidate if is_url(candidate) else None
