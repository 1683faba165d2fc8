"""Builder de mensagens Slack (chat.postMessage e response_url)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.shared import button_attachments, ensure_supported, recipient_id
from app.constants.activity import AttachmentType, CallbackContext, ObjectType

if TYPE_CHECKING:
    from app.protocols.models import SendActivity


def parse_callback_context(activity: SendActivity) -> tuple[str, str] | None:
    """Extrai (callback_id, response_url) de um contexto interactive_message."""
    context = activity.object.context
    if context is None or context.name != CallbackContext.INTERACTIVE_MESSAGE:
        return None
    callback_id, _, response_url = context.content.partition("#")
    if not response_url:
        return None
    return callback_id, response_url


def _build_actions(activity: SendActivity) -> list[dict[str, Any]]:
    actions: list[dict[str, Any]] = []
    for button in button_attachments(activity):
        label = button.content or button.name or button.url
        action: dict[str, Any] = {"name": button.name or label, "text": label, "type": "button"}
        if button.url and button.url.startswith(("http://", "https://")):
            action["url"] = button.url
        else:
            action["value"] = button.url or button.name
        actions.append(action)
    return actions


def _build_media_attachment(activity: SendActivity, object_type: ObjectType) -> dict[str, Any]:
    obj = activity.object
    attachment: dict[str, Any] = {"title": obj.name or obj.url, "text": obj.content or ""}
    if object_type == ObjectType.IMAGE:
        attachment["image_url"] = obj.url
    else:
        attachment["title_link"] = obj.url
        if obj.preview:
            attachment["thumb_url"] = obj.preview
    return attachment


def build_slack_message(activity: SendActivity) -> dict[str, Any]:
    """Monta payload de chat.postMessage (sem token).

    Raises:
        UnsupportedMessageError: Se o objeto não for Note, Image ou Video.
    """
    object_type = ensure_supported(activity)
    obj = activity.object

    payload: dict[str, Any] = {
        "channel": recipient_id(activity),
        "text": obj.content or "",
        "unfurl_links": True,
    }

    attachments: list[dict[str, Any]] = []
    if object_type != ObjectType.NOTE:
        attachments.append(_build_media_attachment(activity, object_type))

    for link in (a for a in obj.attachment if a.type == AttachmentType.LINK and a.url):
        attachments.append({"title": link.name or link.url, "title_link": link.url})

    actions = _build_actions(activity)
    if actions:
        callback = parse_callback_context(activity)
        attachments.append(
            {
                "actions": actions,
                "callback_id": callback[0] if callback else (obj.id or "broadcast"),
                "fallback": obj.content or "actions",
            }
        )

    if attachments:
        payload["attachments"] = attachments
    return payload
