"""Builder de mensagens Kik (POST /v1/message)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.shared import button_labels, ensure_supported, recipient_id
from app.constants.activity import ObjectType

if TYPE_CHECKING:
    from app.protocols.models import SendActivity


def build_keyboard(responses: list[str], to: str) -> dict[str, Any]:
    """Teclado de respostas sugeridas (visível) para o destinatário."""
    return {
        "to": to,
        "type": "suggested",
        "hidden": False,
        "responses": [{"type": "text", "body": body} for body in responses],
    }


def _build_media(activity: SendActivity, object_type: ObjectType) -> dict[str, Any]:
    obj = activity.object
    if object_type == ObjectType.IMAGE:
        message: dict[str, Any] = {"type": "picture", "picUrl": obj.url}
    else:
        message = {"type": "video", "videoUrl": obj.url}

    attribution: dict[str, str] = {}
    if obj.name:
        attribution["name"] = obj.name
    icon = obj.preview or obj.url
    if icon:
        attribution["iconUrl"] = icon
    if attribution:
        message["attribution"] = attribution
    return message


def build_kik_message(activity: SendActivity) -> dict[str, Any]:
    """Monta o corpo completo de envio Kik.

    Teclados podem ser aplicados a Note, Image e Video.

    Raises:
        UnsupportedMessageError: Se o objeto não for Note, Image ou Video.
    """
    object_type = ensure_supported(activity)
    to = recipient_id(activity)

    if object_type == ObjectType.NOTE:
        message: dict[str, Any] = {"type": "text", "body": activity.object.content}
    else:
        message = _build_media(activity, object_type)

    message["to"] = to
    buttons = button_labels(activity)
    if buttons:
        message["keyboards"] = [build_keyboard(buttons, to)]
    return {"messages": [message]}
