"""Builder de mensagens Messenger (POST /me/messages)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.shared import button_attachments, ensure_supported, recipient_id
from app.constants.activity import ObjectType

if TYPE_CHECKING:
    from app.protocols.models import Attachment, SendActivity


def _template_button(button: Attachment) -> dict[str, Any]:
    title = button.name or button.content or button.url or ""
    if button.url and button.url.startswith(("http://", "https://")):
        return {"type": "web_url", "url": button.url, "title": title}
    return {"type": "postback", "title": title, "payload": button.content or button.name or title}


def _quick_reply(button: Attachment) -> dict[str, Any]:
    title = button.name or button.content or button.url or ""
    return {"content_type": "text", "title": title, "payload": button.content or title}


def build_messenger_message(activity: SendActivity) -> dict[str, Any]:
    """Monta payload da Send API.

    Note com botões vira button template; mídia com botões usa quick replies.

    Raises:
        UnsupportedMessageError: Se o objeto não for Note, Image ou Video.
    """
    object_type = ensure_supported(activity)
    obj = activity.object
    buttons = button_attachments(activity)

    if object_type == ObjectType.NOTE:
        if buttons:
            message: dict[str, Any] = {
                "attachment": {
                    "type": "template",
                    "payload": {
                        "template_type": "button",
                        "text": obj.content,
                        "buttons": [_template_button(b) for b in buttons],
                    },
                }
            }
        else:
            message = {"text": obj.content}
    else:
        message = {
            "attachment": {
                "type": "image" if object_type == ObjectType.IMAGE else "video",
                "payload": {"url": obj.url, "is_reusable": True},
            }
        }
        if buttons:
            message["quick_replies"] = [_quick_reply(b) for b in buttons]

    return {
        "messaging_type": "RESPONSE",
        "recipient": {"id": recipient_id(activity)},
        "message": message,
    }
