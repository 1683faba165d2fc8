"""Builder de SMS/MMS (Twilio Messages.json, form-urlencoded)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.payload_builders.shared import button_attachments, ensure_supported, recipient_id
from app.constants.activity import ObjectType

if TYPE_CHECKING:
    from app.protocols.models import SendActivity

logger = logging.getLogger(__name__)


def build_sms_message(activity: SendActivity, from_number: str) -> dict[str, str]:
    """Monta form de envio. SMS não tem botões: são descartados.

    Raises:
        UnsupportedMessageError: Se o objeto não for Note, Image ou Video.
    """
    object_type = ensure_supported(activity)
    obj = activity.object

    form = {"To": recipient_id(activity), "From": from_number}
    if object_type == ObjectType.NOTE:
        form["Body"] = obj.content or ""
    else:
        form["MediaUrl"] = obj.url or ""
        body = obj.content or obj.name
        if body:
            form["Body"] = body

    if button_attachments(activity):
        logger.info("sms_buttons_dropped", extra={"buttons": len(button_attachments(activity))})
    return form
