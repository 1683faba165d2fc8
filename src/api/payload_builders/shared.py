"""Helpers comuns de montagem outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.constants.activity import (
    SUPPORTED_OUTBOUND_TYPES,
    UNSUPPORTED_OUTBOUND_MESSAGE,
    AttachmentType,
    ObjectType,
)
from utils.errors import UnsupportedMessageError

if TYPE_CHECKING:
    from app.protocols.models import Attachment, SendActivity


def recipient_id(activity: SendActivity) -> str:
    """ID do destinatário (`to.id`, com fallback para `to.name`)."""
    return activity.to.id or activity.to.name or ""


def button_attachments(activity: SendActivity) -> list[Attachment]:
    return [a for a in activity.object.attachment if a.type == AttachmentType.BUTTON]


def button_labels(activity: SendActivity) -> list[str]:
    """Rótulos de botões: url ou name, descartando vazios."""
    labels = [button.url or button.name for button in button_attachments(activity)]
    return [label for label in labels if label]


def ensure_supported(activity: SendActivity) -> ObjectType:
    """Retorna o tipo do objeto ou levanta erro se não suportado."""
    object_type = activity.object.type
    if object_type not in SUPPORTED_OUTBOUND_TYPES:
        raise UnsupportedMessageError(UNSUPPORTED_OUTBOUND_MESSAGE)
    return ObjectType(object_type)
