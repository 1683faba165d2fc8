"""Enums e constantes do envelope Activity Streams 2.0."""

from __future__ import annotations

from enum import StrEnum

AS_CONTEXT = "https://www.w3.org/ns/activitystreams"


class ActivityType(StrEnum):
    """Tipos de atividade emitidos/aceitos pelos adapters."""

    CREATE = "Create"


class ObjectType(StrEnum):
    """Tipos de objeto reconhecidos pelo schema (inbound emite só Note/Image/Video)."""

    NOTE = "Note"
    IMAGE = "Image"
    VIDEO = "Video"
    AUDIO = "Audio"
    DOCUMENT = "Document"
    PLACE = "Place"


class ActorType(StrEnum):
    """Tipos de actor/target/generator."""

    PERSON = "Person"
    APPLICATION = "Application"
    GROUP = "Group"
    SERVICE = "Service"


class AttachmentType(StrEnum):
    """Tipos de anexo aceitos em mensagens outbound."""

    BUTTON = "Button"
    LINK = "Link"
    IMAGE = "Image"
    VIDEO = "Video"


class CallbackContext(StrEnum):
    """Nomes de `object.context` para callbacks interativos."""

    INTERACTIVE_MESSAGE = "interactive_message_callback"
    POSTBACK = "postback_callback"
    QUICK_REPLY = "quick_reply_callback"


SUPPORTED_OUTBOUND_TYPES = frozenset({ObjectType.NOTE, ObjectType.IMAGE, ObjectType.VIDEO})
UNSUPPORTED_OUTBOUND_MESSAGE = "Only Note, Image, and Video are supported."
