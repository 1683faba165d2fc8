"""Protocolos e contratos canônicos dos adapters."""

from .models import (
    Activity,
    ActivityObject,
    Actor,
    Attachment,
    Generator,
    ObjectContext,
    Recipient,
    SendActivity,
    SendObject,
    Target,
)
from .outbound_sender import PlatformClientProtocol
from .validator import ValidationError

__all__ = [
    "Activity",
    "ActivityObject",
    "Actor",
    "Attachment",
    "Generator",
    "ObjectContext",
    "PlatformClientProtocol",
    "Recipient",
    "SendActivity",
    "SendObject",
    "Target",
    "ValidationError",
]
