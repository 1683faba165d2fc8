"""Normalizer Kik — mensagens do webhook Kik Bot API.

Tipos suportados: text (Note), link (Note), picture (Image), video (Video).
Recibos, typing e demais eventos de sistema são descartados.
"""

from .extractor import SUPPORTED_MESSAGE_TYPES, extract_payload_messages
from .parser import KikParser

__all__ = [
    "SUPPORTED_MESSAGE_TYPES",
    "KikParser",
    "extract_payload_messages",
]
