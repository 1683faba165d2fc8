"""Normalizer Slack — Events API e interactive messages.

Tipos suportados: text (Note), links para mídia (Image/Video),
file_share de imagem/vídeo e callbacks de interactive_message.
"""

from .extractor import extract_event, extract_interactive_payload, is_message_event
from .parser import SlackParser

__all__ = [
    "SlackParser",
    "extract_event",
    "extract_interactive_payload",
    "is_message_event",
]
