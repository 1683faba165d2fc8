"""Normalizer Messenger — eventos `messaging` do webhook da página.

Tipos suportados: text (Note), anexos image/video, postback e
quick_reply (com contexto de callback). Echoes e recibos são descartados.
"""

from .extractor import extract_messaging_events
from .parser import MessengerParser

__all__ = [
    "MessengerParser",
    "extract_messaging_events",
]
