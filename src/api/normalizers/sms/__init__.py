"""Normalizer SMS (Twilio) — webhook de SMS/MMS recebido.

Tipos suportados: SMS de texto (Note) e MMS com imagem/vídeo.
"""

from .extractor import extract_media
from .parser import SmsParser

__all__ = [
    "SmsParser",
    "extract_media",
]
