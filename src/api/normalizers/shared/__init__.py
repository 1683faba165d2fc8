"""Utilitários compartilhados pelos parsers de canal.

Responsabilidades:
- Limpeza de None em estruturas aninhadas
- Conversão de timestamps de plataforma para segundos Unix
- BaseParser com envelope Activity Streams e validação por schema
"""

from .base import BaseParser, FileInfoFetcher
from .cleaning import clean_nulls
from .timestamps import now_seconds, seconds_from_millis, seconds_from_slack_ts

__all__ = [
    "BaseParser",
    "FileInfoFetcher",
    "clean_nulls",
    "now_seconds",
    "seconds_from_millis",
    "seconds_from_slack_ts",
]
