"""Normalizers por canal — payload nativo → Activity Streams.

Estrutura:
- shared/: BaseParser, limpeza de nulos e timestamps
- slack/: Events API e interactive messages
- kik/: Kik Bot API
- messenger/: Facebook Messenger (Graph API)
- sms/: Twilio SMS/MMS

Cada canal tem seu próprio extractor (estrutura) e parser (semântica).
"""

from .kik import KikParser
from .messenger import MessengerParser
from .shared import BaseParser
from .slack import SlackParser
from .sms import SmsParser

__all__ = [
    "BaseParser",
    "KikParser",
    "MessengerParser",
    "SlackParser",
    "SmsParser",
]
