"""Payload builders por canal — SendActivity → payload nativo da plataforma.

Estrutura:
- shared.py: extração de botões/links comum aos canais
- kik/: Kik Bot API (text, picture, video + teclado sugerido)
- slack/: chat.postMessage / response_url (attachments e actions)
- messenger/: Send API (texto, anexos, button template, quick replies)
- sms/: Twilio Messages (Body + MediaUrl)

Tipos fora de Note/Image/Video levantam UnsupportedMessageError.
"""

from .kik import build_kik_message
from .messenger import build_messenger_message
from .slack import build_slack_message
from .sms import build_sms_message

__all__ = [
    "build_kik_message",
    "build_messenger_message",
    "build_slack_message",
    "build_sms_message",
]
