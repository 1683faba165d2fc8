"""Adapters de canal — sessão, webhook e pipeline Activity Streams.

Cada adapter expõe connect / listen / send / disconnect e delega o
mapeamento de payloads ao Parser do seu canal.
"""

from app.adapters.base import BaseAdapter
from app.adapters.kik import KikAdapter
from app.adapters.messenger import MessengerAdapter
from app.adapters.slack import SlackAdapter
from app.adapters.sms import SmsAdapter

ADAPTERS: dict[str, type[BaseAdapter]] = {
    KikAdapter.channel: KikAdapter,
    MessengerAdapter.channel: MessengerAdapter,
    SlackAdapter.channel: SlackAdapter,
    SmsAdapter.channel: SmsAdapter,
}

__all__ = [
    "ADAPTERS",
    "BaseAdapter",
    "KikAdapter",
    "MessengerAdapter",
    "SlackAdapter",
    "SmsAdapter",
]
