"""Connectors por canal — único ponto de IO com as APIs de plataforma.

Estrutura:
- base.py: PlatformHttpClient (decodificação e erros)
- signature.py: verificação HMAC de webhooks
- kik/, slack/, messenger/, sms/: clientes HTTP por canal
"""

from .base import PlatformHttpClient
from .signature import (
    SignatureResult,
    verify_hub_signature,
    verify_kik_signature,
    verify_slack_signature,
)

__all__ = [
    "PlatformHttpClient",
    "SignatureResult",
    "verify_hub_signature",
    "verify_kik_signature",
    "verify_slack_signature",
]
