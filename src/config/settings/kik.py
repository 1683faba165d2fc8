"""Settings específicas de Kik.

Configurações do canal Kik via Kik Bot API (autenticação básica).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

KIK_API_BASE_URL: str = "https://api.kik.com/v1"


@dataclass(frozen=True)
class KikSettings:
    """Configurações do canal Kik.

    Attributes:
        username: Nome do bot registrado no Kik
        api_key: Chave da API (usada também para assinar webhooks)
        webhook_url: URL pública onde o Kik entrega mensagens
        api_base_url: URL base da API
        request_timeout_seconds: Timeout para requisições HTTP
        max_retries: Máximo de tentativas em caso de erro transitório
    """

    username: str = ""
    api_key: str = ""
    webhook_url: str = ""
    api_base_url: str = KIK_API_BASE_URL
    request_timeout_seconds: float = 30.0
    max_retries: int = 3

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Kik."""
        errors: list[str] = []
        if not self.username:
            errors.append("KIK_USERNAME não configurado")
        if not self.api_key:
            errors.append("KIK_API_KEY não configurado")
        if not self.webhook_url:
            errors.append("KIK_WEBHOOK_URL não configurado")
        return errors


def _load_from_env() -> KikSettings:
    return KikSettings(
        username=os.getenv("KIK_USERNAME", ""),
        api_key=os.getenv("KIK_API_KEY", ""),
        webhook_url=os.getenv("KIK_WEBHOOK_URL", ""),
        api_base_url=os.getenv("KIK_API_BASE_URL", KIK_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("KIK_REQUEST_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("KIK_MAX_RETRIES", "3")),
    )


@lru_cache(maxsize=1)
def get_kik_settings() -> KikSettings:
    """Retorna instância cacheada de KikSettings."""
    return _load_from_env()
