"""Settings específicas de Facebook Messenger (Graph API)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

GRAPH_API_VERSION: str = "v19.0"
GRAPH_API_BASE_URL: str = "https://graph.facebook.com"


@dataclass(frozen=True)
class MessengerSettings:
    """Configurações do canal Messenger.

    Attributes:
        page_access_token: Token de acesso da página
        verify_token: Token para verificação do webhook (hub.verify_token)
        app_secret: Secret do app para validar X-Hub-Signature-256 (opcional)
        api_version: Versão da Graph API
        api_base_url: URL base da Graph API
        request_timeout_seconds: Timeout para requisições HTTP
        max_retries: Máximo de tentativas em caso de erro transitório
    """

    page_access_token: str = ""
    verify_token: str = ""
    app_secret: str = ""
    api_version: str = GRAPH_API_VERSION
    api_base_url: str = GRAPH_API_BASE_URL
    request_timeout_seconds: float = 30.0
    max_retries: int = 3

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url}/{self.api_version}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Messenger."""
        errors: list[str] = []
        if not self.page_access_token:
            errors.append("MESSENGER_PAGE_ACCESS_TOKEN não configurado")
        if not self.verify_token:
            errors.append("MESSENGER_VERIFY_TOKEN não configurado")
        return errors


def _load_from_env() -> MessengerSettings:
    return MessengerSettings(
        page_access_token=os.getenv("MESSENGER_PAGE_ACCESS_TOKEN", ""),
        verify_token=os.getenv("MESSENGER_VERIFY_TOKEN", ""),
        app_secret=os.getenv("MESSENGER_APP_SECRET", ""),
        api_version=os.getenv("MESSENGER_API_VERSION", GRAPH_API_VERSION),
        api_base_url=os.getenv("MESSENGER_API_BASE_URL", GRAPH_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("MESSENGER_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        max_retries=int(os.getenv("MESSENGER_MAX_RETRIES", "3")),
    )


@lru_cache(maxsize=1)
def get_messenger_settings() -> MessengerSettings:
    """Retorna instância cacheada de MessengerSettings."""
    return _load_from_env()
