"""Settings específicas de Slack (Web API + Events API)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

SLACK_API_BASE_URL: str = "https://slack.com/api"


@dataclass(frozen=True)
class SlackSettings:
    """Configurações do canal Slack.

    Attributes:
        bot_token: Token do bot (xoxb-...)
        signing_secret: Secret para validar assinaturas de eventos (opcional)
        api_base_url: URL base da Web API
        request_timeout_seconds: Timeout para requisições HTTP
        max_retries: Máximo de tentativas em caso de erro transitório
    """

    bot_token: str = ""
    signing_secret: str = ""
    api_base_url: str = SLACK_API_BASE_URL
    request_timeout_seconds: float = 30.0
    max_retries: int = 3

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Slack."""
        errors: list[str] = []
        if not self.bot_token:
            errors.append("SLACK_BOT_TOKEN não configurado")
        return errors


def _load_from_env() -> SlackSettings:
    return SlackSettings(
        bot_token=os.getenv("SLACK_BOT_TOKEN", ""),
        signing_secret=os.getenv("SLACK_SIGNING_SECRET", ""),
        api_base_url=os.getenv("SLACK_API_BASE_URL", SLACK_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("SLACK_REQUEST_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("SLACK_MAX_RETRIES", "3")),
    )


@lru_cache(maxsize=1)
def get_slack_settings() -> SlackSettings:
    """Retorna instância cacheada de SlackSettings."""
    return _load_from_env()
