"""Settings base dos adapters.

Configurações comuns a todos os canais: ambiente, nome do serviço,
nível de log e endereço do servidor de webhook embutido.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs
        log_level: Nível de log padrão dos adapters
        webhook_host: Host do WebHookServer embutido (vazio = não sobe servidor)
        webhook_port: Porta do WebHookServer embutido
    """

    environment: Environment = "development"
    service_name: str = "chat-activity-adapters"
    log_level: str = "INFO"

    webhook_host: str = ""
    webhook_port: int = 8080

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def http_options(self) -> dict[str, object] | None:
        """Opções `http` para adapters, ou None sem servidor embutido."""
        if not self.webhook_host:
            return None
        return {"host": self.webhook_host, "port": self.webhook_port}

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if self.environment not in {"development", "staging", "production"}:
            errors.append(f"ENVIRONMENT inválido: {self.environment}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if not 0 < self.webhook_port < 65536:
            errors.append("WEBHOOK_PORT deve estar entre 1 e 65535")

        return errors


def _parse_environment(env_str: str) -> Environment:
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _load_base_from_env() -> BaseSettings:
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "chat-activity-adapters"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        webhook_host=os.getenv("WEBHOOK_HOST", ""),
        webhook_port=int(os.getenv("WEBHOOK_PORT", "8080")),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
