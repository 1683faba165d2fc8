"""Bootstrap dos adapters — inicialização e wiring.

Composition root: configura logging, valida settings e constrói
adapters concretos a partir do ambiente.

Uso:
    from app.bootstrap import create_adapter, initialize_app

    initialize_app()
    adapter = create_adapter("slack")
    await adapter.connect()
"""

from __future__ import annotations

import logging
import os
from typing import Any

from app.adapters import ADAPTERS, BaseAdapter
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_kik_settings,
    get_messenger_settings,
    get_slack_settings,
    get_sms_settings,
)

# Nome do serviço para logs
SERVICE_NAME = "chat_activity_adapters"

DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

_SETTINGS_GETTERS = {
    "kik": get_kik_settings,
    "messenger": get_messenger_settings,
    "slack": get_slack_settings,
    "sms": get_sms_settings,
}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do processo.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Logging em DEBUG para testes."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings(channel: str) -> None:
    """Valida settings base e do canal.

    Em `staging`/`production` falha rápido; em `development` apenas loga.

    Raises:
        RuntimeError: Configuração inválida em ambiente estrito.
    """
    base = get_base_settings()
    errors = [f"base: {error}" for error in base.validate()]
    errors.extend(f"{channel}: {error}" for error in _SETTINGS_GETTERS[channel]().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "channel": channel, "result": "ok"},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "channel": channel,
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


def create_adapter(name: str, **options: Any) -> BaseAdapter:
    """Constrói o adapter `name` a partir das settings do ambiente.

    `options` sobrescreve o que vem das settings (ex: `client`,
    `fetch_file_info`, `service_id`).

    Raises:
        ValueError: Canal desconhecido.
    """
    channel = name.lower()
    adapter_cls = ADAPTERS.get(channel)
    if adapter_cls is None:
        raise ValueError(f"Canal desconhecido: {name}")

    validate_runtime_settings(channel)
    base = get_base_settings()
    options.setdefault("http", base.http_options)
    options.setdefault("log_level", base.log_level.lower())
    return adapter_cls.from_settings(_SETTINGS_GETTERS[channel](), **options)


__all__ = [
    "SERVICE_NAME",
    "create_adapter",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]
