"""Configuração centralizada de logging.

Cada adapter/parser aceita um ``log_level`` próprio; ``get_logger`` aplica
esse nível ao logger nomeado sem alterar o root.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "chat_activity_adapters"


def _normalize_level(level: str) -> str:
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )
    return level_upper


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado no root logger.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id do contexto.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = _normalize_level(level)

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str, level: str | None = None) -> logging.Logger:
    """Retorna logger do módulo, opcionalmente com nível próprio.

    Args:
        name: Nome do logger (geralmente __name__).
        level: Nível específico (ex: "debug" vindo das opções do adapter).

    Raises:
        ValueError: Se o nível informado for inválido.
    """
    logger = logging.getLogger(name)
    if level:
        logger.setLevel(_normalize_level(level))
    return logger


def log_dropped_event(
    logger: logging.Logger,
    channel: str,
    stage: str,
    reason: str | None = None,
) -> None:
    """Registra evento inbound descartado pelo pipeline (sem PII).

    Args:
        logger: Logger instance.
        channel: Canal de origem (ex: "kik").
        stage: Etapa que descartou (normalize, parse, validate, dispatch).
        reason: Motivo curto (ex: "missing_text").
    """
    extra: dict[str, object] = {"channel": channel, "stage": stage}
    if reason:
        extra["reason"] = reason
    logger.debug("inbound_event_dropped", extra=extra)
