"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (app/bootstrap)
    configure_logging(level="INFO", service_name="chat_activity_adapters")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("activity_emitted", extra={"channel": "slack"})

Campos obrigatórios em todo log: correlation_id, service, level, logger,
message, asctime. Nunca logar payloads brutos nem PII.
"""

from config.logging.config import configure_logging, get_logger, log_dropped_event
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_dropped_event",
]
