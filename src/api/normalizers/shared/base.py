"""Parser base: envelope Activity Streams e validação por schema.

Cada canal implementa `normalize` (payload nativo → dict plano) e
`parse` (dict normalizado → atividade). `validate` é comum: limpa
None, descarta eventos sem tipo e valida contra o schema `activity`.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any

from api.normalizers.shared.cleaning import clean_nulls
from api.normalizers.shared.timestamps import now_seconds
from api.validators.activity import validate_activity
from app.constants.activity import AS_CONTEXT, ActivityType, ActorType
from app.infra.media import FileInfo, file_info
from app.protocols.validator import ValidationError
from config.logging import get_logger

FileInfoFetcher = Callable[[str], Awaitable[FileInfo]]


class BaseParser(ABC):
    """Base dos parsers de canal.

    Args:
        service_name: Nome do serviço (ex: "slack"), vira `generator.name`
        service_id: ID da instância do adapter, vira `generator.id`
        log_level: Nível de log próprio do parser
        fetch_file_info: Função async de inspeção de mídia (injetável)
    """

    def __init__(
        self,
        service_name: str,
        service_id: str,
        log_level: str | None = None,
        fetch_file_info: FileInfoFetcher | None = None,
    ) -> None:
        self.service_id = service_id
        self.generator_name = service_name
        self.logger = get_logger(type(self).__module__, log_level)
        self._fetch_file_info = fetch_file_info or file_info

    def validate(self, event: dict[str, Any] | None) -> dict[str, Any] | None:
        """Valida atividade; retorna dict limpo ou None se inválida."""
        self.logger.debug("validation_started", extra={"channel": self.generator_name})

        parsed = clean_nulls(event)
        if not parsed:
            return None

        if not parsed.get("type"):
            self.logger.debug("validation_type_missing", extra={"channel": self.generator_name})
            return None

        try:
            validate_activity(parsed)
        except ValidationError as exc:
            self.logger.error(
                "activity_validation_failed",
                extra={"channel": self.generator_name, "errors": exc.errors},
            )
            return None
        return parsed

    @abstractmethod
    def normalize(self, raw: dict[str, Any], user_info: dict[str, Any] | None) -> dict[str, Any]:
        """Converte payload nativo em dict normalizado do canal."""

    @abstractmethod
    async def parse(self, normalized: dict[str, Any] | None) -> dict[str, Any] | None:
        """Converte dict normalizado em atividade (None = descartar)."""

    def create_identifier(self) -> str:
        return str(uuid.uuid4())

    def create_activity_stream(self, published: int | None = None) -> dict[str, Any]:
        """Monta envelope base com generator e published (fallback: relógio)."""
        return {
            "@context": AS_CONTEXT,
            "generator": {
                "id": self.service_id,
                "name": self.generator_name,
                "type": ActorType.SERVICE.value,
            },
            "published": published if published is not None else now_seconds(),
            "type": ActivityType.CREATE.value,
        }

    async def media_type_of(self, url: str, fallback: str) -> str:
        """Mimetype da URL; usa `fallback` quando a detecção é inconclusiva."""
        info = await self._fetch_file_info(url)
        if info.mimetype.startswith(("image/", "video/")):
            return info.mimetype
        return fallback
