"""Erro de validação dos schemas de atividade (inbound e outbound)."""

from __future__ import annotations

from typing import Any


class ValidationError(Exception):
    """Erro de validação de schema de atividade.

    Attributes:
        errors: Lista de erros achatados ({"loc", "msg"}).
    """

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []
