"""Exceções de domínio dos adapters de canal."""

from __future__ import annotations


class AdapterError(RuntimeError):
    """Base para falhas de adapter (sessão, credenciais, envio)."""


class CredentialsError(AdapterError):
    """Credenciais ausentes ou inválidas para o canal."""


class SessionError(AdapterError):
    """Operação exige sessão ativa com a plataforma."""


class NotSupportedError(AdapterError):
    """Operação não suportada pela plataforma."""


class UnsupportedMessageError(AdapterError):
    """Tipo de objeto outbound sem representação na plataforma."""


class PlatformApiError(AdapterError):
    """Erro retornado pela API da plataforma (sem dados sensíveis)."""

    def __init__(
        self,
        message: str,
        *,
        platform: str,
        status_code: int | None = None,
        error_code: str | None = None,
        is_retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.platform = platform
        self.status_code = status_code
        self.error_code = error_code
        self.is_retryable = is_retryable
