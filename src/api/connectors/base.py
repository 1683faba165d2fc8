"""Cliente HTTP base dos conectores de plataforma.

Estende HttpClient com decodificação de resposta e classificação de
erros da plataforma, sem logar tokens nem payloads.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from app.infra.http import HttpClient, HttpClientConfig
from utils.errors import PlatformApiError

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)


class PlatformHttpClient(HttpClient):
    """Base dos clientes Kik, Slack, Messenger e Twilio."""

    platform = "generic"

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(config, transport)

    def _decode(self, response: httpx.Response, operation: str) -> dict[str, Any]:
        """Converte response em dict, levantando PlatformApiError em falha.

        Corpo vazio com status 2xx retorna {} (Kik responde assim).
        """
        data: dict[str, Any] = {}
        if response.content:
            try:
                decoded = response.json()
            except json.JSONDecodeError:
                decoded = None
            if isinstance(decoded, dict):
                data = decoded
            elif response.is_success:
                # ex: response_url do Slack responde "ok" em texto puro
                return {"ok": True, "body": response.text}

        if response.status_code >= 400:
            error_code = self._extract_error(data) or f"http_{response.status_code}"
            logger.warning(
                "platform_request_failed",
                extra={
                    "platform": self.platform,
                    "operation": operation,
                    "status_code": response.status_code,
                    "error_code": error_code,
                },
            )
            raise PlatformApiError(
                f"{self.platform} {operation} failed: {error_code}",
                platform=self.platform,
                status_code=response.status_code,
                error_code=error_code,
            )

        logger.debug(
            "platform_request_succeeded",
            extra={"platform": self.platform, "operation": operation},
        )
        return data

    def _extract_error(self, data: dict[str, Any]) -> str | None:
        """Código de erro do corpo da resposta (sobrescrito por plataforma)."""
        error = data.get("error")
        return str(error) if error else None
