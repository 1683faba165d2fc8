"""Cliente HTTP do Messenger (Graph API)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.base import PlatformHttpClient
from config.settings.messenger import GRAPH_API_BASE_URL, GRAPH_API_VERSION

if TYPE_CHECKING:
    import httpx

    from app.infra.http import HttpClientConfig

PROFILE_FIELDS = "first_name,last_name,profile_pic"


class MessengerHttpClient(PlatformHttpClient):
    """Cliente Messenger: Send API e perfil do usuário (PSID)."""

    platform = "messenger"

    def __init__(
        self,
        page_access_token: str,
        api_endpoint: str = f"{GRAPH_API_BASE_URL}/{GRAPH_API_VERSION}",
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not page_access_token or not page_access_token.strip():
            raise ValueError("page_access_token é obrigatório")
        super().__init__(config, transport)
        self._params = {"access_token": page_access_token}
        self._api_endpoint = api_endpoint.rstrip("/")

    async def send(self, payload: dict[str, Any]) -> dict[str, Any]:
        response = await self.post(
            f"{self._api_endpoint}/me/messages", json=payload, params=self._params
        )
        return self._decode(response, "send_message")

    async def get_user_profile(self, user_id: str) -> dict[str, Any]:
        response = await self.get(
            f"{self._api_endpoint}/{user_id}",
            params={**self._params, "fields": PROFILE_FIELDS},
        )
        return self._decode(response, "get_user_profile")

    def _extract_error(self, data: dict[str, Any]) -> str | None:
        error = data.get("error")
        if isinstance(error, dict):
            return f"{error.get('type', 'unknown')}:{error.get('code', 0)}"
        return None
