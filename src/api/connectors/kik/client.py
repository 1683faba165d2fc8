"""Cliente HTTP da Kik Bot API (autenticação básica username/api_key)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.base import PlatformHttpClient
from config.settings.kik import KIK_API_BASE_URL

if TYPE_CHECKING:
    import httpx

    from app.infra.http import HttpClientConfig

DEFAULT_FEATURES = {
    "manuallySendReadReceipts": False,
    "receiveReadReceipts": False,
    "receiveDeliveryReceipts": False,
    "receiveIsTyping": False,
}


class KikHttpClient(PlatformHttpClient):
    """Cliente Kik: envio, perfil de usuário e configuração do bot."""

    platform = "kik"

    def __init__(
        self,
        username: str,
        api_key: str,
        base_url: str = KIK_API_BASE_URL,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not username or not api_key:
            raise ValueError("username e api_key são obrigatórios")
        super().__init__(config, transport)
        self._auth = (username, api_key)
        self._base_url = base_url.rstrip("/")

    async def send(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Envia `{"messages": [...]}`."""
        response = await self.post(f"{self._base_url}/message", json=payload, auth=self._auth)
        return self._decode(response, "send_message")

    async def get_user_profile(self, user_id: str) -> dict[str, Any]:
        response = await self.get(f"{self._base_url}/user/{user_id}", auth=self._auth)
        return self._decode(response, "get_user_profile")

    async def update_configuration(
        self, webhook_url: str, features: dict[str, bool] | None = None
    ) -> dict[str, Any]:
        """Registra webhook e features do bot (POST /config)."""
        payload = {"webhook": webhook_url, "features": features or DEFAULT_FEATURES}
        response = await self.post(f"{self._base_url}/config", json=payload, auth=self._auth)
        return self._decode(response, "update_configuration")
