"""Cliente HTTP da Twilio Messages API (form-urlencoded, basic auth)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.base import PlatformHttpClient
from config.settings.sms import TWILIO_API_BASE_URL

if TYPE_CHECKING:
    import httpx

    from app.infra.http import HttpClientConfig


class TwilioHttpClient(PlatformHttpClient):
    """Cliente Twilio: envio de SMS/MMS."""

    platform = "sms"

    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        base_url: str = TWILIO_API_BASE_URL,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not account_sid or not auth_token:
            raise ValueError("account_sid e auth_token são obrigatórios")
        super().__init__(config, transport)
        self._auth = (account_sid, auth_token)
        self._messages_url = f"{base_url.rstrip('/')}/Accounts/{account_sid}/Messages.json"

    async def send(self, payload: dict[str, Any]) -> dict[str, Any]:
        response = await self.post(self._messages_url, data=payload, auth=self._auth)
        return self._decode(response, "send_message")

    async def get_user_profile(self, user_id: str) -> dict[str, Any]:
        # Twilio não expõe perfil; o número é a identidade
        return {"id": user_id, "name": user_id}

    def _extract_error(self, data: dict[str, Any]) -> str | None:
        code = data.get("code")
        return f"twilio_{code}" if code else None
