"""Cliente HTTP da Slack Web API (Bearer token).

A Web API responde 200 mesmo em erro; o campo `ok` define o sucesso.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.base import PlatformHttpClient
from config.settings.slack import SLACK_API_BASE_URL
from utils.errors import PlatformApiError

if TYPE_CHECKING:
    import httpx

    from app.infra.http import HttpClientConfig


class SlackHttpClient(PlatformHttpClient):
    """Cliente Slack: mensagens, perfis, canais e response_url."""

    platform = "slack"

    def __init__(
        self,
        token: str,
        base_url: str = SLACK_API_BASE_URL,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not token or not token.strip():
            raise ValueError("token é obrigatório")
        super().__init__(config, transport)
        self._headers = {"Authorization": f"Bearer {token}"}
        self._base_url = base_url.rstrip("/")

    async def call(
        self,
        method: str,
        payload: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """Chama um método da Web API (POST JSON, ou GET com params)."""
        url = f"{self._base_url}/{method}"
        if payload is not None:
            headers = {**self._headers, "Content-Type": "application/json; charset=utf-8"}
            response = await self.post(url, json=payload, headers=headers)
        else:
            response = await self.get(url, params=params, headers=self._headers)

        data = self._decode(response, method)
        if not data.get("ok"):
            error_code = str(data.get("error") or "unknown_error")
            raise PlatformApiError(
                f"slack {method} failed: {error_code}",
                platform=self.platform,
                status_code=response.status_code,
                error_code=error_code,
                is_retryable=error_code == "ratelimited",
            )
        return data

    async def send(self, payload: dict[str, Any]) -> dict[str, Any]:
        return await self.call("chat.postMessage", payload)

    async def get_user_profile(self, user_id: str) -> dict[str, Any]:
        data = await self.call("users.info", params={"user": user_id})
        return data.get("user") or {}

    async def get_channel_info(self, channel_id: str) -> dict[str, Any]:
        data = await self.call("conversations.info", params={"channel": channel_id})
        return data.get("channel") or {}

    async def list_users(self) -> list[dict[str, Any]]:
        data = await self.call("users.list", params={"limit": "200"})
        return list(data.get("members") or [])

    async def list_channels(self) -> list[dict[str, Any]]:
        data = await self.call(
            "conversations.list",
            params={"limit": "200", "types": "public_channel,private_channel,im"},
        )
        return list(data.get("channels") or [])

    async def post_response_url(self, response_url: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Responde a um interactive_message pelo response_url (sem token)."""
        response = await self.post(response_url, json=payload)
        return self._decode(response, "response_url")
