"""Adapter Kik: webhook da Kik Bot API + KikParser."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any
from urllib.parse import urlparse

from fastapi import Request, Response, status

from api.connectors.kik import KikHttpClient
from api.connectors.signature import verify_kik_signature
from api.normalizers.kik import KikParser, extract_payload_messages
from api.payload_builders.kik import build_kik_message
from app.adapters.base import BaseAdapter
from app.infra.http import HttpClientConfig
from app.observability import correlation_scope
from config.settings.kik import KIK_API_BASE_URL

if TYPE_CHECKING:
    from fastapi import APIRouter

    from api.normalizers.shared import FileInfoFetcher
    from app.protocols.models import SendActivity
    from config.settings import KikSettings


class KikAdapter(BaseAdapter):
    """Adapter do canal Kik.

    Args:
        username: Nome do bot no Kik
        token: API key do bot (assina webhooks e autentica chamadas)
        webhook_url: URL pública; o path vira a rota de entrada
    """

    channel = "kik"

    def __init__(
        self,
        *,
        username: str | None = None,
        api_base_url: str = KIK_API_BASE_URL,
        **options: Any,
    ) -> None:
        self.username = username
        self.api_base_url = api_base_url
        webhook_url = options.get("webhook_url")
        self.incoming_path = _incoming_path(webhook_url)
        super().__init__(**options)

    @classmethod
    def from_settings(cls, settings: KikSettings, **options: Any) -> KikAdapter:
        return cls(
            username=settings.username,
            token=settings.api_key or None,
            webhook_url=settings.webhook_url or None,
            api_base_url=settings.api_base_url,
            client_config=HttpClientConfig(
                timeout_seconds=settings.request_timeout_seconds,
                max_retries=settings.max_retries,
            ),
            **options,
        )

    def _create_parser(self, fetch_file_info: FileInfoFetcher | None) -> KikParser:
        return KikParser(self.service_name(), self.service_id(), self.log_level, fetch_file_info)

    def _create_client(self) -> KikHttpClient:
        return KikHttpClient(
            self.username or "", self.token or "", self.api_base_url, self.client_config
        )

    def _has_credentials(self) -> bool:
        return bool(self.token and self.username and self.webhook_url)

    def _register_routes(self, router: APIRouter) -> None:
        router.add_api_route(self.incoming_path, self.receive_webhook, methods=["POST"])

    async def _on_listen(self) -> None:
        client = self._require_client()
        update = getattr(client, "update_configuration", None)
        if update is not None and self.webhook_url:
            await update(self.webhook_url)

    async def _fetch_user(self, key: str) -> dict[str, Any]:
        profile = await self._require_client().get_user_profile(key)
        return {
            "displayName": profile.get("displayName"),
            "firstName": profile.get("firstName"),
            "id": key,
            "lastName": profile.get("lastName"),
            "profilePicLastModified": profile.get("profilePicLastModified"),
            "profilePicUrl": profile.get("profilePicUrl"),
            "username": key,
        }

    def _build_payload(self, activity: SendActivity) -> dict[str, Any]:
        return build_kik_message(activity)

    async def receive_webhook(self, request: Request) -> Response:
        """POST do Kik com `{"messages": [...]}`."""
        with correlation_scope(request.headers.get("x-correlation-id")):
            if not self.is_connected:
                return Response(status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

            raw_body = await request.body()
            signature = verify_kik_signature(raw_body, request.headers, self.token)
            if not signature.valid:
                self.logger.warning(
                    "webhook_signature_invalid",
                    extra={"channel": self.channel, "reason": signature.error},
                )
                return Response(status_code=status.HTTP_403_FORBIDDEN)

            try:
                payload = json.loads(raw_body or b"{}")
            except json.JSONDecodeError:
                return Response(status_code=status.HTTP_400_BAD_REQUEST)
            if not isinstance(payload, dict):
                return Response(status_code=status.HTTP_400_BAD_REQUEST)

            for message in extract_payload_messages(payload):
                await self._process_safe(message, message.get("from"))
            return Response(status_code=status.HTTP_200_OK)


def _incoming_path(webhook_url: str | None) -> str:
    """Path de entrada derivado da webhook_url, sem barra final."""
    if not webhook_url:
        return "/"
    path = urlparse(webhook_url).path.rstrip("/")
    return path or "/"
