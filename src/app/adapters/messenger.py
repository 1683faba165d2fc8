"""Adapter Messenger: webhook da página + Send API."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from fastapi import Request, Response, status
from fastapi.responses import PlainTextResponse

from api.connectors.messenger import (
    MessengerHttpClient,
    WebhookChallengeError,
    verify_webhook_challenge,
)
from api.connectors.signature import verify_hub_signature
from api.normalizers.messenger import MessengerParser, extract_messaging_events
from api.payload_builders.messenger import build_messenger_message
from app.adapters.base import BaseAdapter
from app.infra.http import HttpClientConfig
from app.observability import correlation_scope
from config.settings.messenger import GRAPH_API_BASE_URL, GRAPH_API_VERSION

if TYPE_CHECKING:
    from fastapi import APIRouter

    from api.normalizers.shared import FileInfoFetcher
    from app.protocols.models import SendActivity
    from config.settings import MessengerSettings


class MessengerAdapter(BaseAdapter):
    """Adapter do canal Messenger.

    Args:
        token: Page access token
        verify_token: Token esperado no GET de verificação do webhook
        app_secret: Secret do app para X-Hub-Signature-256 (opcional)
        api_endpoint: URL da Graph API com versão
    """

    channel = "messenger"

    def __init__(
        self,
        *,
        verify_token: str | None = None,
        app_secret: str | None = None,
        api_endpoint: str = f"{GRAPH_API_BASE_URL}/{GRAPH_API_VERSION}",
        **options: Any,
    ) -> None:
        self.verify_token = verify_token
        self.app_secret = app_secret
        self.api_endpoint = api_endpoint
        super().__init__(**options)

    @classmethod
    def from_settings(cls, settings: MessengerSettings, **options: Any) -> MessengerAdapter:
        return cls(
            token=settings.page_access_token or None,
            verify_token=settings.verify_token or None,
            app_secret=settings.app_secret or None,
            api_endpoint=settings.api_endpoint,
            client_config=HttpClientConfig(
                timeout_seconds=settings.request_timeout_seconds,
                max_retries=settings.max_retries,
            ),
            **options,
        )

    def _create_parser(self, fetch_file_info: FileInfoFetcher | None) -> MessengerParser:
        return MessengerParser(self.service_name(), self.service_id(), self.log_level, fetch_file_info)

    def _create_client(self) -> MessengerHttpClient:
        return MessengerHttpClient(self.token or "", self.api_endpoint, self.client_config)

    def _has_credentials(self) -> bool:
        return bool(self.token and self.verify_token)

    def _register_routes(self, router: APIRouter) -> None:
        router.add_api_route("/", self.verify_webhook, methods=["GET"])
        router.add_api_route("/", self.receive_webhook, methods=["POST"])

    async def _fetch_user(self, key: str) -> dict[str, Any]:
        profile = await self._require_client().get_user_profile(key)
        return {
            "id": key,
            "first_name": profile.get("first_name"),
            "last_name": profile.get("last_name"),
            "profile_pic": profile.get("profile_pic"),
        }

    def _build_payload(self, activity: SendActivity) -> dict[str, Any]:
        return build_messenger_message(activity)

    async def verify_webhook(self, request: Request) -> Response:
        """GET de verificação: responde hub.challenge ou 403."""
        try:
            challenge = verify_webhook_challenge(request.query_params, self.verify_token)
        except WebhookChallengeError as exc:
            self.logger.warning(
                "webhook_verification_failed",
                extra={"channel": self.channel, "reason": str(exc)},
            )
            return PlainTextResponse("Forbidden", status_code=status.HTTP_403_FORBIDDEN)
        return PlainTextResponse(challenge)

    async def receive_webhook(self, request: Request) -> Response:
        """POST de eventos `messaging`."""
        with correlation_scope(request.headers.get("x-correlation-id")):
            if not self.is_connected:
                return Response(status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

            raw_body = await request.body()
            signature = verify_hub_signature(raw_body, request.headers, self.app_secret)
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

            for event in extract_messaging_events(payload):
                await self._process_safe(event, (event.get("sender") or {}).get("id"))
            return Response(status_code=status.HTTP_200_OK)
