"""Adapter Slack: Events API, interactivity e Web API."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qs

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse

from api.connectors.signature import verify_slack_signature
from api.connectors.slack import SlackHttpClient
from api.normalizers.slack import (
    SlackParser,
    extract_event,
    extract_interactive_payload,
    is_message_event,
)
from api.normalizers.slack.extractor import parse_interactive_form
from api.payload_builders.slack import build_slack_message, parse_callback_context
from app.adapters.base import BaseAdapter
from app.infra.http import HttpClientConfig, HttpError
from app.observability import correlation_scope
from config.settings.slack import SLACK_API_BASE_URL
from utils.errors import PlatformApiError

if TYPE_CHECKING:
    from fastapi import APIRouter

    from api.normalizers.shared import FileInfoFetcher
    from app.protocols.models import SendActivity
    from app.protocols.outbound_sender import PlatformClientProtocol
    from config.settings import SlackSettings

EVENTS_PATH = "/events"
INTERACTIONS_PATH = "/interactions"


class SlackAdapter(BaseAdapter):
    """Adapter do canal Slack.

    Args:
        token: Bot token (xoxb-...)
        signing_secret: Secret de assinatura; sem ele a verificação é pulada
    """

    channel = "slack"

    def __init__(
        self,
        *,
        signing_secret: str | None = None,
        api_base_url: str = SLACK_API_BASE_URL,
        **options: Any,
    ) -> None:
        self.signing_secret = signing_secret
        self.api_base_url = api_base_url
        self._store_channels: dict[str, dict[str, Any]] = {}
        super().__init__(**options)

    @classmethod
    def from_settings(cls, settings: SlackSettings, **options: Any) -> SlackAdapter:
        return cls(
            token=settings.bot_token or None,
            signing_secret=settings.signing_secret or None,
            api_base_url=settings.api_base_url,
            client_config=HttpClientConfig(
                timeout_seconds=settings.request_timeout_seconds,
                max_retries=settings.max_retries,
            ),
            **options,
        )

    def _create_parser(self, fetch_file_info: FileInfoFetcher | None) -> SlackParser:
        return SlackParser(self.service_name(), self.service_id(), self.log_level, fetch_file_info)

    def _create_client(self) -> SlackHttpClient:
        return SlackHttpClient(self.token or "", self.api_base_url, self.client_config)

    def _has_credentials(self) -> bool:
        return bool(self.token)

    def _register_routes(self, router: APIRouter) -> None:
        router.add_api_route(EVENTS_PATH, self.receive_events, methods=["POST"])
        router.add_api_route(INTERACTIONS_PATH, self.receive_interaction, methods=["POST"])

    async def users(self) -> dict[str, dict[str, Any]]:
        """Lista usuários do workspace e atualiza o cache."""
        client = self._slack_client()
        for member in await client.list_users():
            if member.get("id"):
                self._store_users[member["id"]] = member
        return dict(self._store_users)

    async def channels(self) -> dict[str, dict[str, Any]]:
        """Lista conversas visíveis ao bot e atualiza o cache."""
        client = self._slack_client()
        for conversation in await client.list_channels():
            if conversation.get("id"):
                self._store_channels[conversation["id"]] = conversation
        return dict(self._store_channels)

    async def conversation(self, key: str, cache: bool = True) -> dict[str, Any]:
        """Informações de uma conversa, com cache em memória."""
        if cache and key in self._store_channels:
            return self._store_channels[key]
        info = await self._slack_client().get_channel_info(key)
        self._store_channels[key] = info
        return info

    async def _normalize(
        self, raw: dict[str, Any], user_info: dict[str, Any] | None
    ) -> dict[str, Any]:
        channel_info: dict[str, Any] | None = None
        channel_id = raw.get("channel")
        if channel_id:
            try:
                channel_info = await self.conversation(channel_id)
            except (PlatformApiError, HttpError) as exc:
                self.logger.warning(
                    "channel_info_unavailable",
                    extra={"channel": self.channel, "error_type": type(exc).__name__},
                )
        return self.parser.normalize(raw, user_info, channel_info)

    def _build_payload(self, activity: SendActivity) -> dict[str, Any]:
        return build_slack_message(activity)

    async def _deliver(self, client: PlatformClientProtocol, activity: SendActivity) -> None:
        payload = self._build_payload(activity)
        callback = parse_callback_context(activity)
        if callback is None:
            await client.send(payload)
            return

        _, response_url = callback
        reply = {key: value for key, value in payload.items() if key != "channel"}
        reply["replace_original"] = False
        await self._slack_client().post_response_url(response_url, reply)

    def _slack_client(self) -> SlackHttpClient:
        return self._require_client()  # type: ignore[return-value]

    async def _verified_body(self, request: Request) -> bytes | None:
        raw_body = await request.body()
        signature = verify_slack_signature(raw_body, request.headers, self.signing_secret)
        if not signature.valid:
            self.logger.warning(
                "webhook_signature_invalid",
                extra={"channel": self.channel, "reason": signature.error},
            )
            return None
        return raw_body

    async def receive_events(self, request: Request) -> Response:
        """Events API: url_verification e event_callback."""
        with correlation_scope(request.headers.get("x-correlation-id")):
            raw_body = await self._verified_body(request)
            if raw_body is None:
                return Response(status_code=status.HTTP_403_FORBIDDEN)
            try:
                payload = json.loads(raw_body or b"{}")
            except json.JSONDecodeError:
                return Response(status_code=status.HTTP_400_BAD_REQUEST)
            if not isinstance(payload, dict):
                return Response(status_code=status.HTTP_400_BAD_REQUEST)

            if payload.get("type") == "url_verification":
                return JSONResponse({"challenge": payload.get("challenge", "")})

            if not self.is_connected:
                return Response(status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

            event = extract_event(payload)
            if event is not None and is_message_event(event):
                await self._process_safe(event, event.get("user"))
            return Response(status_code=status.HTTP_200_OK)

    async def receive_interaction(self, request: Request) -> Response:
        """Interactivity: POST form com campo `payload` (JSON)."""
        with correlation_scope(request.headers.get("x-correlation-id")):
            raw_body = await self._verified_body(request)
            if raw_body is None:
                return Response(status_code=status.HTTP_403_FORBIDDEN)
            if not self.is_connected:
                return Response(status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

            form = parse_qs(raw_body.decode("utf-8"))
            payload = parse_interactive_form((form.get("payload") or [None])[0])
            event = extract_interactive_payload(payload) if payload else None
            if event is None:
                return Response(status_code=status.HTTP_400_BAD_REQUEST)

            await self._process_safe(event, event.get("user"))
            return Response(status_code=status.HTTP_200_OK)
