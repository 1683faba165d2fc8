"""Adapter SMS: webhook Twilio + Messages API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qsl

from fastapi import Request, Response, status

from api.connectors.sms import TwilioHttpClient
from api.normalizers.sms import SmsParser
from api.payload_builders.sms import build_sms_message
from app.adapters.base import BaseAdapter
from app.infra.http import HttpClientConfig
from app.observability import correlation_scope
from config.settings.sms import TWILIO_API_BASE_URL

if TYPE_CHECKING:
    from fastapi import APIRouter

    from api.normalizers.shared import FileInfoFetcher
    from app.protocols.models import SendActivity
    from config.settings import SmsSettings

EMPTY_TWIML = '<?xml version="1.0" encoding="UTF-8"?><Response></Response>'


class SmsAdapter(BaseAdapter):
    """Adapter do canal SMS (Twilio).

    Args:
        account_sid: Account SID
        token: Auth token
        username: Número de origem (E.164) usado como `From`
    """

    channel = "sms"

    def __init__(
        self,
        *,
        account_sid: str | None = None,
        username: str | None = None,
        api_base_url: str = TWILIO_API_BASE_URL,
        **options: Any,
    ) -> None:
        self.account_sid = account_sid
        self.api_base_url = api_base_url
        self.username = username
        super().__init__(**options)

    @classmethod
    def from_settings(cls, settings: SmsSettings, **options: Any) -> SmsAdapter:
        return cls(
            account_sid=settings.account_sid or None,
            token=settings.auth_token or None,
            username=settings.from_number or None,
            api_base_url=settings.api_base_url,
            client_config=HttpClientConfig(
                timeout_seconds=settings.request_timeout_seconds,
                max_retries=settings.max_retries,
            ),
            **options,
        )

    def _create_parser(self, fetch_file_info: FileInfoFetcher | None) -> SmsParser:
        return SmsParser(self.service_name(), self.service_id(), self.log_level, fetch_file_info)

    def _create_client(self) -> TwilioHttpClient:
        return TwilioHttpClient(
            self.account_sid or "", self.token or "", self.api_base_url, self.client_config
        )

    def _has_credentials(self) -> bool:
        return bool(self.token and self.account_sid and self.username)

    def _register_routes(self, router: APIRouter) -> None:
        router.add_api_route("/", self.receive_webhook, methods=["POST"])

    def _build_payload(self, activity: SendActivity) -> dict[str, Any]:
        return build_sms_message(activity, self.username or "")

    async def receive_webhook(self, request: Request) -> Response:
        """POST form-urlencoded do Twilio; responde TwiML vazio."""
        with correlation_scope(request.headers.get("x-correlation-id")):
            if not self.is_connected:
                return Response(status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

            raw_body = await request.body()
            form = dict(parse_qsl(raw_body.decode("utf-8"), keep_blank_values=True))
            if not form.get("From"):
                return Response(status_code=status.HTTP_400_BAD_REQUEST)

            await self._process_safe(form, form["From"])
            return Response(content=EMPTY_TWIML, media_type="application/xml")
