"""Testes do cliente Messenger (Graph API)."""

from __future__ import annotations

import httpx
import pytest

from api.connectors.messenger import MessengerHttpClient
from app.infra.http import HttpClientConfig
from utils.errors import PlatformApiError


def _client(handler) -> MessengerHttpClient:
    return MessengerHttpClient(
        "page-token",
        api_endpoint="https://graph.facebook.test/v19.0",
        config=HttpClientConfig(max_retries=0),
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_send_uses_access_token_param() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v19.0/me/messages"
        assert request.url.params["access_token"] == "page-token"
        return httpx.Response(200, json={"recipient_id": "PSID", "message_id": "m1"})

    result = await _client(handler).send({"recipient": {"id": "PSID"}, "message": {"text": "hi"}})

    assert result["message_id"] == "m1"


@pytest.mark.asyncio
async def test_get_user_profile_fields() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v19.0/PSID"
        assert request.url.params["fields"] == "first_name,last_name,profile_pic"
        return httpx.Response(200, json={"first_name": "Ana"})

    assert await _client(handler).get_user_profile("PSID") == {"first_name": "Ana"}


@pytest.mark.asyncio
async def test_graph_error_code() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            400, json={"error": {"type": "OAuthException", "code": 190, "message": "bad"}}
        )

    with pytest.raises(PlatformApiError) as exc_info:
        await _client(handler).send({})

    assert exc_info.value.error_code == "OAuthException:190"
