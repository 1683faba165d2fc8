"""Testes do MessengerAdapter (verificação GET, eventos POST, envio)."""

from __future__ import annotations

import hashlib
import hmac
import json

import pytest

from app.adapters import MessengerAdapter
from tests.fakes.asgi import asgi_client
from tests.fakes.fake_platform_client import FakePlatformClient, fake_file_info
from utils.errors import CredentialsError

PAYLOAD = {
    "object": "page",
    "entry": [
        {
            "id": "PAGE_ID",
            "time": 1458692752478,
            "messaging": [
                {
                    "sender": {"id": "PSID"},
                    "recipient": {"id": "PAGE_ID"},
                    "timestamp": 1458692752478,
                    "message": {"mid": "mid.1", "text": "hello"},
                }
            ],
        }
    ],
}


def _adapter(platform: FakePlatformClient, **options) -> MessengerAdapter:
    return MessengerAdapter(
        token="page-token",
        verify_token="verify-me",
        service_id="svc-messenger",
        client=platform,
        fetch_file_info=fake_file_info(),
        **options,
    )


@pytest.mark.asyncio
async def test_verification_challenge() -> None:
    adapter = _adapter(FakePlatformClient())
    params = {"hub.mode": "subscribe", "hub.verify_token": "verify-me", "hub.challenge": "1158201444"}

    async with asgi_client(adapter.router) as client:
        ok = await client.get("/", params=params)
        denied = await client.get("/", params={**params, "hub.verify_token": "wrong"})

    assert ok.status_code == 200
    assert ok.text == "1158201444"
    assert denied.status_code == 403


@pytest.mark.asyncio
async def test_connect_requires_verify_token() -> None:
    adapter = MessengerAdapter(token="page-token", client=FakePlatformClient())

    with pytest.raises(CredentialsError):
        await adapter.connect()


@pytest.mark.asyncio
async def test_event_emits_activity_with_profile() -> None:
    platform = FakePlatformClient(profiles={"PSID": {"first_name": "Ana", "last_name": "Lima"}})
    adapter = _adapter(platform, app_secret="app-secret")
    await adapter.connect()
    stream = adapter.listen()
    body = json.dumps(PAYLOAD).encode()
    signature = hmac.new(b"app-secret", body, hashlib.sha256).hexdigest()

    async with asgi_client(adapter.router) as client:
        response = await client.post(
            "/", content=body, headers={"X-Hub-Signature-256": f"sha256={signature}"}
        )
    activity = await anext(stream)

    assert response.status_code == 200
    assert activity["actor"] == {"id": "PSID", "name": "Ana Lima", "type": "Person"}
    assert activity["target"]["id"] == "PAGE_ID"
    assert activity["object"] == {"content": "hello", "id": "mid.1", "type": "Note"}


@pytest.mark.asyncio
async def test_event_with_bad_signature_is_rejected() -> None:
    adapter = _adapter(FakePlatformClient(), app_secret="app-secret")
    await adapter.connect()
    adapter.listen()

    async with asgi_client(adapter.router) as client:
        response = await client.post(
            "/", content=json.dumps(PAYLOAD).encode(), headers={"X-Hub-Signature-256": "sha256=00"}
        )

    assert response.status_code == 403
    assert adapter._listeners[0].empty()


@pytest.mark.asyncio
async def test_send_button_template() -> None:
    platform = FakePlatformClient()
    adapter = _adapter(platform)
    await adapter.connect()

    await adapter.send(
        {
            "to": {"id": "PSID", "type": "Person"},
            "object": {
                "type": "Note",
                "content": "Pick",
                "attachment": [{"type": "Button", "name": "Go", "content": "GO"}],
            },
        }
    )

    sent = platform.sent[0]
    assert sent["recipient"] == {"id": "PSID"}
    assert sent["message"]["attachment"]["payload"]["buttons"] == [
        {"type": "postback", "title": "Go", "payload": "GO"}
    ]
