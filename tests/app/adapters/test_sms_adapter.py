"""Testes do SmsAdapter (webhook Twilio e envio)."""

from __future__ import annotations

from urllib.parse import urlencode

import pytest

from app.adapters import SmsAdapter
from app.adapters.sms import EMPTY_TWIML
from config.settings import SmsSettings
from tests.fakes.asgi import asgi_client
from tests.fakes.fake_platform_client import FakePlatformClient, fake_file_info
from utils.errors import CredentialsError

FORM = {
    "MessageSid": "SM1",
    "From": "+15551230000",
    "To": "+15559870000",
    "Body": "hello",
    "NumMedia": "0",
}


def _adapter(platform: FakePlatformClient) -> SmsAdapter:
    return SmsAdapter(
        account_sid="AC1",
        token="auth",
        username="+15559870000",
        service_id="svc-sms",
        client=platform,
        fetch_file_info=fake_file_info(),
    )


def test_from_settings_maps_fields() -> None:
    settings = SmsSettings(account_sid="AC1", auth_token="auth", from_number="+1555")

    adapter = SmsAdapter.from_settings(settings)

    assert adapter.account_sid == "AC1"
    assert adapter.token == "auth"
    assert adapter.username == "+1555"


@pytest.mark.asyncio
async def test_connect_requires_from_number() -> None:
    adapter = SmsAdapter(account_sid="AC1", token="auth", client=FakePlatformClient())

    with pytest.raises(CredentialsError):
        await adapter.connect()


@pytest.mark.asyncio
async def test_webhook_answers_twiml_and_emits() -> None:
    adapter = _adapter(FakePlatformClient())
    await adapter.connect()
    stream = adapter.listen()

    async with asgi_client(adapter.router) as client:
        response = await client.post(
            "/",
            content=urlencode(FORM),
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
    activity = await anext(stream)

    assert response.status_code == 200
    assert response.text == EMPTY_TWIML
    assert response.headers["content-type"].startswith("application/xml")
    assert activity["actor"]["id"] == "+15551230000"
    assert activity["object"] == {"content": "hello", "id": "SM1", "type": "Note"}


@pytest.mark.asyncio
async def test_webhook_without_sender_is_bad_request() -> None:
    adapter = _adapter(FakePlatformClient())
    await adapter.connect()

    async with asgi_client(adapter.router) as client:
        response = await client.post("/", content=urlencode({"Body": "x"}))

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_send_uses_from_number() -> None:
    platform = FakePlatformClient()
    adapter = _adapter(platform)
    await adapter.connect()

    await adapter.send(
        {"to": {"id": "+15551230000", "type": "Person"}, "object": {"type": "Note", "content": "yo"}}
    )

    assert platform.sent == [{"To": "+15551230000", "From": "+15559870000", "Body": "yo"}]
