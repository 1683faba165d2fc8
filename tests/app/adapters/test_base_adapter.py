"""Testes do ciclo de vida comum dos adapters (via KikAdapter)."""

from __future__ import annotations

from typing import Any

import pytest

from app.adapters import KikAdapter
from app.adapters import base as base_module
from app.protocols.validator import ValidationError
from tests.fakes.fake_platform_client import FakePlatformClient, fake_file_info
from utils.errors import (
    CredentialsError,
    NotSupportedError,
    SessionError,
    UnsupportedMessageError,
)

SEND = {
    "type": "Create",
    "to": {"id": "laura", "type": "Person"},
    "object": {"type": "Note", "content": "hello"},
}

MESSAGE = {
    "chatId": "chat-1",
    "id": "msg-1",
    "type": "text",
    "from": "laura",
    "participants": ["laura"],
    "body": "hi bot",
    "timestamp": 1439576628405,
}


def _adapter(**overrides: Any) -> KikAdapter:
    options: dict[str, Any] = {
        "username": "bot",
        "token": "api-key",
        "webhook_url": "https://bot.test/kik",
        "service_id": "svc-1",
        "client": FakePlatformClient(),
        "fetch_file_info": fake_file_info(),
    }
    options.update(overrides)
    return KikAdapter(**options)


def test_empty_token_raises() -> None:
    with pytest.raises(CredentialsError, match="Token should exist."):
        _adapter(token="")


def test_identity_and_router() -> None:
    adapter = _adapter()

    assert adapter.service_name() == "kik"
    assert adapter.service_id() == "svc-1"
    assert adapter.webhook_url == "https://bot.test/kik/"
    assert adapter.get_router() is adapter.router
    assert not adapter.is_connected


def test_service_id_defaults_to_uuid() -> None:
    assert len(_adapter(service_id=None).service_id()) == 36


def test_embedded_server_hides_router() -> None:
    adapter = _adapter(http={"host": "127.0.0.1", "port": 0})

    assert adapter.get_router() is None
    assert adapter.webhook_server is not None


@pytest.mark.asyncio
async def test_connect_requires_credentials() -> None:
    adapter = _adapter(token=None)

    with pytest.raises(CredentialsError, match="Credentials should exist."):
        await adapter.connect()


@pytest.mark.asyncio
async def test_connect_is_idempotent() -> None:
    adapter = _adapter()

    first = await adapter.connect()
    second = await adapter.connect()

    assert first == second == {"type": "connected", "serviceID": "svc-1"}
    assert adapter.is_connected


def test_listen_without_session_raises() -> None:
    with pytest.raises(SessionError, match="No session found."):
        _adapter().listen()


@pytest.mark.asyncio
async def test_send_without_session_raises() -> None:
    with pytest.raises(SessionError):
        await _adapter().send(SEND)


@pytest.mark.asyncio
async def test_send_returns_status() -> None:
    client = FakePlatformClient()
    adapter = _adapter(client=client)
    await adapter.connect()

    result = await adapter.send(SEND)

    assert result == {"type": "sent", "serviceID": "svc-1"}
    assert client.sent == [{"messages": [{"type": "text", "body": "hello", "to": "laura"}]}]


@pytest.mark.asyncio
async def test_send_invalid_schema_raises() -> None:
    adapter = _adapter()
    await adapter.connect()

    with pytest.raises(ValidationError):
        await adapter.send({"type": "Create", "object": {"type": "Note", "content": "x"}})


@pytest.mark.asyncio
async def test_send_unsupported_type_raises() -> None:
    adapter = _adapter()
    await adapter.connect()
    data = {**SEND, "object": {"type": "Audio", "url": "https://cdn.test/a.mp3"}}

    with pytest.raises(UnsupportedMessageError, match="Only Note, Image, and Video are supported."):
        await adapter.send(data)


@pytest.mark.asyncio
async def test_channels_not_supported() -> None:
    with pytest.raises(NotSupportedError):
        await _adapter().channels()


@pytest.mark.asyncio
async def test_user_is_cached() -> None:
    client = FakePlatformClient(profiles={"laura": {"firstName": "Laura"}})
    adapter = _adapter(client=client)
    await adapter.connect()

    first = await adapter.user("laura")
    await adapter.user("laura")
    await adapter.user("laura", cache=False)

    assert first["firstName"] == "Laura"
    assert client.profile_calls == ["laura", "laura"]
    assert "laura" in await adapter.users()


@pytest.mark.asyncio
async def test_user_before_connect_raises() -> None:
    with pytest.raises(SessionError, match="Session should be initialized before."):
        await _adapter().user("laura")


@pytest.mark.asyncio
async def test_disconnect_ends_listen() -> None:
    client = FakePlatformClient()
    adapter = _adapter(client=client)
    await adapter.connect()
    stream = adapter.listen()

    await adapter.disconnect()
    received = [activity async for activity in stream]

    assert received == []
    assert not adapter.is_connected
    assert client.configurations == ["https://bot.test/kik/"]


@pytest.mark.asyncio
async def test_reconnect_without_listener_keeps_new_stream_open() -> None:
    adapter = _adapter()
    await adapter.connect()
    await adapter.disconnect()
    await adapter.connect()
    stream = adapter.listen()

    await adapter._process_safe(MESSAGE, "laura")
    activity = await anext(stream, None)

    assert activity is not None
    assert activity["object"]["content"] == "hi bot"


@pytest.mark.asyncio
async def test_disconnect_ends_every_listener() -> None:
    adapter = _adapter()
    await adapter.connect()
    first = adapter.listen()
    second = adapter.listen()

    await adapter._process_safe(MESSAGE, "laura")
    await adapter.disconnect()
    received_first = [activity async for activity in first]
    received_second = [activity async for activity in second]

    assert [a["object"]["id"] for a in received_first] == ["msg-1"]
    assert [a["object"]["id"] for a in received_second] == ["msg-1"]
    assert adapter._listeners == []


@pytest.mark.asyncio
async def test_events_without_listener_are_dropped(monkeypatch: pytest.MonkeyPatch) -> None:
    dropped: list[tuple[str, str, str | None]] = []

    def record_drop(logger, channel: str, stage: str, reason: str | None = None) -> None:
        dropped.append((channel, stage, reason))

    monkeypatch.setattr(base_module, "log_dropped_event", record_drop)
    adapter = _adapter()
    await adapter.connect()

    emitted = await adapter._emit(MESSAGE, "laura")
    stream = adapter.listen()
    await adapter._process_safe({**MESSAGE, "id": "msg-2"}, "laura")
    activity = await anext(stream)

    assert emitted is None
    assert dropped == [("kik", "dispatch", "no_listener")]
    assert activity["object"]["id"] == "msg-2"


def test_from_settings_is_required_per_channel() -> None:
    assert "from_settings" in base_module.BaseAdapter.__abstractmethods__
