"""Testes do MessengerParser e do extrator de eventos `messaging`."""

from __future__ import annotations

from typing import Any

import pytest

from api.normalizers.messenger import MessengerParser, extract_messaging_events

PROFILE = {"id": "USER_PSID", "first_name": "Ana", "last_name": "Lima"}


def _event(**message: Any) -> dict[str, Any]:
    return {
        "sender": {"id": "USER_PSID"},
        "recipient": {"id": "PAGE_ID"},
        "timestamp": 1458692752478,
        "message": {"mid": "mid.1457764197618:41d102a3e1ae206a38", **message},
    }


@pytest.fixture
def parser() -> MessengerParser:
    return MessengerParser("messenger", "svc-messenger")


@pytest.mark.asyncio
async def test_parse_text(parser: MessengerParser) -> None:
    activity = await parser.parse(parser.normalize(_event(text="hello"), PROFILE))

    assert activity["published"] == 1458692752
    assert activity["actor"] == {"id": "USER_PSID", "name": "Ana Lima", "type": "Person"}
    assert activity["target"] == {"id": "PAGE_ID", "name": "PAGE_ID", "type": "Person"}
    assert activity["object"] == {
        "content": "hello",
        "id": "mid.1457764197618:41d102a3e1ae206a38",
        "type": "Note",
    }
    assert parser.validate(activity) is not None


@pytest.mark.asyncio
async def test_parse_quick_reply_context(parser: MessengerParser) -> None:
    event = _event(text="Red", quick_reply={"payload": "PICK_RED"})

    activity = await parser.parse(parser.normalize(event, PROFILE))

    assert activity["object"]["context"] == {
        "content": "PICK_RED",
        "name": "quick_reply_callback",
        "type": "Object",
    }


@pytest.mark.asyncio
async def test_parse_image_attachment(parser: MessengerParser) -> None:
    event = _event(
        attachments=[
            {"type": "fallback", "payload": None},
            {"type": "image", "payload": {"url": "https://scontent.test/img.jpg"}},
        ]
    )

    activity = await parser.parse(parser.normalize(event, PROFILE))

    assert activity["object"]["type"] == "Image"
    assert activity["object"]["url"] == "https://scontent.test/img.jpg"
    assert parser.validate(activity) is not None


@pytest.mark.asyncio
async def test_parse_postback(parser: MessengerParser) -> None:
    event = {
        "sender": {"id": "USER_PSID"},
        "recipient": {"id": "PAGE_ID"},
        "timestamp": 1458692752478,
        "postback": {"title": "Start", "payload": "GET_STARTED", "mid": "m-1"},
    }

    activity = await parser.parse(parser.normalize(event, PROFILE))

    assert activity["object"]["content"] == "Start"
    assert activity["object"]["id"] == "m-1"
    assert activity["object"]["context"]["name"] == "postback_callback"
    assert activity["object"]["context"]["content"] == "GET_STARTED"


@pytest.mark.asyncio
async def test_parse_without_profile_uses_sender(parser: MessengerParser) -> None:
    activity = await parser.parse(parser.normalize(_event(text="hi"), None))
    validated = parser.validate(activity)

    assert validated["actor"]["id"] == "USER_PSID"
    assert "name" not in validated["actor"]


@pytest.mark.asyncio
async def test_parse_unsupported_attachment_is_dropped(parser: MessengerParser) -> None:
    event = _event(attachments=[{"type": "audio", "payload": {"url": "https://x.test/a"}}])

    assert await parser.parse(parser.normalize(event, PROFILE)) is None


def test_extract_messaging_events_skips_echo_and_receipts() -> None:
    payload = {
        "object": "page",
        "entry": [
            {
                "id": "PAGE_ID",
                "messaging": [
                    _event(text="hi"),
                    _event(text="echo", is_echo=True),
                    {"sender": {"id": "x"}, "delivery": {"mids": []}},
                    {"sender": {"id": "x"}, "postback": {"payload": "P"}},
                ],
            }
        ],
    }

    events = extract_messaging_events(payload)

    assert len(events) == 2
    assert events[0]["message"]["text"] == "hi"
    assert events[1]["postback"] == {"payload": "P"}


def test_extract_messaging_events_requires_page_object() -> None:
    assert extract_messaging_events({"object": "instagram", "entry": []}) == []
