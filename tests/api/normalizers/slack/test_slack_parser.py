"""Testes do SlackParser (mensagens, links, arquivos e callbacks)."""

from __future__ import annotations

from typing import Any

import pytest

from api.normalizers.slack import SlackParser
from api.normalizers.slack.extractor import INTERACTIVE_MESSAGE
from tests.fakes.fake_platform_client import fake_file_info

USER = {"id": "U023BECGF", "name": "bobby", "is_bot": False}
CHANNEL = {"id": "C2147483705", "is_im": False}


def _parser(mimetypes: dict[str, str] | None = None) -> SlackParser:
    return SlackParser("slack", "svc-slack", fetch_file_info=fake_file_info(mimetypes))


def _message(**overrides: Any) -> dict[str, Any]:
    raw = {
        "type": "message",
        "channel": "C2147483705",
        "user": "U023BECGF",
        "text": "Hello world",
        "ts": "1355517523.000005",
    }
    raw.update(overrides)
    return raw


async def _parse(parser: SlackParser, raw: dict[str, Any], channel: dict[str, Any] | None = CHANNEL):
    return await parser.parse(parser.normalize(raw, USER, channel))


def test_normalize_falls_back_to_ids() -> None:
    normalized = _parser().normalize(_message(), None)

    assert normalized["user"] == {"id": "U023BECGF"}
    assert normalized["channel"] == {"id": "C2147483705"}


@pytest.mark.asyncio
async def test_parse_text_message() -> None:
    parser = _parser()

    activity = await _parse(parser, _message())

    assert activity is not None
    assert activity["published"] == 1355517523
    assert activity["generator"] == {"id": "svc-slack", "name": "slack", "type": "Service"}
    assert activity["actor"] == {"id": "U023BECGF", "name": "bobby", "type": "Person"}
    assert activity["target"] == {"id": "C2147483705", "name": "C2147483705", "type": "Group"}
    assert activity["object"] == {
        "content": "Hello world",
        "id": "1355517523.000005",
        "type": "Note",
    }
    assert parser.validate(activity) is not None


@pytest.mark.asyncio
async def test_parse_bot_and_direct_message() -> None:
    parser = _parser()
    normalized = parser.normalize(
        _message(),
        {"id": "B1", "name": "bot", "is_bot": True},
        {"id": "D1", "is_im": True, "user": "U023BECGF"},
    )

    activity = await parser.parse(normalized)

    assert activity["actor"]["type"] == "Application"
    assert activity["target"]["type"] == "Person"


@pytest.mark.asyncio
async def test_parse_thread_ts_takes_precedence() -> None:
    activity = await _parse(_parser(), _message(thread_ts="1400000000.000001"))

    assert activity["published"] == 1400000000
    assert activity["object"]["id"] == "1400000000.000001"


@pytest.mark.asyncio
async def test_parse_without_text_is_dropped() -> None:
    assert await _parse(_parser(), _message(text=None)) is None
    assert await _parse(_parser(), _message(text="")) is None


@pytest.mark.asyncio
async def test_parse_image_link() -> None:
    url = "https://cdn.test/cat.png"
    parser = _parser({url: "image/png"})

    activity = await _parse(parser, _message(text=f"<{url}>", event_id="Ev1"))

    assert activity["object"] == {
        "id": "Ev1",
        "mediaType": "image/png",
        "type": "Image",
        "url": url,
    }
    assert parser.validate(activity) is not None


@pytest.mark.asyncio
async def test_parse_video_link_with_label() -> None:
    url = "https://cdn.test/clip.mp4"
    activity = await _parse(_parser({url: "video/mp4"}), _message(text=f"<{url}|clip>"))

    assert activity["object"]["type"] == "Video"
    assert activity["object"]["url"] == url


@pytest.mark.asyncio
async def test_parse_non_media_link_falls_back_to_note() -> None:
    url = "https://example.test/page"
    activity = await _parse(_parser({url: "text/html"}), _message(text=f"<{url}>"))

    assert activity["object"]["type"] == "Note"
    assert activity["object"]["content"] == f"<{url}>"


@pytest.mark.asyncio
async def test_parse_file_share_image() -> None:
    file_ = {
        "mimetype": "image/jpeg",
        "name": "photo.jpg",
        "permalink_public": "https://slack-files.test/photo.jpg",
        "thumb_1024": "https://slack-files.test/photo_1024.jpg",
        "initial_comment": {"comment": "look"},
    }
    parser = _parser()

    activity = await _parse(parser, _message(text="uploaded a file", file=file_))

    assert activity["object"] == {
        "content": "look",
        "id": "1355517523.000005",
        "mediaType": "image/jpeg",
        "name": "photo.jpg",
        "preview": "https://slack-files.test/photo_1024.jpg",
        "type": "Image",
        "url": "https://slack-files.test/photo.jpg",
    }
    assert parser.validate(activity) is not None


@pytest.mark.asyncio
async def test_parse_file_share_non_media_falls_back_to_note() -> None:
    file_ = {"mimetype": "application/pdf", "permalink_public": "https://x.test/a.pdf"}

    activity = await _parse(_parser(), _message(text="a pdf", file=file_))

    assert activity["object"]["type"] == "Note"
    assert activity["object"]["content"] == "a pdf"


def test_parse_file_initial_comment_list_and_missing() -> None:
    parser = _parser()
    base = {"mimetype": "video/mp4", "permalink_public": "https://x.test/v.mp4"}

    with_list = parser.parse_file({**base, "initial_comment": [{"comment": "first"}]})
    without = parser.parse_file(base)

    assert with_list["content"] == "first"
    assert with_list["type"] == "Video"
    assert without["content"] == ""
    assert "preview" not in without


@pytest.mark.asyncio
async def test_parse_interactive_message_adds_context() -> None:
    raw = _message(
        text="yes",
        subtype=INTERACTIVE_MESSAGE,
        callback_id="wopr_game",
        response_url="https://hooks.slack.test/actions/T1/1/abc",
    )
    parser = _parser()

    activity = await _parse(parser, raw)

    assert activity["object"]["context"] == {
        "content": "wopr_game#https://hooks.slack.test/actions/T1/1/abc",
        "name": "interactive_message_callback",
        "type": "Object",
    }
    assert parser.validate(activity) is not None
