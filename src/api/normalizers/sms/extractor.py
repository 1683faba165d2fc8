"""Extrator de payloads SMS (Twilio).

Estrutura típica (form-urlencoded):
- MessageSid, From, To, Body, NumMedia, MediaUrl0, MediaContentType0, ...
"""

from __future__ import annotations

from typing import Any


def extract_media(form: dict[str, Any]) -> list[tuple[str, str]]:
    """Lista (url, content_type) dos anexos MMS, na ordem do provider."""
    try:
        count = int(form.get("NumMedia") or 0)
    except (TypeError, ValueError):
        return []

    media: list[tuple[str, str]] = []
    for index in range(count):
        url = form.get(f"MediaUrl{index}")
        if not url:
            continue
        content_type = form.get(f"MediaContentType{index}") or ""
        media.append((url, content_type.lower()))
    return media
