"""Conversão de timestamps de plataforma para segundos Unix (int)."""

from __future__ import annotations

import time


def now_seconds() -> int:
    return int(time.time())


def seconds_from_slack_ts(ts: str | float | None) -> int | None:
    """Converte ts Slack ("1503435956.000247") descartando a fração."""
    if ts is None or ts == "":
        return None
    try:
        return int(str(ts).split(".")[0])
    except ValueError:
        return None


def seconds_from_millis(value: int | str | None) -> int | None:
    """Converte epoch em milissegundos (Kik, Messenger) para segundos."""
    if value is None or value == "":
        return None
    try:
        return int(value) // 1000
    except (TypeError, ValueError):
        return None
