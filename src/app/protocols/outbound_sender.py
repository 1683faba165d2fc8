"""Protocolos de envio outbound por plataforma."""

from __future__ import annotations

from typing import Any, Protocol


class PlatformClientProtocol(Protocol):
    """Contrato mínimo de cliente de plataforma usado pelos adapters."""

    async def send(self, payload: dict[str, Any]) -> dict[str, Any]: ...

    async def get_user_profile(self, user_id: str) -> dict[str, Any]: ...
