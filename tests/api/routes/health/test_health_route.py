"""Testes do endpoint de health."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from starlette.requests import Request

from api.routes.health.router import health_check


def _build_request_with_state(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/health",
        "raw_path": b"/health",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


@pytest.mark.asyncio
async def test_health_reports_connected_adapter() -> None:
    adapter = SimpleNamespace(service_name=lambda: "kik", is_connected=True)

    response = await health_check(_build_request_with_state(SimpleNamespace(adapter=adapter)))

    assert response.status == "healthy"
    assert response.service == "kik"
    assert response.connected is True


@pytest.mark.asyncio
async def test_health_without_adapter() -> None:
    response = await health_check(_build_request_with_state(SimpleNamespace()))

    assert response.service == "unknown"
    assert response.connected is False
