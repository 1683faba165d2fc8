"""Testes do WebHookServer (app FastAPI montada, sem subir uvicorn)."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.testclient import TestClient

from app.infra.webhook_server import DEFAULT_HOST, DEFAULT_PORT, WebHookServer


def test_mounts_router_and_health() -> None:
    router = APIRouter()

    @router.post("/hook")
    async def hook() -> dict[str, bool]:
        return {"received": True}

    server = WebHookServer({"host": "0.0.0.0", "port": 9000}, router)
    client = TestClient(server.app)

    assert server.host == "0.0.0.0"
    assert server.port == 9000
    assert not server.is_running
    assert client.post("/hook").json() == {"received": True}
    health = client.get("/health").json()
    assert health["status"] == "healthy"
    assert health["service"] == "unknown"
    assert health["connected"] is False


def test_defaults() -> None:
    server = WebHookServer({}, APIRouter())

    assert server.host == DEFAULT_HOST
    assert server.port == DEFAULT_PORT
