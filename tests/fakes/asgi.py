"""Cliente httpx em processo para rotas de webhook dos adapters."""

from __future__ import annotations

import httpx
from fastapi import APIRouter, FastAPI


def asgi_client(router: APIRouter) -> httpx.AsyncClient:
    """AsyncClient ligado a uma app FastAPI com o router do adapter."""
    app = FastAPI()
    app.include_router(router)
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://adapter.test")
