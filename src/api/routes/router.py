"""Agregador de rotas do servidor de webhook.

Uso:
    from api.routes import create_api_router

    app.include_router(create_api_router(adapter.router))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter

from api.routes.health.router import router as health_router

if TYPE_CHECKING:
    from collections.abc import Iterable


def create_api_router(channel_routers: Iterable[APIRouter] = ()) -> APIRouter:
    """Cria router principal com health check e routers de canal.

    Args:
        channel_routers: Routers de webhook expostos pelos adapters.
    """
    api_router = APIRouter()
    api_router.include_router(health_router, tags=["health"])
    for channel_router in channel_routers:
        api_router.include_router(channel_router)
    return api_router
