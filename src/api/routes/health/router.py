"""Endpoint de health check do servidor de webhook."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    connected: bool
    timestamp: str


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness: informa serviço e se o adapter dono do servidor está conectado."""
    adapter = getattr(request.app.state, "adapter", None)
    return HealthResponse(
        status="healthy",
        service=adapter.service_name() if adapter is not None else "unknown",
        connected=bool(adapter is not None and adapter.is_connected),
        timestamp=datetime.now(UTC).isoformat(),
    )
