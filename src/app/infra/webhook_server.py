"""Servidor HTTP genérico para o router de webhook de um adapter.

Encapsula FastAPI + uvicorn rodando em task asyncio de fundo, para que
`Adapter.connect()` possa subir o listener sem bloquear o chamador.

Uso:
    server = WebHookServer({"host": "0.0.0.0", "port": 8080}, adapter.router)
    await server.listen()
    ...
    await server.close()
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import uvicorn
from fastapi import FastAPI

from api.routes import create_api_router

if TYPE_CHECKING:
    from fastapi import APIRouter

logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


class WebHookServer:
    """Listener HTTP que expõe `/health` e as rotas do adapter."""

    def __init__(
        self,
        options: dict[str, Any],
        router: APIRouter,
        log_level: str | None = None,
        owner: Any | None = None,
    ) -> None:
        self.host = str(options.get("host") or DEFAULT_HOST)
        self.port = int(options.get("port") or DEFAULT_PORT)
        self._log_level = (log_level or "info").lower()

        self.app = FastAPI(title="chat-activity-adapters webhook", docs_url=None, redoc_url=None)
        self.app.state.adapter = owner
        self.app.include_router(create_api_router([router]))

        self._server: uvicorn.Server | None = None
        self._task: asyncio.Task[None] | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def listen(self) -> None:
        """Sobe o uvicorn em background (idempotente)."""
        if self.is_running:
            return
        config = uvicorn.Config(
            self.app,
            host=self.host,
            port=self.port,
            log_level=self._log_level,
            lifespan="off",
        )
        self._server = uvicorn.Server(config)
        self._task = asyncio.create_task(self._server.serve())
        logger.info("webhook_server_listening", extra={"host": self.host, "port": self.port})

    async def close(self) -> None:
        """Sinaliza shutdown ao uvicorn e aguarda a task terminar."""
        if self._server is None or self._task is None:
            return
        self._server.should_exit = True
        await self._task
        self._server = None
        self._task = None
        logger.info("webhook_server_closed", extra={"host": self.host, "port": self.port})
