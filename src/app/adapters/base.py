"""Adapter base: sessão com a plataforma, webhook e pipeline de parsing.

Fluxo inbound:
    webhook → _emit → user() → Parser.normalize → Parser.parse
    → Parser.validate → fila de cada listen() ativo (sem ouvinte: descartado)

Fluxo outbound:
    send() → schema `send` → limites do canal → builder nativo → cliente HTTP
"""

from __future__ import annotations

import asyncio
import uuid
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from fastapi import APIRouter

from api.validators import check_channel_limits, validate_send
from app.infra.http import HttpClientConfig, HttpError
from app.infra.webhook_server import WebHookServer
from config.logging import get_logger, log_dropped_event
from utils.errors import CredentialsError, NotSupportedError, PlatformApiError, SessionError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from api.normalizers.shared import BaseParser, FileInfoFetcher
    from app.protocols.models import SendActivity
    from app.protocols.outbound_sender import PlatformClientProtocol

_CLOSED = object()


def with_trailing_slash(url: str) -> str:
    return url if url.endswith("/") else f"{url}/"


class BaseAdapter(ABC):
    """Base dos adapters de canal.

    Args:
        service_id: ID da instância (uuid4 se omitido)
        token: Credencial principal da plataforma; string vazia é erro
        webhook_url: URL pública do webhook (normalizada com barra final)
        http: Opções do WebHookServer embutido ({"host", "port"}); sem
            elas, o router é exposto por get_router() para montagem externa
        log_level: Nível de log do adapter e do parser
        client: Cliente de plataforma já construído (testes / injeção)
        client_config: Timeout/retries do cliente HTTP criado no connect()
        fetch_file_info: Inspeção de mídia usada pelo parser

    Raises:
        CredentialsError: Se `token` for string vazia.
    """

    channel: ClassVar[str]

    def __init__(
        self,
        *,
        service_id: str | None = None,
        token: str | None = None,
        webhook_url: str | None = None,
        http: dict[str, Any] | None = None,
        log_level: str = "info",
        client: PlatformClientProtocol | None = None,
        client_config: HttpClientConfig | None = None,
        fetch_file_info: FileInfoFetcher | None = None,
    ) -> None:
        self._service_id = service_id or str(uuid.uuid4())
        self.log_level = log_level
        self.token = token
        if self.token == "":
            raise CredentialsError("Token should exist.")

        self.webhook_url = with_trailing_slash(webhook_url) if webhook_url else None
        self.logger = get_logger(type(self).__module__, log_level)
        self.parser = self._create_parser(fetch_file_info)

        self._client: PlatformClientProtocol | None = None
        self._injected_client = client
        self.client_config = client_config
        self._connected = False
        self._listeners: list[asyncio.Queue[Any]] = []
        self._store_users: dict[str, dict[str, Any]] = {}

        self.router = APIRouter()
        self._register_routes(self.router)
        self.webhook_server = (
            WebHookServer(http, self.router, log_level, owner=self) if http else None
        )

    @classmethod
    @abstractmethod
    def from_settings(cls, settings: Any, **options: Any) -> BaseAdapter:
        """Constrói o adapter a partir das settings do canal."""

    # Identidade -------------------------------------------------------

    def service_name(self) -> str:
        return self.channel

    def service_id(self) -> str:
        return self._service_id

    @property
    def is_connected(self) -> bool:
        return self._connected

    def get_router(self) -> APIRouter | None:
        """Router para montagem externa; None quando há servidor embutido."""
        if self.webhook_server:
            return None
        return self.router

    async def users(self) -> dict[str, dict[str, Any]]:
        """Perfis de usuário conhecidos (cache em memória)."""
        return dict(self._store_users)

    async def channels(self) -> dict[str, dict[str, Any]]:
        raise NotSupportedError("Not supported")

    # Ciclo de vida ----------------------------------------------------

    async def connect(self) -> dict[str, str]:
        """Abre a sessão com a plataforma e sobe o webhook (idempotente).

        Raises:
            CredentialsError: Se faltar alguma credencial obrigatória.
        """
        if self._connected:
            return self._status("connected")
        if not self._has_credentials():
            raise CredentialsError("Credentials should exist.")

        self._client = self._injected_client or self._create_client()
        if self.webhook_server:
            await self.webhook_server.listen()

        self._connected = True
        self.logger.info(
            "adapter_connected",
            extra={"channel": self.channel, "service_id": self._service_id},
        )
        return self._status("connected")

    async def disconnect(self) -> None:
        """Derruba o webhook e encerra todos os iteradores de listen()."""
        self._connected = False
        if self.webhook_server:
            await self.webhook_server.close()
        listeners, self._listeners = self._listeners, []
        for queue in listeners:
            queue.put_nowait(_CLOSED)
        self.logger.info(
            "adapter_disconnected",
            extra={"channel": self.channel, "service_id": self._service_id},
        )

    def listen(self) -> AsyncIterator[dict[str, Any]]:
        """Iterador assíncrono das atividades validadas.

        Cada chamada tem fila própria, registrada já aqui: recebe os eventos
        que chegarem a partir deste ponto, até disconnect().

        Raises:
            SessionError: Se o adapter não estiver conectado.
        """
        if not self._connected or self._client is None:
            raise SessionError("No session found.")
        queue: asyncio.Queue[Any] = asyncio.Queue()
        self._listeners.append(queue)
        return self._iter_activities(queue)

    async def _iter_activities(self, queue: asyncio.Queue[Any]) -> AsyncIterator[dict[str, Any]]:
        try:
            await self._on_listen()
            while True:
                item = await queue.get()
                if item is _CLOSED:
                    return
                yield item
        finally:
            if queue in self._listeners:
                self._listeners.remove(queue)

    async def _on_listen(self) -> None:
        """Gancho executado ao iniciar o consumo (ex: registrar webhook)."""

    # Inbound ----------------------------------------------------------

    async def _emit(self, raw: dict[str, Any], user_key: str | None) -> dict[str, Any] | None:
        """Executa o pipeline e entrega o resultado válido a cada listen() ativo."""
        user_info = await self._safe_user(user_key)
        normalized = await self._normalize(raw, user_info)
        parsed = await self.parser.parse(normalized)
        if parsed is None:
            log_dropped_event(self.logger, self.channel, "parse")
            return None
        validated = self.parser.validate(parsed)
        if validated is None:
            log_dropped_event(self.logger, self.channel, "validate")
            return None
        if not self._listeners:
            log_dropped_event(self.logger, self.channel, "dispatch", "no_listener")
            return None
        for queue in self._listeners:
            queue.put_nowait(validated)
        return validated

    async def _normalize(
        self, raw: dict[str, Any], user_info: dict[str, Any] | None
    ) -> dict[str, Any]:
        return self.parser.normalize(raw, user_info)

    async def _safe_user(self, key: str | None) -> dict[str, Any] | None:
        """Perfil do usuário; falhas de plataforma viram None (sem perfil)."""
        if not key:
            return None
        try:
            return await self.user(key)
        except (PlatformApiError, HttpError) as exc:
            self.logger.warning(
                "user_profile_unavailable",
                extra={"channel": self.channel, "error_type": type(exc).__name__},
            )
            return None

    async def user(self, key: str, cache: bool = True) -> dict[str, Any]:
        """Perfil do usuário, com cache em memória.

        Raises:
            SessionError: Se chamado antes de connect().
        """
        self._require_client()
        if cache and key in self._store_users:
            return self._store_users[key]

        profile = await self._fetch_user(key)
        self._store_users[key] = profile
        return profile

    async def _fetch_user(self, key: str) -> dict[str, Any]:
        return await self._require_client().get_user_profile(key)

    def _require_client(self) -> PlatformClientProtocol:
        if self._client is None:
            raise SessionError("Session should be initialized before.")
        return self._client

    async def _process_safe(self, raw: dict[str, Any], user_key: str | None) -> None:
        """Pipeline sem propagar exceções para o webhook (evento descartado)."""
        try:
            await self._emit(raw, user_key)
        except Exception:
            self.logger.exception("inbound_processing_failed", extra={"channel": self.channel})

    # Outbound ---------------------------------------------------------

    async def send(self, data: dict[str, Any]) -> dict[str, str]:
        """Valida e envia uma atividade outbound.

        Raises:
            ValidationError: Se `data` não respeita o schema `send`.
            UnsupportedMessageError: Se o objeto não for Note, Image ou Video.
            SessionError: Se chamado antes de connect().
        """
        self.logger.debug("sending", extra={"channel": self.channel})
        activity = validate_send(data)
        check_channel_limits(self.channel, activity)
        client = self._require_client()

        await self._deliver(client, activity)
        return self._status("sent")

    async def _deliver(self, client: PlatformClientProtocol, activity: SendActivity) -> None:
        await client.send(self._build_payload(activity))

    def _status(self, status_type: str) -> dict[str, str]:
        return {"type": status_type, "serviceID": self._service_id}

    # Específico por canal ---------------------------------------------

    @abstractmethod
    def _create_parser(self, fetch_file_info: FileInfoFetcher | None) -> BaseParser:
        """Instancia o parser do canal."""

    @abstractmethod
    def _create_client(self) -> PlatformClientProtocol:
        """Instancia o cliente HTTP da plataforma."""

    @abstractmethod
    def _has_credentials(self) -> bool:
        """True quando todas as credenciais obrigatórias existem."""

    @abstractmethod
    def _register_routes(self, router: APIRouter) -> None:
        """Registra as rotas de webhook do canal."""

    @abstractmethod
    def _build_payload(self, activity: SendActivity) -> dict[str, Any]:
        """Converte a atividade outbound no payload nativo."""
