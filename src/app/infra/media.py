"""Inspeção de mídia remota (mimetype) para classificar anexos.

Faz HEAD na URL e usa o Content-Type retornado. Quando a plataforma não
responde ou devolve um tipo genérico, cai para a extensão da URL.
"""

from __future__ import annotations

import logging
import mimetypes
from dataclasses import dataclass
from urllib.parse import urlparse

import httpx

logger = logging.getLogger(__name__)

DEFAULT_MIMETYPE = "application/octet-stream"
_GENERIC_MIMETYPES = frozenset({DEFAULT_MIMETYPE, "binary/octet-stream"})


@dataclass(frozen=True, slots=True)
class FileInfo:
    """Resultado da inspeção de uma URL de mídia."""

    url: str
    mimetype: str
    size: int | None = None

    @property
    def is_image(self) -> bool:
        return self.mimetype.startswith("image/")

    @property
    def is_video(self) -> bool:
        return self.mimetype.startswith("video/")


def is_url(value: object) -> bool:
    """True para URLs http(s) absolutas com host."""
    if not isinstance(value, str) or not value:
        return False
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def guess_mimetype(url: str) -> str:
    """Deduz mimetype pela extensão do path da URL."""
    guessed, _ = mimetypes.guess_type(urlparse(url).path)
    return guessed or DEFAULT_MIMETYPE


async def file_info(
    url: str,
    *,
    timeout_seconds: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FileInfo:
    """Descobre mimetype (e tamanho, se informado) de uma URL remota.

    Args:
        url: URL http(s) da mídia
        timeout_seconds: Timeout do HEAD
        transport: Transport httpx opcional (testes)

    Returns:
        FileInfo com mimetype nunca vazio.
    """
    try:
        async with httpx.AsyncClient(
            timeout=timeout_seconds,
            follow_redirects=True,
            transport=transport,
        ) as client:
            response = await client.head(url)
            response.raise_for_status()
    except httpx.HTTPError as exc:
        logger.warning("file_info_head_failed", extra={"error_type": type(exc).__name__})
        return FileInfo(url=url, mimetype=guess_mimetype(url))

    content_type = response.headers.get("content-type", "").split(";")[0].strip().lower()
    if not content_type or content_type in _GENERIC_MIMETYPES:
        content_type = guess_mimetype(url)

    content_length = response.headers.get("content-length")
    size = int(content_length) if content_length and content_length.isdigit() else None
    return FileInfo(url=url, mimetype=content_type, size=size)
