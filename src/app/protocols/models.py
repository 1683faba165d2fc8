"""Modelos canônicos (pydantic) do envelope Activity Streams.

Dois contratos:
- Activity: evento inbound emitido por `Adapter.listen()`
- SendActivity: requisição outbound aceita por `Adapter.send()`

Os modelos só validam; o pipeline trafega dicts limpos (sem None)
para manter o formato JSON-LD original (`@context`, `mediaType`).
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.constants.activity import AS_CONTEXT, ObjectType


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Generator(_WireModel):
    """Serviço (instância de adapter) que gerou a atividade."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    type: Literal["Service"]


class Actor(_WireModel):
    """Autor da mensagem."""

    id: str = Field(..., min_length=1)
    name: str | None = None
    type: Literal["Person", "Application"]


class Target(_WireModel):
    """Destino da mensagem inbound (conversa direta ou grupo)."""

    id: str = Field(..., min_length=1)
    name: str | None = None
    type: Literal["Person", "Group"]


class ObjectContext(_WireModel):
    """Contexto de callback interativo (ex: `callback_id#response_url`)."""

    type: Literal["Object"]
    name: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)


def _check_content_requirements(object_type: str, content: str | None, url: str | None) -> None:
    if object_type == ObjectType.NOTE and not content:
        raise ValueError("Note requires content")
    if object_type in (ObjectType.IMAGE, ObjectType.VIDEO) and not url:
        raise ValueError(f"{object_type} requires url")


class ActivityObject(_WireModel):
    """Objeto da atividade inbound: Note, Image ou Video."""

    id: str = Field(..., min_length=1)
    type: Literal["Note", "Image", "Video"]
    content: str | None = None
    url: str | None = None
    media_type: str | None = Field(None, alias="mediaType")
    name: str | None = None
    preview: str | None = None
    context: ObjectContext | None = None

    @model_validator(mode="after")
    def _check_required_by_type(self) -> ActivityObject:
        _check_content_requirements(self.type, self.content, self.url)
        return self


class Activity(_WireModel):
    """Envelope inbound completo."""

    context: Literal["https://www.w3.org/ns/activitystreams"] = Field(..., alias="@context")
    type: Literal["Create"]
    generator: Generator
    published: int = Field(..., ge=0)
    actor: Actor
    target: Target
    object: ActivityObject


class Recipient(_WireModel):
    """Destinatário outbound; exige `id` ou `name`."""

    id: str | None = None
    name: str | None = None
    type: Literal["Person", "Group"]

    @model_validator(mode="after")
    def _check_identity(self) -> Recipient:
        if not self.id and not self.name:
            raise ValueError("to.id or to.name is required")
        return self


class Attachment(_WireModel):
    """Anexo outbound (botões, links, mídia extra)."""

    type: Literal["Button", "Link", "Image", "Video"]
    name: str | None = None
    url: str | None = None
    content: str | None = None
    media_type: str | None = Field(None, alias="mediaType")


class SendObject(_WireModel):
    """Objeto outbound: Note, Image ou Video com anexos opcionais."""

    type: ObjectType
    id: str | None = None
    content: str | None = None
    url: str | None = None
    name: str | None = None
    preview: str | None = None
    media_type: str | None = Field(None, alias="mediaType")
    context: ObjectContext | None = None
    attachment: list[Attachment] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_required_by_type(self) -> SendObject:
        _check_content_requirements(self.type, self.content, self.url)
        return self


class SendActivity(_WireModel):
    """Requisição outbound completa."""

    context: str = Field(AS_CONTEXT, alias="@context")
    type: Literal["Create"] = "Create"
    generator: Generator | None = None
    to: Recipient
    object: SendObject
