"""Limites de conteúdo outbound por plataforma."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.constants.activity import AttachmentType
from app.protocols.validator import ValidationError

if TYPE_CHECKING:
    from app.protocols.models import SendActivity


@dataclass(frozen=True, slots=True)
class ChannelLimits:
    """Limites aplicados antes de montar o payload nativo."""

    max_text_length: int
    max_buttons: int
    max_button_text_length: int


CHANNEL_LIMITS: dict[str, ChannelLimits] = {
    "kik": ChannelLimits(max_text_length=5000, max_buttons=20, max_button_text_length=200),
    "slack": ChannelLimits(max_text_length=40000, max_buttons=5, max_button_text_length=75),
    "messenger": ChannelLimits(max_text_length=2000, max_buttons=3, max_button_text_length=20),
    "sms": ChannelLimits(max_text_length=1600, max_buttons=0, max_button_text_length=0),
}


def check_channel_limits(channel: str, activity: SendActivity) -> None:
    """Valida limites de texto e botões do canal.

    Botões excedentes em canais sem suporte (SMS) não são erro: são
    descartados pelo builder. Apenas excesso em canais com suporte falha.

    Raises:
        ValidationError: Se algum limite for excedido.
    """
    limits = CHANNEL_LIMITS.get(channel)
    if limits is None:
        return

    content = activity.object.content or ""
    if len(content) > limits.max_text_length:
        raise ValidationError(
            f"content exceeds maximum length of {limits.max_text_length} characters"
        )

    if not limits.max_buttons:
        return

    buttons = [a for a in activity.object.attachment if a.type == AttachmentType.BUTTON]
    if len(buttons) > limits.max_buttons:
        raise ValidationError(f"maximum of {limits.max_buttons} buttons exceeded")

    for button in buttons:
        label = button.name or button.content or ""
        if len(label) > limits.max_button_text_length:
            raise ValidationError(
                f"button text exceeds {limits.max_button_text_length} characters"
            )
