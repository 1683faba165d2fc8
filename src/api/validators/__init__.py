"""Validators — schemas Activity Streams e limites por canal.

Uso:
    from api.validators import validate_activity, validate_send

    activity = validate_activity(parsed)      # inbound ("activity")
    request = validate_send(data)             # outbound ("send")
    check_channel_limits("kik", request)      # limites da plataforma
"""

from api.validators.activity import validate_activity, validate_send
from api.validators.limits import CHANNEL_LIMITS, ChannelLimits, check_channel_limits

__all__ = [
    "CHANNEL_LIMITS",
    "ChannelLimits",
    "check_channel_limits",
    "validate_activity",
    "validate_send",
]
