"""Agregador de settings dos adapters.

Re-exporta settings e getters de cada canal. Um arquivo por canal
para isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.base import BaseSettings, Environment, get_base_settings
from config.settings.kik import KIK_API_BASE_URL, KikSettings, get_kik_settings
from config.settings.messenger import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    MessengerSettings,
    get_messenger_settings,
)
from config.settings.slack import SLACK_API_BASE_URL, SlackSettings, get_slack_settings
from config.settings.sms import TWILIO_API_BASE_URL, SmsSettings, get_sms_settings

__all__ = [
    "GRAPH_API_BASE_URL",
    "GRAPH_API_VERSION",
    "KIK_API_BASE_URL",
    "SLACK_API_BASE_URL",
    "TWILIO_API_BASE_URL",
    "BaseSettings",
    "Environment",
    "KikSettings",
    "MessengerSettings",
    "SlackSettings",
    "SmsSettings",
    "get_base_settings",
    "get_kik_settings",
    "get_messenger_settings",
    "get_slack_settings",
    "get_sms_settings",
]
