"""Settings específicas de SMS (Twilio)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

TWILIO_API_BASE_URL: str = "https://api.twilio.com/2010-04-01"


@dataclass(frozen=True)
class SmsSettings:
    """Configurações do canal SMS.

    Attributes:
        account_sid: Account SID (Twilio)
        auth_token: Auth Token (Twilio)
        from_number: Número de origem (E.164)
        api_base_url: URL base da API REST
        request_timeout_seconds: Timeout para requisições
        max_retries: Máximo de tentativas em caso de erro
    """

    account_sid: str = ""
    auth_token: str = ""
    from_number: str = ""
    api_base_url: str = TWILIO_API_BASE_URL
    request_timeout_seconds: float = 30.0
    max_retries: int = 3

    @property
    def messages_endpoint(self) -> str:
        """URL de envio de mensagens da conta."""
        if not self.account_sid:
            raise ValueError("account_sid é obrigatório")
        return f"{self.api_base_url}/Accounts/{self.account_sid}/Messages.json"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de SMS."""
        errors: list[str] = []
        if not self.account_sid:
            errors.append("SMS_ACCOUNT_SID não configurado")
        if not self.auth_token:
            errors.append("SMS_AUTH_TOKEN não configurado")
        if not self.from_number:
            errors.append("SMS_FROM_NUMBER não configurado")
        return errors


def _load_from_env() -> SmsSettings:
    return SmsSettings(
        account_sid=os.getenv("SMS_ACCOUNT_SID", ""),
        auth_token=os.getenv("SMS_AUTH_TOKEN", ""),
        from_number=os.getenv("SMS_FROM_NUMBER", ""),
        api_base_url=os.getenv("SMS_API_BASE_URL", TWILIO_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("SMS_REQUEST_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("SMS_MAX_RETRIES", "3")),
    )


@lru_cache(maxsize=1)
def get_sms_settings() -> SmsSettings:
    """Retorna instância cacheada de SmsSettings."""
    return _load_from_env()
