"""Exceptions raised by the remote service clients."""

from __future__ import annotations

from typing import Optional


class ServiceAPIError(Exception):
    """Raised when a call to a remote API fails."""

    service = "remote API"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class N8nAPIError(ServiceAPIError):
    service = "n8n API"


class AirtableAPIError(ServiceAPIError):
    service = "Airtable API"


class TelegramAPIError(ServiceAPIError):
    service = "Telegram Bot API"
