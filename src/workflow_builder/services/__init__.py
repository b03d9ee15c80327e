"""Remote service clients and the container that wires them to settings."""

from __future__ import annotations

import logging
from typing import Optional

from ..config.settings import Settings, get_settings
from .airtable_client import AirtableClient
from .errors import AirtableAPIError, N8nAPIError, ServiceAPIError, TelegramAPIError
from .n8n_client import N8nClient
from .telegram_client import TelegramClient

logger = logging.getLogger("workflow_builder.services")


class ServiceContainer:
    """Holds settings and lazily builds one client per remote service."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        n8n: Optional[N8nClient] = None,
        airtable: Optional[AirtableClient] = None,
        telegram: Optional[TelegramClient] = None,
    ):
        self.settings = settings or get_settings()
        self._n8n = n8n
        self._airtable = airtable
        self._telegram = telegram

    @property
    def n8n(self) -> N8nClient:
        if self._n8n is None:
            if not self.settings.n8n_api_key:
                logger.warning("N8N_API_KEY is not set; n8n will reject requests")
            self._n8n = N8nClient(
                self.settings.n8n_base_url,
                self.settings.n8n_api_key,
                timeout=self.settings.http_timeout,
            )
        return self._n8n

    @property
    def airtable(self) -> AirtableClient:
        if self._airtable is None:
            if not self.settings.airtable_api_key or not self.settings.airtable_base_id:
                logger.warning("AIRTABLE_API_KEY/AIRTABLE_BASE_ID not set")
            self._airtable = AirtableClient(
                self.settings.airtable_api_key,
                self.settings.airtable_base_id,
                api_base=self.settings.airtable_api_base,
                timeout=self.settings.http_timeout,
            )
        return self._airtable

    @property
    def telegram(self) -> TelegramClient:
        if self._telegram is None:
            if not self.settings.telegram_bot_token:
                logger.warning("TELEGRAM_BOT_TOKEN is not set")
            self._telegram = TelegramClient(
                self.settings.telegram_bot_token,
                api_base=self.settings.telegram_api_base,
                timeout=self.settings.http_timeout,
            )
        return self._telegram


__all__ = [
    "AirtableAPIError",
    "AirtableClient",
    "N8nAPIError",
    "N8nClient",
    "ServiceAPIError",
    "ServiceContainer",
    "TelegramAPIError",
    "TelegramClient",
]
