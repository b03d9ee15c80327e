"""Telegram Bot API client."""

from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from .errors import TelegramAPIError
from .http import DEFAULT_TIMEOUT, JSONAPIClient

TELEGRAM_API_BASE = "https://api.telegram.org"
DEFAULT_PARSE_MODE = "HTML"


class TelegramClient(JSONAPIClient):
    """Sends messages and polls updates for a single bot."""

    error_class = TelegramAPIError

    def __init__(
        self,
        bot_token: str,
        *,
        api_base: str = TELEGRAM_API_BASE,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        super().__init__(
            f"{api_base.rstrip('/')}/bot{bot_token}",
            timeout=timeout,
            session=session,
        )
        self._bot_token = bot_token

    def _redact(self, text: str) -> str:
        if not self._bot_token:
            return text
        return text.replace(self._bot_token, "<redacted>")

    def _call(
        self,
        method: str,
        api_method: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json_body: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        data = self._request(method, f"/{api_method}", params=params, json_body=json_body)
        if isinstance(data, dict) and data.get("ok") is False:
            raise TelegramAPIError(
                data.get("description") or f"Telegram {api_method} failed",
                status_code=data.get("error_code"),
            )
        return data

    def send_message(
        self,
        chat_id: str,
        text: str,
        parse_mode: str = DEFAULT_PARSE_MODE,
    ) -> Dict[str, Any]:
        payload = {
            "chat_id": chat_id,
            "text": text,
            "parse_mode": parse_mode,
        }
        return self._call("POST", "sendMessage", json_body=payload)

    def get_updates(self, limit: int = 10) -> Dict[str, Any]:
        return self._call("GET", "getUpdates", params={"limit": limit})
