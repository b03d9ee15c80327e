"""Tool for reading recent updates received by the Telegram bot."""

from __future__ import annotations

from typing import Any, Dict

from ...services import ServiceAPIError, ServiceContainer
from ..core import Tool, ToolParameter, to_json

DEFAULT_LIMIT = 10


class GetTelegramUpdatesTool(Tool):
    name = "get_telegram_updates"
    description = "Get recent messages from Telegram bot"
    parameters = [
        ToolParameter(
            name="limit",
            type="number",
            description="Number of updates to retrieve",
            required=False,
            default=DEFAULT_LIMIT,
        ),
    ]

    def __init__(self, services: ServiceContainer):
        self.services = services

    def execute(self, args: Dict[str, Any], **kwargs: Any) -> str:
        limit = args.get("limit")
        if limit is None:
            limit = DEFAULT_LIMIT
        try:
            limit = int(limit)
        except (TypeError, ValueError):
            raise ValueError("limit must be a number")
        try:
            data = self.services.telegram.get_updates(limit=limit)
        except ServiceAPIError as exc:
            return f"Error getting Telegram updates: {exc}"
        return f"Recent Telegram Updates:\n\n{to_json(data)}"
