"""Tool for sending a Telegram message through the bot."""

from __future__ import annotations

from typing import Any, Dict

from ...services import ServiceAPIError, ServiceContainer
from ...services.telegram_client import DEFAULT_PARSE_MODE
from ..core import Tool, ToolParameter, require_arg, to_json


class SendTelegramMessageTool(Tool):
    name = "send_telegram_message"
    description = "Send a message via Telegram bot"
    parameters = [
        ToolParameter(
            name="chat_id",
            type="string",
            description="Telegram chat ID to send message to",
        ),
        ToolParameter(
            name="message",
            type="string",
            description="Message text to send",
        ),
        ToolParameter(
            name="parse_mode",
            type="string",
            description="Message formatting (HTML, Markdown)",
            required=False,
            default=DEFAULT_PARSE_MODE,
        ),
    ]

    def __init__(self, services: ServiceContainer):
        self.services = services

    def execute(self, args: Dict[str, Any], **kwargs: Any) -> str:
        chat_id = str(require_arg(args, "chat_id"))
        message = require_arg(args, "message")
        parse_mode = args.get("parse_mode") or DEFAULT_PARSE_MODE
        try:
            data = self.services.telegram.send_message(chat_id, message, parse_mode=parse_mode)
        except ServiceAPIError as exc:
            return f"Error sending Telegram message: {exc}"
        return f"Message sent successfully to Telegram!\n\nResponse: {to_json(data)}"
