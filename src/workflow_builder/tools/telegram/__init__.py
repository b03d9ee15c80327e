"""Telegram bot tools."""

from .get_updates import GetTelegramUpdatesTool
from .send_message import SendTelegramMessageTool

__all__ = ["GetTelegramUpdatesTool", "SendTelegramMessageTool"]
