"""Logging helpers.

stdout carries the stdio MCP transport, so handlers only ever write to files
(and optionally stderr).
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import os
import re
import sys
from pathlib import Path
from typing import Optional

from .paths import data_dir

_CONFIGURED = False

CHANNELS = (
    "tool_calls",
    "llm",
    "services",
)

# Telegram puts the bot token in the URL path; urllib3 logs that path at DEBUG.
_BOT_TOKEN_RE = re.compile(r"bot\d+:[A-Za-z0-9_-]+")


class BotTokenFilter(logging.Filter):
    """Mask Telegram bot tokens in every record, whichever library logged it."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = _BOT_TOKEN_RE.sub("bot<redacted>", message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True


def setup_logging(log_path: Optional[Path] = None) -> Path:
    """Configure logging to per-channel file handlers."""
    global _CONFIGURED
    prefix = os.environ.get("WORKFLOW_BUILDER_LOG_PREFIX", "mcp").strip() or "mcp"
    if _CONFIGURED:
        return _resolve_log_path(log_path, prefix)

    resolved = _resolve_log_path(log_path, prefix)
    resolved.parent.mkdir(parents=True, exist_ok=True)

    # Fresh logs per run.
    for path in [resolved] + [_channel_path(resolved, prefix, c) for c in CHANNELS]:
        try:
            if path.exists():
                path.unlink()
        except OSError:
            pass

    level_name = os.environ.get("WORKFLOW_BUILDER_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    rotate_bytes = int(os.environ.get("WORKFLOW_BUILDER_LOG_ROTATE_BYTES", "0"))
    backup_count = int(os.environ.get("WORKFLOW_BUILDER_LOG_BACKUP_COUNT", "3"))

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s"
    )
    token_filter = BotTokenFilter()

    root_handler = _build_handler(
        resolved,
        rotate_bytes=rotate_bytes,
        backup_count=backup_count,
    )
    root_handler.setFormatter(formatter)
    root_handler.addFilter(token_filter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(root_handler)

    stderr_handler: Optional[logging.Handler] = None
    if os.environ.get("WORKFLOW_BUILDER_LOG_STDERR", "").lower() in {"1", "true", "yes"}:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(formatter)
        stderr_handler.addFilter(token_filter)
        root.addHandler(stderr_handler)

    for channel in CHANNELS:
        handler = _build_handler(
            _channel_path(resolved, prefix, channel),
            rotate_bytes=rotate_bytes,
            backup_count=backup_count,
        )
        handler.setFormatter(formatter)
        handler.addFilter(token_filter)
        _attach_logger(f"workflow_builder.{channel}", level, handler, stderr_handler)

    _CONFIGURED = True
    logging.getLogger(__name__).info("Logging initialized: %s", resolved)
    return resolved


def _resolve_log_path(log_path: Optional[Path], prefix: str) -> Path:
    if log_path is not None:
        return log_path
    env_path = os.environ.get("WORKFLOW_BUILDER_LOG_FILE")
    if env_path:
        return Path(env_path)
    return data_dir() / "logs" / f"{prefix}.log"


def _channel_path(resolved: Path, prefix: str, channel: str) -> Path:
    return resolved.parent / f"{prefix}_{channel}.log"


def _attach_logger(
    name: str,
    level: int,
    handler: logging.Handler,
    stderr_handler: Optional[logging.Handler] = None,
) -> None:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.addHandler(handler)
    if stderr_handler is not None:
        logger.addHandler(stderr_handler)
    logger.propagate = False


def _build_handler(path: Path, *, rotate_bytes: int, backup_count: int) -> logging.Handler:
    if rotate_bytes > 0:
        return RotatingFileHandler(
            path,
            maxBytes=rotate_bytes,
            backupCount=backup_count,
            encoding="utf-8",
            mode="w",
        )
    return logging.FileHandler(
        path,
        encoding="utf-8",
        mode="w",
    )
