"""Client construction for the optional LLM."""

from __future__ import annotations

import logging
from typing import Optional

from anthropic import Anthropic

from ..config.settings import Settings, get_settings

logger = logging.getLogger("workflow_builder.llm")


class LLMConfigError(RuntimeError):
    """Raised when LLM environment is missing or invalid."""


def get_llm_client(settings: Optional[Settings] = None) -> Anthropic:
    settings = settings or get_settings()
    if not settings.anthropic_api_key:
        raise LLMConfigError("Missing ANTHROPIC_API_KEY/API_KEY.")
    kwargs = {"api_key": settings.anthropic_api_key}
    if settings.anthropic_base_url:
        kwargs["base_url"] = settings.anthropic_base_url.strip().rstrip("/")
        logger.debug("Using LLM endpoint %s", kwargs["base_url"])
    return Anthropic(**kwargs)


def get_llm_model(settings: Optional[Settings] = None) -> str:
    settings = settings or get_settings()
    if not settings.anthropic_model:
        raise LLMConfigError("Missing ANTHROPIC_MODEL/CLAUDE_MODEL.")
    return settings.anthropic_model
