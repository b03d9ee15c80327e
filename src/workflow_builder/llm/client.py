"""LLM completion helper."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any, Dict, List, Optional, Tuple

from ..config.settings import Settings, get_settings
from .env import get_llm_client, get_llm_model

logger = logging.getLogger("workflow_builder.llm")


def _extract_system(messages: List[Dict[str, Any]]) -> Tuple[str, List[Dict[str, Any]]]:
    system_parts = []
    rest: List[Dict[str, Any]] = []
    for msg in messages:
        if msg.get("role") == "system":
            content = msg.get("content", "")
            if isinstance(content, str):
                system_parts.append(content)
            elif isinstance(content, list):
                for block in content:
                    if isinstance(block, dict) and block.get("type") == "text":
                        system_parts.append(block.get("text", ""))
            continue
        rest.append(msg)
    return "\n\n".join(system_parts), rest


def _to_anthropic_messages(
    messages: List[Dict[str, Any]],
) -> Tuple[str, List[Dict[str, Any]]]:
    system, rest = _extract_system(messages)
    converted: List[Dict[str, Any]] = []
    for msg in rest:
        role = msg.get("role")
        content = msg.get("content", "")
        if role not in {"user", "assistant"}:
            logger.warning("Dropping message with unsupported role=%s", role)
            continue
        if isinstance(content, str):
            if content:
                converted.append({"role": role, "content": [{"type": "text", "text": content}]})
        elif isinstance(content, list):
            blocks = [
                {"type": "text", "text": part.get("text", "")}
                for part in content
                if isinstance(part, dict) and part.get("type") == "text" and part.get("text")
            ]
            if blocks:
                converted.append({"role": role, "content": blocks})
    return system, converted


def _response_text(message: Any) -> str:
    parts: List[str] = []
    for block in getattr(message, "content", None) or []:
        if isinstance(block, dict):
            btype, text = block.get("type"), block.get("text")
        else:
            btype, text = getattr(block, "type", None), getattr(block, "text", None)
        if btype == "text" and text:
            parts.append(text)
    return "".join(parts)


def _usage(message: Any) -> Dict[str, int]:
    usage = getattr(message, "usage", None)
    if usage is None:
        return {}
    payload: Dict[str, int] = {}
    for field in ("input_tokens", "output_tokens"):
        value = getattr(usage, field, None)
        if isinstance(value, int):
            payload[field] = value
    return payload


def call_llm(
    messages: List[Dict[str, Any]],
    *,
    max_tokens: Optional[int] = None,
    caller: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Run a single completion and return the reply text.

    Raises:
        LLMConfigError: if the API key or model is not configured.
        RuntimeError: if the model returns no text.
    """
    settings = settings or get_settings()
    client = get_llm_client(settings)
    system, converted = _to_anthropic_messages(messages)
    payload: Dict[str, Any] = {
        "model": get_llm_model(settings),
        "max_tokens": max_tokens or settings.llm_max_tokens,
        "messages": converted,
    }
    if system:
        payload["system"] = system

    request_id = uuid.uuid4().hex
    start = time.perf_counter()
    message = client.messages.create(**payload)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "LLM completion request_id=%s caller=%s model=%s ms=%.1f messages=%d usage=%s",
        request_id,
        caller or "unknown",
        payload["model"],
        elapsed_ms,
        len(messages),
        _usage(message),
    )
    text = _response_text(message)
    if not text:
        raise RuntimeError("LLM returned empty content.")
    return text
