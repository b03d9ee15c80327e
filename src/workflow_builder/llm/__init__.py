"""LLM client entrypoints."""

from .client import call_llm
from .env import LLMConfigError, get_llm_client, get_llm_model

__all__ = [
    "LLMConfigError",
    "call_llm",
    "get_llm_client",
    "get_llm_model",
]
