"""Application settings.

All configuration is sourced from environment variables (and optionally `.env`).
Credentials default to empty strings: a missing key is reported by the remote
service when a tool is called, not at startup.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_TRANSPORT_ALIASES = {
    "stdio": "stdio",
    "sse": "sse",
    "streamable-http": "streamable-http",
    "http": "streamable-http",
    "streamable": "streamable-http",
}


class Settings(BaseSettings):
    """Typed environment-backed settings for the workflow builder."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # n8n
    n8n_base_url: str = Field(default="http://localhost:5678", alias="N8N_BASE_URL")
    n8n_api_key: str = Field(default="", alias="N8N_API_KEY")

    # Airtable
    airtable_api_key: str = Field(default="", alias="AIRTABLE_API_KEY")
    airtable_base_id: str = Field(default="", alias="AIRTABLE_BASE_ID")
    airtable_api_base: str = Field(
        default="https://api.airtable.com", alias="AIRTABLE_API_BASE"
    )

    # Telegram
    telegram_bot_token: str = Field(default="", alias="TELEGRAM_BOT_TOKEN")
    telegram_api_base: str = Field(
        default="https://api.telegram.org", alias="TELEGRAM_API_BASE"
    )

    http_timeout: float = Field(default=30.0, alias="HTTP_TIMEOUT")

    # Optional LLM used to optimize requirement analyses.
    anthropic_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("ANTHROPIC_API_KEY", "API_KEY"),
    )
    anthropic_base_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("ANTHROPIC_BASE_URL", "ANTHROPIC_ENDPOINT"),
    )
    anthropic_model: str | None = Field(
        default=None,
        validation_alias=AliasChoices("ANTHROPIC_MODEL", "CLAUDE_MODEL"),
    )
    llm_max_tokens: int = Field(default=4096, alias="LLM_MAX_TOKENS")

    # MCP server
    mcp_transport: str = Field(default="stdio", alias="MCP_TRANSPORT")
    mcp_host: str = Field(default="127.0.0.1", alias="MCP_HOST")
    mcp_port: int = Field(default=8000, alias="MCP_PORT")

    @field_validator("mcp_transport")
    @classmethod
    def _normalize_transport(cls, value: str) -> str:
        raw = (value or "stdio").strip().lower()
        transport = _TRANSPORT_ALIASES.get(raw)
        if not transport:
            raise ValueError(
                f"Unknown MCP_TRANSPORT '{raw}'. Use stdio, sse, or streamable-http."
            )
        return transport

    @field_validator("n8n_base_url", "airtable_api_base", "telegram_api_base")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
