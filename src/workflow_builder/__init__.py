"""workflow-builder-mcp - MCP tools for building n8n workflows."""

from typing import TYPE_CHECKING

__version__ = "1.0.0"

__all__ = ["Settings", "get_settings", "__version__"]

if TYPE_CHECKING:
    from .config.settings import Settings, get_settings


def __getattr__(name: str):
    if name == "Settings":
        from .config.settings import Settings

        return Settings
    if name == "get_settings":
        from .config.settings import get_settings

        return get_settings
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
