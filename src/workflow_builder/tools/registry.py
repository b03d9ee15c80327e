"""Registry construction for the six MCP tools."""

from __future__ import annotations

from typing import Optional, Tuple, Type

from ..services import ServiceContainer
from .airtable import GetAirtableSchemaTool
from .core import Tool, ToolRegistry
from .requirements import AnalyzeWorkflowRequirementsTool
from .telegram import GetTelegramUpdatesTool, SendTelegramMessageTool
from .workflows import CreateWorkflowTool, GetN8nWorkflowsTool

# Listing order.
TOOL_CLASSES: Tuple[Type[Tool], ...] = (
    CreateWorkflowTool,
    GetAirtableSchemaTool,
    GetN8nWorkflowsTool,
    AnalyzeWorkflowRequirementsTool,
    SendTelegramMessageTool,
    GetTelegramUpdatesTool,
)


def build_tool_registry(services: Optional[ServiceContainer] = None) -> ToolRegistry:
    """Build a ToolRegistry whose tools share one service container."""
    services = services or ServiceContainer()
    registry = ToolRegistry()
    for tool_cls in TOOL_CLASSES:
        registry.register(tool_cls(services))
    return registry
