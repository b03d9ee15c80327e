"""Tool registry and MCP-exposed tools."""

from .core import Tool, ToolParameter, ToolRegistry
from .airtable import GetAirtableSchemaTool
from .requirements import AnalyzeWorkflowRequirementsTool
from .telegram import GetTelegramUpdatesTool, SendTelegramMessageTool
from .workflows import CreateWorkflowTool, GetN8nWorkflowsTool
from .registry import TOOL_CLASSES, build_tool_registry

__all__ = [
    "Tool",
    "ToolParameter",
    "ToolRegistry",
    "TOOL_CLASSES",
    "build_tool_registry",
    "AnalyzeWorkflowRequirementsTool",
    "CreateWorkflowTool",
    "GetAirtableSchemaTool",
    "GetN8nWorkflowsTool",
    "GetTelegramUpdatesTool",
    "SendTelegramMessageTool",
]
