"""n8n workflow tools."""

from .create_workflow import CreateWorkflowTool
from .list_workflows import GetN8nWorkflowsTool

__all__ = ["CreateWorkflowTool", "GetN8nWorkflowsTool"]
