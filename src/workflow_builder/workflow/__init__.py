"""n8n workflow construction."""

from .builder import build_workflow_structure, summarize_structure
from .model import N8nNode, WorkflowStructure

__all__ = [
    "N8nNode",
    "WorkflowStructure",
    "build_workflow_structure",
    "summarize_structure",
]
