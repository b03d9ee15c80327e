"""Requirements analysis tools."""

from .analyze import AnalyzeWorkflowRequirementsTool

__all__ = ["AnalyzeWorkflowRequirementsTool"]
