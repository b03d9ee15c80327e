"""Tool for analyzing natural-language workflow requirements."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ...analysis import analyze_requirements, optimize_analysis
from ...analysis.optimizer import Completion
from ...llm import LLMConfigError, call_llm
from ...services import ServiceContainer
from ..core import Tool, ToolParameter, require_arg, to_json

logger = logging.getLogger("workflow_builder.tool_calls")

HEADER = "Workflow Requirements Analysis"


class AnalyzeWorkflowRequirementsTool(Tool):
    """Rule-based requirements analysis with an optional LLM refinement pass.

    When `optimize` is set the analysis is sent to the LLM. A JSON-object reply
    is merged into the analysis; any other reply is appended verbatim. If the
    LLM is unavailable the rule-based analysis is still returned.
    """

    name = "analyze_workflow_requirements"
    description = "Analyze natural language requirements and suggest workflow structure"
    parameters = [
        ToolParameter(
            name="requirements",
            type="string",
            description="Natural language description of workflow requirements",
        ),
        ToolParameter(
            name="context",
            type="object",
            description="Additional context like existing data sources, APIs, etc.",
            required=False,
        ),
        ToolParameter(
            name="optimize",
            type="boolean",
            description="Refine the rule-based analysis with the configured LLM",
            required=False,
            default=False,
        ),
    ]

    def __init__(self, services: ServiceContainer, complete: Optional[Completion] = None):
        self.services = services
        self._complete = complete

    def _completion(self) -> Completion:
        if self._complete is not None:
            return self._complete
        settings = self.services.settings

        def complete(messages, **kwargs):
            return call_llm(messages, settings=settings, **kwargs)

        return complete

    def execute(self, args: Dict[str, Any], **kwargs: Any) -> str:
        requirements = require_arg(args, "requirements")
        context = args.get("context") or {}
        analysis = analyze_requirements(requirements, context)
        base_text = f"{HEADER}:\n{to_json(analysis)}"

        if not args.get("optimize"):
            return base_text

        try:
            result = optimize_analysis(
                requirements,
                analysis,
                context,
                complete=self._completion(),
            )
        except LLMConfigError as exc:
            logger.info("LLM optimization skipped: %s", exc)
            return f"{base_text}\n\nLLM Optimization unavailable: {exc}"
        except Exception as exc:
            logger.warning("LLM optimization failed: %s", exc)
            return f"{base_text}\n\nLLM Optimization unavailable: {exc}"

        if result.structured:
            return f"{HEADER} (LLM-optimized):\n{to_json(result.analysis)}"
        return f"{base_text}\n\nLLM Optimization:\n{result.raw_text}"
