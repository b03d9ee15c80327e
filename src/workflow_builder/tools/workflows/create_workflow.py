"""Tool for creating an n8n workflow from a description."""

from __future__ import annotations

import logging
from typing import Any, Dict

from ...services import ServiceAPIError, ServiceContainer
from ...workflow import build_workflow_structure, summarize_structure
from ..core import Tool, ToolParameter, require_arg, to_json

logger = logging.getLogger("workflow_builder.tool_calls")


class CreateWorkflowTool(Tool):
    """Build a workflow from keywords in its description and create it in n8n.

    The workflow is always created inactive. Remote failures are reported in
    the returned text rather than raised.
    """

    name = "create_workflow"
    description = "Create a new workflow in n8n based on description"
    parameters = [
        ToolParameter(
            name="name",
            type="string",
            description="Name of the workflow",
        ),
        ToolParameter(
            name="description",
            type="string",
            description="Description of what the workflow should do",
        ),
        ToolParameter(
            name="requirements",
            type="object",
            description="Specific requirements and parameters for the workflow",
            required=False,
        ),
    ]

    def __init__(self, services: ServiceContainer):
        self.services = services

    def execute(self, args: Dict[str, Any], **kwargs: Any) -> str:
        name = require_arg(args, "name")
        description = require_arg(args, "description")
        requirements = args.get("requirements") or {}
        if not isinstance(requirements, dict):
            raise ValueError("requirements must be an object")

        try:
            structure = build_workflow_structure(
                description,
                requirements,
                airtable_base_id=self.services.settings.airtable_base_id,
            )
            logger.info("Built workflow name=%s %s", name, summarize_structure(structure))
            payload = structure.to_dict()
            workflow = self.services.n8n.create_workflow(
                name,
                payload["nodes"],
                payload["connections"],
            )
        except ServiceAPIError as exc:
            logger.warning("create_workflow failed name=%s error=%s", name, exc)
            return f"Error creating workflow: {exc}"

        status = "Active" if workflow.get("active") else "Inactive"
        return (
            f'Workflow "{name}" created successfully!\n\n'
            f"Workflow ID: {workflow.get('id')}\n"
            f"Status: {status}\n\n"
            f"Structure:\n{to_json(payload)}"
        )
