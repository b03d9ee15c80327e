"""Tool for listing workflows that already exist in n8n."""

from __future__ import annotations

from typing import Any, Dict

from ...services import ServiceAPIError, ServiceContainer
from ..core import Tool, ToolParameter, to_json


def _coerce_active(value: Any) -> Any:
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in {"true", "false"}:
        return value.strip().lower() == "true"
    raise ValueError("active must be a boolean")


class GetN8nWorkflowsTool(Tool):
    name = "get_n8n_workflows"
    description = "List existing workflows in n8n"
    parameters = [
        ToolParameter(
            name="active",
            type="boolean",
            description="Filter by active status",
            required=False,
        ),
    ]

    def __init__(self, services: ServiceContainer):
        self.services = services

    def execute(self, args: Dict[str, Any], **kwargs: Any) -> str:
        active = _coerce_active(args.get("active"))
        try:
            data = self.services.n8n.list_workflows(active=active)
        except ServiceAPIError as exc:
            raise RuntimeError(f"Failed to get n8n workflows: {exc}") from exc
        return f"N8N Workflows:\n{to_json(data)}"
