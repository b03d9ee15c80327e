"""Tool for reading Airtable base schema."""

from __future__ import annotations

from typing import Any, Dict

from ...services import ServiceAPIError, ServiceContainer
from ..core import Tool, ToolParameter, to_json


class GetAirtableSchemaTool(Tool):
    """Return the schema of one table, or a summary of every table in the base.

    An unknown table id is not an error: the schema comes back as null.
    """

    name = "get_airtable_schema"
    description = "Get schema information from Airtable base"
    parameters = [
        ToolParameter(
            name="tableId",
            type="string",
            description="Airtable table ID (optional)",
            required=False,
        ),
    ]

    def __init__(self, services: ServiceContainer):
        self.services = services

    def execute(self, args: Dict[str, Any], **kwargs: Any) -> str:
        table_id = args.get("tableId")
        try:
            tables = self.services.airtable.list_tables()
        except ServiceAPIError as exc:
            raise RuntimeError(f"Failed to get Airtable schema: {exc}") from exc

        if table_id:
            table = next((t for t in tables if t.get("id") == table_id), None)
            return f"Table Schema:\n{to_json(table)}"

        summary = {
            "tables": [
                {"id": t.get("id"), "name": t.get("name"), "fields": t.get("fields")}
                for t in tables
            ]
        }
        return f"Airtable Base Schema:\n{to_json(summary)}"
