"""n8n public REST API client.

Usage:
    client = N8nClient("http://localhost:5678", api_key="...")
    workflow = client.create_workflow("Daily digest", nodes, connections)
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from .errors import N8nAPIError
from .http import DEFAULT_TIMEOUT, JSONAPIClient

WORKFLOWS_ENDPOINT = "/api/v1/workflows"

# Tags attached to every workflow this server creates.
GENERATED_TAGS = ["auto-generated", "mcp-builder"]


class N8nClient(JSONAPIClient):
    """Client for the n8n workflow endpoints."""

    error_class = N8nAPIError

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        super().__init__(
            base_url,
            headers={
                "X-N8N-API-KEY": api_key,
                "Content-Type": "application/json",
            },
            timeout=timeout,
            session=session,
        )

    def create_workflow(
        self,
        name: str,
        nodes: List[Dict[str, Any]],
        connections: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Create an inactive workflow and return n8n's representation of it."""
        payload = {
            "name": name,
            "nodes": nodes,
            "connections": connections,
            "active": False,
            "settings": {},
            "tags": list(GENERATED_TAGS),
        }
        workflow = self._request("POST", WORKFLOWS_ENDPOINT, json_body=payload)
        if not isinstance(workflow, dict):
            raise N8nAPIError("n8n API returned an unexpected workflow response")
        return workflow

    def list_workflows(self, active: Optional[bool] = None) -> Any:
        """List workflows, optionally filtered by active status."""
        params = None
        if active is not None:
            params = {"active": "true" if active else "false"}
        return self._request("GET", WORKFLOWS_ENDPOINT, params=params)
