"""Airtable metadata API client."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from .errors import AirtableAPIError
from .http import DEFAULT_TIMEOUT, JSONAPIClient

AIRTABLE_API_BASE = "https://api.airtable.com"


class AirtableClient(JSONAPIClient):
    """Reads base schema through the Airtable metadata API."""

    error_class = AirtableAPIError

    def __init__(
        self,
        api_key: str,
        base_id: str,
        *,
        api_base: str = AIRTABLE_API_BASE,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        super().__init__(
            api_base,
            headers={"Authorization": f"Bearer {api_key}"},
            timeout=timeout,
            session=session,
        )
        self.base_id = base_id

    def list_tables(self) -> List[Dict[str, Any]]:
        """Return every table in the configured base, fields included."""
        data = self._request("GET", f"/v0/meta/bases/{self.base_id}/tables")
        tables = data.get("tables") if isinstance(data, dict) else None
        if not isinstance(tables, list):
            raise AirtableAPIError("Airtable API response did not include a tables list")
        return tables
