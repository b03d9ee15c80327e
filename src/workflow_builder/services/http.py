"""Shared JSON-over-HTTP plumbing for the service clients."""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional, Type

import requests

from .errors import ServiceAPIError

logger = logging.getLogger("workflow_builder.services")

DEFAULT_TIMEOUT = 30.0


class JSONAPIClient:
    """Base class wrapping a `requests.Session` for a single JSON API.

    Subclasses set `error_class` and pass the base URL and any auth headers.
    """

    error_class: Type[ServiceAPIError] = ServiceAPIError

    def __init__(
        self,
        base_url: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/json"})
        if headers:
            self._session.headers.update(headers)

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _redact(self, text: str) -> str:
        """Text as it may appear in logs and error messages."""
        return text

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json_body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Raises:
            ServiceAPIError: (the subclass's `error_class`) if the request fails.
        """
        service = self.error_class.service
        start = time.perf_counter()
        try:
            response = self._session.request(
                method,
                self._url(path),
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout:
            raise self.error_class(f"Request to {service} timed out")
        except requests.exceptions.ConnectionError:
            raise self.error_class(f"Could not connect to {service}")
        except requests.exceptions.RequestException as exc:
            raise self.error_class(f"{service} request failed: {self._redact(str(exc))}")

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s %s status=%s ms=%.1f",
            service,
            method,
            self._redact(path),
            response.status_code,
            elapsed_ms,
        )

        if response.status_code >= 400:
            raise self._error_for(response)

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            raise self.error_class(
                f"{service} returned a non-JSON response",
                status_code=response.status_code,
            )

    def _error_for(self, response: requests.Response) -> ServiceAPIError:
        service = self.error_class.service
        status = response.status_code
        if status == 401:
            message = f"Invalid or missing {service} credentials"
        elif status == 403:
            message = f"Access denied by {service}"
        elif status == 404:
            message = f"Resource not found on {service}"
        elif status == 429:
            message = f"{service} rate limit exceeded. Please try again later."
        else:
            message = f"{service} request failed with status code {status}"
        detail = _error_detail(response)
        if detail:
            message = f"{message}: {self._redact(detail)}"
        return self.error_class(message, status_code=status)


def _error_detail(response: requests.Response) -> str:
    """Pull a human-readable message out of an error body, if there is one."""
    try:
        data = response.json()
    except ValueError:
        return (response.text or "").strip()[:200]
    if not isinstance(data, dict):
        return ""
    error = data.get("error")
    if isinstance(error, dict):
        return str(error.get("message") or error.get("type") or "")
    for key in ("message", "description", "error"):
        value = data.get(key)
        if isinstance(value, str) and value:
            return value
    return ""
