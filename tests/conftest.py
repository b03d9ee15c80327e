"""Shared test fixtures.

No test talks to a real service: clients are MagicMocks built against the real
client classes, and HTTP-level tests hand the clients a mocked requests session.
"""

from typing import Any, Dict, Optional
from unittest.mock import MagicMock

import pytest
import requests

from workflow_builder.config.settings import Settings
from workflow_builder.services import (
    AirtableClient,
    N8nClient,
    ServiceContainer,
    TelegramClient,
)
from workflow_builder.tools import build_tool_registry


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Keep log files out of the repository."""
    monkeypatch.setenv("WORKFLOW_BUILDER_DATA_DIR", str(tmp_path / "data"))
    return tmp_path / "data"


@pytest.fixture
def settings() -> Settings:
    """Settings with fake credentials, ignoring any local .env file."""
    return Settings(
        _env_file=None,
        n8n_base_url="http://n8n.test:5678",
        n8n_api_key="n8n-test-key",
        airtable_api_key="pat-test",
        airtable_base_id="appTestBase",
        telegram_bot_token="123456:TEST-TOKEN",
    )


@pytest.fixture
def n8n_client() -> MagicMock:
    return MagicMock(spec=N8nClient)


@pytest.fixture
def airtable_client() -> MagicMock:
    return MagicMock(spec=AirtableClient)


@pytest.fixture
def telegram_client() -> MagicMock:
    return MagicMock(spec=TelegramClient)


@pytest.fixture
def services(settings, n8n_client, airtable_client, telegram_client) -> ServiceContainer:
    return ServiceContainer(
        settings,
        n8n=n8n_client,
        airtable=airtable_client,
        telegram=telegram_client,
    )


@pytest.fixture
def registry(services):
    return build_tool_registry(services)


def make_response(
    status_code: int = 200,
    payload: Optional[Any] = None,
    text: str = "",
) -> MagicMock:
    """Build a mock requests.Response."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    if payload is not None:
        response.json.return_value = payload
        response.content = b"{...}"
        response.text = "{...}"
    else:
        response.json.side_effect = ValueError("No JSON")
        response.content = text.encode("utf-8")
        response.text = text
    return response


def make_session(response: Optional[MagicMock] = None, error: Optional[Exception] = None) -> MagicMock:
    """Build a mock requests.Session returning `response` (or raising `error`)."""
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    if error is not None:
        session.request.side_effect = error
    else:
        session.request.return_value = response or make_response(payload={})
    return session


def request_kwargs(session: MagicMock) -> Dict[str, Any]:
    """Return (method, url, kwargs) of the single request made on `session`."""
    assert session.request.call_count == 1
    args, kwargs = session.request.call_args
    return {"method": args[0], "url": args[1], **kwargs}
