"""Tests for the n8n, Airtable and Telegram HTTP clients."""

import pytest
import requests

from workflow_builder.services import (
    AirtableAPIError,
    AirtableClient,
    N8nAPIError,
    N8nClient,
    ServiceContainer,
    TelegramAPIError,
    TelegramClient,
)
from tests.conftest import make_response, make_session, request_kwargs


class TestN8nClient:
    def test_create_workflow_posts_inactive_tagged_payload(self):
        session = make_session(make_response(payload={"id": "wf1", "active": False}))
        client = N8nClient("http://n8n.test:5678/", "key-1", timeout=5, session=session)

        result = client.create_workflow("Digest", [{"name": "Trigger"}], {})

        assert result == {"id": "wf1", "active": False}
        call = request_kwargs(session)
        assert call["method"] == "POST"
        assert call["url"] == "http://n8n.test:5678/api/v1/workflows"
        assert call["timeout"] == 5
        assert call["json"] == {
            "name": "Digest",
            "nodes": [{"name": "Trigger"}],
            "connections": {},
            "active": False,
            "settings": {},
            "tags": ["auto-generated", "mcp-builder"],
        }
        assert session.headers["X-N8N-API-KEY"] == "key-1"
        assert session.headers["Content-Type"] == "application/json"

    @pytest.mark.parametrize("active,expected", [(None, None), (True, {"active": "true"}), (False, {"active": "false"})])
    def test_list_workflows_active_filter(self, active, expected):
        session = make_session(make_response(payload={"data": []}))
        client = N8nClient("http://n8n.test", "key", session=session)

        client.list_workflows(active=active)

        call = request_kwargs(session)
        assert call["method"] == "GET"
        assert call["params"] == expected

    def test_unauthorized_maps_to_readable_error(self):
        session = make_session(make_response(401, payload={"message": "unauthorized"}))
        client = N8nClient("http://n8n.test", "", session=session)

        with pytest.raises(N8nAPIError) as excinfo:
            client.list_workflows()

        assert excinfo.value.status_code == 401
        assert "Invalid or missing n8n API credentials" in str(excinfo.value)
        assert "unauthorized" in str(excinfo.value)

    def test_server_error_includes_body_text(self):
        session = make_session(make_response(500, text="boom"))
        client = N8nClient("http://n8n.test", "key", session=session)

        with pytest.raises(N8nAPIError, match="status code 500: boom"):
            client.list_workflows()

    def test_connection_error(self):
        session = make_session(error=requests.exceptions.ConnectionError("refused"))
        client = N8nClient("http://n8n.test", "key", session=session)

        with pytest.raises(N8nAPIError, match="Could not connect to n8n API"):
            client.list_workflows()

    def test_timeout(self):
        session = make_session(error=requests.exceptions.Timeout())
        client = N8nClient("http://n8n.test", "key", session=session)

        with pytest.raises(N8nAPIError, match="timed out"):
            client.create_workflow("x", [], {})

    def test_non_object_workflow_reply_is_an_error(self):
        session = make_session(make_response(payload=["unexpected"]))
        client = N8nClient("http://n8n.test", "key", session=session)

        with pytest.raises(N8nAPIError, match="unexpected workflow response"):
            client.create_workflow("x", [], {})


class TestAirtableClient:
    def test_list_tables(self):
        tables = [{"id": "tbl1", "name": "Orders", "fields": []}]
        session = make_session(make_response(payload={"tables": tables}))
        client = AirtableClient("pat", "appBase", api_base="https://air.test", session=session)

        assert client.list_tables() == tables
        call = request_kwargs(session)
        assert call["url"] == "https://air.test/v0/meta/bases/appBase/tables"
        assert session.headers["Authorization"] == "Bearer pat"

    def test_missing_tables_key_is_an_error(self):
        session = make_session(make_response(payload={"unexpected": True}))
        client = AirtableClient("pat", "appBase", session=session)

        with pytest.raises(AirtableAPIError, match="tables list"):
            client.list_tables()

    def test_nested_error_message(self):
        payload = {"error": {"type": "NOT_FOUND", "message": "Could not find base"}}
        session = make_session(make_response(404, payload=payload))
        client = AirtableClient("pat", "appMissing", session=session)

        with pytest.raises(AirtableAPIError, match="Could not find base"):
            client.list_tables()


class TestTelegramClient:
    TOKEN = "123456:SECRET"

    def test_send_message(self):
        session = make_session(make_response(payload={"ok": True, "result": {"message_id": 7}}))
        client = TelegramClient(self.TOKEN, api_base="https://tg.test", session=session)

        result = client.send_message("42", "<b>hi</b>")

        assert result["result"]["message_id"] == 7
        call = request_kwargs(session)
        assert call["method"] == "POST"
        assert call["url"] == f"https://tg.test/bot{self.TOKEN}/sendMessage"
        assert call["json"] == {"chat_id": "42", "text": "<b>hi</b>", "parse_mode": "HTML"}

    def test_get_updates_passes_limit(self):
        session = make_session(make_response(payload={"ok": True, "result": []}))
        client = TelegramClient(self.TOKEN, session=session)

        client.get_updates(limit=3)

        call = request_kwargs(session)
        assert call["method"] == "GET"
        assert call["url"] == f"https://api.telegram.org/bot{self.TOKEN}/getUpdates"
        assert call["params"] == {"limit": 3}

    def test_not_ok_reply_raises_description(self):
        payload = {"ok": False, "error_code": 400, "description": "Bad Request: chat not found"}
        session = make_session(make_response(200, payload=payload))
        client = TelegramClient(self.TOKEN, session=session)

        with pytest.raises(TelegramAPIError, match="chat not found") as excinfo:
            client.send_message("1", "x")
        assert excinfo.value.status_code == 400

    def test_token_is_redacted_from_errors(self):
        error = requests.exceptions.InvalidURL(f"bad url https://api.telegram.org/bot{self.TOKEN}/x")
        session = make_session(error=error)
        client = TelegramClient(self.TOKEN, session=session)

        with pytest.raises(TelegramAPIError) as excinfo:
            client.get_updates()

        assert self.TOKEN not in str(excinfo.value)
        assert "<redacted>" in str(excinfo.value)


class TestServiceContainer:
    def test_builds_clients_from_settings_once(self, settings):
        container = ServiceContainer(settings)

        n8n = container.n8n
        assert n8n is container.n8n
        assert n8n.base_url == "http://n8n.test:5678"
        assert container.airtable.base_id == "appTestBase"
        assert container.telegram.base_url == "https://api.telegram.org/bot123456:TEST-TOKEN"
