"""Tests for the command-line entrypoint."""

import json
from unittest.mock import patch

import pytest

from workflow_builder import cli


@pytest.fixture(autouse=True)
def use_test_registry(registry):
    with patch("workflow_builder.cli.build_tool_registry", return_value=registry):
        yield


def test_list(capsys):
    assert cli.main(["list"]) == 0

    out = capsys.readouterr().out
    assert "create_workflow: Create a new workflow in n8n based on description" in out
    assert "    chat_id (string, required): Telegram chat ID to send message to" in out


def test_call_prints_tool_result(capsys):
    args = json.dumps({"requirements": "send a daily report by email"})

    assert cli.main(["call", "analyze_workflow_requirements", "--args", args]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Workflow Requirements Analysis:\n")


def test_call_unknown_tool(capsys):
    assert cli.main(["call", "nope"]) == 1
    assert "Unknown tool: nope" in capsys.readouterr().err


def test_call_rejects_non_object_args():
    with pytest.raises(SystemExit, match="JSON object"):
        cli.main(["call", "get_telegram_updates", "--args", "[1, 2]"])
