"""Tests for the optional LLM optimization pass."""

import json
from unittest.mock import MagicMock

import pytest

from workflow_builder.analysis import analyze_requirements, merge_analysis, optimize_analysis
from workflow_builder.analysis.optimizer import build_messages, parse_structured_reply
from workflow_builder.llm import LLMConfigError

REQUIREMENTS = "When a form is submitted then email the sales team"


@pytest.fixture
def analysis():
    return analyze_requirements(REQUIREMENTS)


class TestParseStructuredReply:
    def test_bare_object(self):
        assert parse_structured_reply('{"triggers": ["form"]}') == {"triggers": ["form"]}

    def test_fenced_object(self):
        reply = '```json\n{"integrations": ["typeform"]}\n```'
        assert parse_structured_reply(reply) == {"integrations": ["typeform"]}

    def test_prose_is_not_structured(self):
        assert parse_structured_reply("Use a webhook trigger instead.") is None

    def test_json_array_is_not_structured(self):
        assert parse_structured_reply('["a", "b"]') is None


class TestMergeAnalysis:
    def test_lists_union_dicts_merge_scalars_override(self, analysis):
        merged = merge_analysis(
            analysis,
            {
                "integrations": ["email", "typeform"],
                "suggestedStructure": {"complexity": "medium"},
                "notes": "Consider a webhook trigger",
            },
        )

        assert merged["integrations"] == ["airtable", "email", "typeform"]
        assert merged["suggestedStructure"]["complexity"] == "medium"
        assert merged["suggestedStructure"]["dependencies"] == ["smtp-configuration"]
        assert merged["notes"] == "Consider a webhook trigger"

    def test_does_not_mutate_base(self, analysis):
        before = json.loads(json.dumps(analysis))
        merge_analysis(analysis, {"integrations": ["typeform"], "dataFlow": {"sources": ["form"]}})
        assert analysis == before


class TestOptimizeAnalysis:
    def test_structured_reply_is_merged(self, analysis):
        complete = MagicMock(return_value='{"triggers": ["form submission"]}')

        result = optimize_analysis(REQUIREMENTS, analysis, {"forms": "typeform"}, complete=complete)

        assert result.structured is True
        assert result.analysis["triggers"] == analysis["triggers"] + ["form submission"]
        assert result.raw_text == '{"triggers": ["form submission"]}'
        messages = complete.call_args.args[0]
        assert messages[0]["role"] == "system"
        assert REQUIREMENTS in messages[1]["content"]
        assert "typeform" in messages[1]["content"]
        assert complete.call_args.kwargs["caller"] == "optimize_analysis"

    def test_unstructured_reply_is_returned_verbatim(self, analysis):
        complete = MagicMock(return_value="Add a webhook trigger.")

        result = optimize_analysis(REQUIREMENTS, analysis, complete=complete)

        assert result.structured is False
        assert result.raw_text == "Add a webhook trigger."
        assert result.analysis == analysis

    def test_config_errors_propagate(self, analysis):
        complete = MagicMock(side_effect=LLMConfigError("Missing ANTHROPIC_API_KEY/API_KEY."))

        with pytest.raises(LLMConfigError):
            optimize_analysis(REQUIREMENTS, analysis, complete=complete)


def test_build_messages_embeds_analysis_as_json(analysis):
    messages = build_messages(REQUIREMENTS, analysis)

    assert len(messages) == 2
    assert json.dumps(analysis, indent=2) in messages[1]["content"]
