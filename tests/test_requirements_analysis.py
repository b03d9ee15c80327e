"""Tests for rule-based requirements analysis."""

import pytest

from workflow_builder.analysis.requirements import (
    analyze_requirements,
    assess_complexity,
    estimate_node_count,
    extract_actions,
    extract_conditions,
    extract_data_flow,
    extract_integrations,
    extract_triggers,
    identify_dependencies,
    recommend_approach,
)

SAMPLE = "When a new row is added to Airtable then send a message to the team."


class TestAnalyzeRequirements:
    def test_full_analysis_shape(self):
        analysis = analyze_requirements(SAMPLE)

        assert analysis == {
            "triggers": ["When a new row is added to Airtable then"],
            "actions": ["then send a message to the team.", "send a message to"],
            "dataFlow": {
                "sources": ["airtable"],
                "transformations": [],
                "destinations": ["airtable"],
            },
            "integrations": ["airtable"],
            "conditions": ["When a new row is"],
            "suggestedStructure": {
                "complexity": "low",
                "estimatedNodes": 2,
                "recommendedApproach": "manual-triggered",
                "dependencies": ["airtable-credentials"],
            },
        }

    def test_empty_requirements(self):
        analysis = analyze_requirements("")

        assert analysis["triggers"] == []
        assert analysis["actions"] == []
        assert analysis["conditions"] == []
        assert analysis["integrations"] == ["airtable"]
        assert analysis["suggestedStructure"]["estimatedNodes"] == 1
        assert analysis["suggestedStructure"]["complexity"] == "low"

    def test_context_does_not_change_result(self):
        assert analyze_requirements(SAMPLE, {"sources": ["crm"]}) == analyze_requirements(SAMPLE)


class TestPhraseExtraction:
    def test_triggers_keep_overlapping_matches_in_pattern_order(self):
        triggers = extract_triggers("Trigger on new email, then archive it")

        assert triggers == ["on new email, then", "Trigger on new email, then"]

    def test_conditions(self):
        conditions = extract_conditions("Only if the amount > 5 then approve")

        assert conditions == ["if the amount > 5 then", "Only if the amount > 5 then"]

    def test_when_condition_stops_at_comparison(self):
        assert extract_conditions("when price > 10") == ["when price >"]

    def test_actions_are_case_insensitive(self):
        actions = extract_actions("UPDATE the record in Airtable")

        assert actions == ["UPDATE the record in"]

    def test_notify_action_stops_at_via(self):
        assert extract_actions("notify the owner via Telegram") == ["notify the owner via"]

    def test_end_of_text_anchor_ignores_trailing_newline(self):
        assert extract_triggers("when x") == ["when x"]
        assert extract_triggers("when x\n") == []
        assert extract_actions("send the report\n") == []


class TestKeywordChecks:
    def test_data_flow_keywords(self):
        flow = extract_data_flow(
            "Read Google Sheets and a webhook, filter and format rows, store in a database"
        )

        assert flow == {
            "sources": ["googleSheets", "webhook"],
            "transformations": ["filter", "format"],
            "destinations": ["database"],
        }

    def test_integrations_always_start_with_airtable_and_dedupe(self):
        assert extract_integrations("AIRTABLE only") == ["airtable"]
        assert extract_integrations("Google Sheets and Slack, email via telegram") == [
            "airtable",
            "slack",
            "google",
            "email",
            "telegram",
        ]

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("a simple workflow", "low"),
            ("a telegram bot", "medium"),
            ("real-time loop with data transformation", "high"),
        ],
    )
    def test_complexity(self, text, expected):
        assert assess_complexity(text) == expected

    def test_node_estimate_counts_integrations_conditions_and_loops(self):
        text = (
            "If stock is low, email the buyer. If price drops, post to slack. "
            "For each item loop twice"
        )
        # 1 trigger + email + slack + 2 conditions + 2 loops * 2
        assert estimate_node_count(text) == 9

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("real-time daily telegram", "webhook-triggered"),
            ("run daily", "cron-triggered"),
            ("on a Schedule", "cron-triggered"),
            ("reply in telegram", "telegram-bot-triggered"),
            ("", "manual-triggered"),
        ],
    )
    def test_recommended_approach(self, text, expected):
        assert recommend_approach(text) == expected

    def test_dependencies(self):
        assert identify_dependencies("airtable, email, slack and telegram") == [
            "airtable-credentials",
            "smtp-configuration",
            "slack-app-credentials",
            "telegram-bot-token",
        ]
