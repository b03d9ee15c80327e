"""Rule-based analysis of free-text workflow requirements.

Everything here is phrase extraction with fixed regular expressions plus
case-insensitive keyword checks. Extractors return whole matched phrases, in
pattern order, duplicates included.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

_END = r"(?:\s+then|\s+,|\s+\.|\Z)"


def _compile(patterns: Iterable[str]) -> List[re.Pattern[str]]:
    return [re.compile(pattern, re.IGNORECASE) for pattern in patterns]


TRIGGER_PATTERNS = _compile(
    [
        rf"when\s+(.+?){_END}",
        rf"on\s+(.+?){_END}",
        rf"if\s+(.+?){_END}",
        rf"trigger\s+on\s+(.+?){_END}",
    ]
)

ACTION_PATTERNS = _compile(
    [
        r"then\s+(.+?)(?:\s+and|\s+,|\s+\.|\Z)",
        r"send\s+(.+?)(?:\s+to|\s+,|\s+\.|\Z)",
        r"create\s+(.+?)(?:\s+in|\s+,|\s+\.|\Z)",
        r"update\s+(.+?)(?:\s+in|\s+,|\s+\.|\Z)",
        r"notify\s+(.+?)(?:\s+via|\s+,|\s+\.|\Z)",
    ]
)

CONDITION_PATTERNS = _compile(
    [
        r"if\s+(.+?)(?:\s+then)",
        r"when\s+(.+?)(?:\s+is|=|>|<)",
        rf"only\s+if\s+(.+?){_END}",
    ]
)

DATA_SOURCES: Sequence[Tuple[str, str]] = (
    ("airtable", "airtable"),
    ("google sheets", "googleSheets"),
    ("webhook", "webhook"),
    ("email", "email"),
    ("telegram", "telegram"),
    ("api", "api"),
)

TRANSFORMATIONS: Sequence[str] = ("filter", "format", "convert", "calculate", "analyze")

DESTINATIONS: Sequence[str] = ("email", "slack", "telegram", "database", "api", "airtable")

OPTIONAL_INTEGRATIONS: Sequence[str] = ("slack", "google", "email", "telegram")

COMPLEXITY_INDICATORS: Sequence[str] = (
    "multiple conditions",
    "loop",
    "iteration",
    "complex logic",
    "multiple integrations",
    "data transformation",
    "telegram bot",
    "real-time",
)

NODE_KEYWORDS: Sequence[str] = ("airtable", "email", "slack", "telegram", "webhook")

DEPENDENCIES: Sequence[Tuple[str, str]] = (
    ("airtable", "airtable-credentials"),
    ("email", "smtp-configuration"),
    ("slack", "slack-app-credentials"),
    ("telegram", "telegram-bot-token"),
)

_IF_RE = re.compile(r"if\s+", re.IGNORECASE)
_LOOP_RE = re.compile(r"for\s+each|loop", re.IGNORECASE)


def _match_phrases(patterns: Iterable[re.Pattern[str]], text: str) -> List[str]:
    phrases: List[str] = []
    for pattern in patterns:
        phrases.extend(match.group(0) for match in pattern.finditer(text))
    return phrases


def extract_triggers(requirements: str) -> List[str]:
    return _match_phrases(TRIGGER_PATTERNS, requirements)


def extract_actions(requirements: str) -> List[str]:
    return _match_phrases(ACTION_PATTERNS, requirements)


def extract_conditions(requirements: str) -> List[str]:
    return _match_phrases(CONDITION_PATTERNS, requirements)


def extract_data_sources(requirements: str) -> List[str]:
    text = requirements.lower()
    return [label for keyword, label in DATA_SOURCES if keyword in text]


def extract_transformations(requirements: str) -> List[str]:
    text = requirements.lower()
    return [keyword for keyword in TRANSFORMATIONS if keyword in text]


def extract_destinations(requirements: str) -> List[str]:
    text = requirements.lower()
    return [keyword for keyword in DESTINATIONS if keyword in text]


def extract_data_flow(requirements: str) -> Dict[str, List[str]]:
    return {
        "sources": extract_data_sources(requirements),
        "transformations": extract_transformations(requirements),
        "destinations": extract_destinations(requirements),
    }


def extract_integrations(requirements: str) -> List[str]:
    """Integrations the workflow needs. Airtable is always included."""
    text = requirements.lower()
    integrations = ["airtable"]
    integrations.extend(keyword for keyword in OPTIONAL_INTEGRATIONS if keyword in text)
    return list(dict.fromkeys(integrations))


def assess_complexity(requirements: str) -> str:
    text = requirements.lower()
    found = [indicator for indicator in COMPLEXITY_INDICATORS if indicator in text]
    if len(found) >= 3:
        return "high"
    if len(found) >= 1:
        return "medium"
    return "low"


def estimate_node_count(requirements: str) -> int:
    text = requirements.lower()
    count = 1  # trigger
    count += sum(1 for keyword in NODE_KEYWORDS if keyword in text)
    count += len(_IF_RE.findall(requirements))
    # Loops usually take a split node plus a merge node.
    count += 2 * len(_LOOP_RE.findall(requirements))
    return count


def recommend_approach(requirements: str) -> str:
    text = requirements.lower()
    if "real-time" in text:
        return "webhook-triggered"
    if "schedule" in text or "daily" in text:
        return "cron-triggered"
    if "telegram" in text:
        return "telegram-bot-triggered"
    return "manual-triggered"


def identify_dependencies(
    requirements: str,
    context: Optional[Mapping[str, Any]] = None,
) -> List[str]:
    text = requirements.lower()
    return [dependency for keyword, dependency in DEPENDENCIES if keyword in text]


def suggest_workflow_structure(
    requirements: str,
    context: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    return {
        "complexity": assess_complexity(requirements),
        "estimatedNodes": estimate_node_count(requirements),
        "recommendedApproach": recommend_approach(requirements),
        "dependencies": identify_dependencies(requirements, context),
    }


def analyze_requirements(
    requirements: str,
    context: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Run every extractor over the requirements text."""
    requirements = requirements or ""
    context = context or {}
    return {
        "triggers": extract_triggers(requirements),
        "actions": extract_actions(requirements),
        "dataFlow": extract_data_flow(requirements),
        "integrations": extract_integrations(requirements),
        "conditions": extract_conditions(requirements),
        "suggestedStructure": suggest_workflow_structure(requirements, context),
    }
