"""Optional LLM pass over a rule-based requirements analysis."""

from __future__ import annotations

import copy
import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..llm import call_llm

logger = logging.getLogger("workflow_builder.llm")

Completion = Callable[..., str]

SYSTEM_PROMPT = (
    "You are an n8n workflow architect. You receive free-text workflow requirements "
    "and a rule-based analysis of them produced by keyword matching. Correct and "
    "complete the analysis. Reply with a single JSON object using the same keys "
    "(triggers, actions, dataFlow, integrations, conditions, suggestedStructure). "
    "Do not wrap it in prose."
)

_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


@dataclass
class OptimizationResult:
    structured: bool
    analysis: Dict[str, Any]
    raw_text: str


def build_messages(
    requirements: str,
    analysis: Mapping[str, Any],
    context: Optional[Mapping[str, Any]] = None,
) -> List[Dict[str, Any]]:
    user_prompt = (
        f"Requirements:\n{requirements}\n\n"
        f"Context:\n{json.dumps(dict(context or {}), indent=2, default=str)}\n\n"
        f"Rule-based analysis:\n{json.dumps(dict(analysis), indent=2)}"
    )
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": user_prompt},
    ]


def parse_structured_reply(text: str) -> Optional[Dict[str, Any]]:
    """Return the reply as a dict if it is a JSON object (fenced or bare)."""
    candidate = text.strip()
    fenced = _FENCE_RE.match(candidate)
    if fenced:
        candidate = fenced.group(1)
    try:
        data = json.loads(candidate)
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None


def merge_analysis(base: Mapping[str, Any], update: Mapping[str, Any]) -> Dict[str, Any]:
    """Overlay `update` on `base`.

    Lists are unioned with base order first; nested dicts merge recursively;
    anything else from `update` wins.
    """
    merged: Dict[str, Any] = copy.deepcopy(dict(base))
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(current, list) and isinstance(value, list):
            combined = list(current)
            for item in value:
                if item not in combined:
                    combined.append(item)
            merged[key] = combined
        elif isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_analysis(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def optimize_analysis(
    requirements: str,
    analysis: Mapping[str, Any],
    context: Optional[Mapping[str, Any]] = None,
    complete: Optional[Completion] = None,
) -> OptimizationResult:
    """Ask the LLM to refine `analysis`.

    Config and API errors from the completion call propagate.
    """
    complete = complete or call_llm
    reply = complete(
        build_messages(requirements, analysis, context),
        caller="optimize_analysis",
    )
    parsed = parse_structured_reply(reply)
    if parsed is None:
        logger.info("LLM optimization returned unstructured text chars=%d", len(reply))
        return OptimizationResult(structured=False, analysis=dict(analysis), raw_text=reply)
    logger.info("LLM optimization returned keys=%s", sorted(parsed.keys()))
    return OptimizationResult(
        structured=True,
        analysis=merge_analysis(analysis, parsed),
        raw_text=reply,
    )
