"""Keyword-driven n8n workflow construction.

The description is checked, case-insensitively and in a fixed order, for a
handful of keywords. Each hit appends a pre-templated node, chained from the
node appended before it. The result always starts with a manual trigger.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from .model import N8nNode, WorkflowStructure

DEFAULT_AIRTABLE_TABLE = "tblExample"
DEFAULT_TELEGRAM_CHAT = "@channel"
DEFAULT_TELEGRAM_TEXT = "Workflow notification from n8n"
DEFAULT_FROM_EMAIL = "noreply@example.com"
DEFAULT_TO_EMAIL = "user@example.com"
DEFAULT_EMAIL_SUBJECT = "Workflow Notification"
DEFAULT_EMAIL_TEXT = "Workflow executed successfully"

Requirements = Mapping[str, Any]
NodeFactory = Callable[[str, Requirements, str], N8nNode]


def _requirement(requirements: Requirements, key: str, default: str) -> Any:
    value = requirements.get(key)
    return value if value else default


def trigger_node(node_id: str) -> N8nNode:
    return N8nNode(
        id=node_id,
        name="Trigger",
        type="n8n-nodes-base.manualTrigger",
        position=[250, 300],
        parameters={},
    )


def airtable_node(node_id: str, requirements: Requirements, base_id: str) -> N8nNode:
    return N8nNode(
        id=node_id,
        name="Airtable",
        type="n8n-nodes-base.airtable",
        position=[450, 300],
        parameters={
            "authentication": "airtableApi",
            "operation": "list",
            "application": base_id,
            "table": _requirement(requirements, "tableId", DEFAULT_AIRTABLE_TABLE),
        },
    )


def telegram_node(node_id: str, requirements: Requirements, base_id: str) -> N8nNode:
    return N8nNode(
        id=node_id,
        name="Telegram",
        type="n8n-nodes-base.telegram",
        position=[650, 300],
        parameters={
            "operation": "sendMessage",
            "chatId": _requirement(requirements, "telegramChatId", DEFAULT_TELEGRAM_CHAT),
            "text": _requirement(requirements, "telegramMessage", DEFAULT_TELEGRAM_TEXT),
        },
    )


def email_node(node_id: str, requirements: Requirements, base_id: str) -> N8nNode:
    return N8nNode(
        id=node_id,
        name="Send Email",
        type="n8n-nodes-base.emailSend",
        position=[850, 300],
        parameters={
            "fromEmail": _requirement(requirements, "fromEmail", DEFAULT_FROM_EMAIL),
            "toEmail": _requirement(requirements, "toEmail", DEFAULT_TO_EMAIL),
            "subject": _requirement(requirements, "subject", DEFAULT_EMAIL_SUBJECT),
            "text": _requirement(requirements, "message", DEFAULT_EMAIL_TEXT),
        },
    )


# Order matters: it fixes node order, ids and the chain of connections.
NODE_RULES: List[Tuple[Tuple[str, ...], NodeFactory]] = [
    (("airtable",), airtable_node),
    (("telegram", "message", "notify"), telegram_node),
    (("email",), email_node),
]


def build_workflow_structure(
    description: str,
    requirements: Optional[Requirements] = None,
    airtable_base_id: str = "",
) -> WorkflowStructure:
    """Build the node list and connections for a workflow description."""
    requirements = requirements or {}
    text = (description or "").lower()
    structure = WorkflowStructure()

    def next_id() -> str:
        return f"node_{len(structure.nodes)}"

    structure.add_node(trigger_node(next_id()))
    for keywords, factory in NODE_RULES:
        if any(keyword in text for keyword in keywords):
            structure.add_node(factory(next_id(), requirements, airtable_base_id))
    return structure


def summarize_structure(structure: WorkflowStructure) -> Dict[str, Any]:
    names = structure.node_names()
    return {
        "node_count": len(names),
        "nodes": names,
        "chain": " -> ".join(names),
    }
