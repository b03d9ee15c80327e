"""n8n workflow structure."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class N8nNode:
    id: str
    name: str
    type: str
    position: List[int]
    parameters: Dict[str, Any] = field(default_factory=dict)
    type_version: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "typeVersion": self.type_version,
            "position": list(self.position),
            "parameters": dict(self.parameters),
        }


@dataclass
class WorkflowStructure:
    """Nodes plus n8n's name-keyed connection map."""

    nodes: List[N8nNode] = field(default_factory=list)
    connections: Dict[str, Dict[str, List[List[Dict[str, Any]]]]] = field(
        default_factory=dict
    )

    def add_node(self, node: N8nNode) -> N8nNode:
        """Append a node, wiring the previously appended node's main output to it."""
        if self.nodes:
            previous = self.nodes[-1]
            outputs = self.connections.setdefault(previous.name, {"main": []})
            outputs["main"].append([{"node": node.name, "type": "main", "index": 0}])
        self.nodes.append(node)
        return node

    def node_names(self) -> List[str]:
        return [node.name for node in self.nodes]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "connections": {
                name: {"main": [list(group) for group in outputs["main"]]}
                for name, outputs in self.connections.items()
            },
        }
