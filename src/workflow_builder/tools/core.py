"""Core tool abstractions and registry."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

logger = logging.getLogger("workflow_builder.tool_calls")


@dataclass
class ToolParameter:
    name: str
    type: str
    description: str
    required: bool = True
    default: Any = None


class Tool:
    name: str
    description: str
    parameters: List[ToolParameter] = []

    def parameter(self, name: str) -> ToolParameter:
        for param in self.parameters:
            if param.name == name:
                return param
        raise KeyError(f"{self.name} has no parameter {name}")

    def execute(self, args: Dict[str, Any], **kwargs: Any) -> str:
        raise NotImplementedError


def require_arg(args: Dict[str, Any], name: str) -> Any:
    value = args.get(name)
    if value is None:
        raise ValueError(f"{name} is required")
    return value


def to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


class ToolRegistry:
    def __init__(self) -> None:
        self._tools: Dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        self._tools[tool.name] = tool

    def get(self, name: str) -> Optional[Tool]:
        return self._tools.get(name)

    def list_tools(self) -> List[Tool]:
        return list(self._tools.values())

    def names(self) -> List[str]:
        return list(self._tools.keys())

    def execute(self, name: str, args: Optional[Dict[str, Any]] = None, **kwargs: Any) -> str:
        tool = self._tools.get(name)
        if tool is None:
            raise ValueError(f"Unknown tool: {name}")
        args = args or {}
        logger.info("Tool call start name=%s args_keys=%s", name, sorted(args.keys()))
        start = time.perf_counter()
        try:
            result = tool.execute(args, **kwargs)
        except Exception:
            logger.exception("Tool call failed name=%s", name)
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("Tool call complete name=%s ms=%.1f chars=%d", name, elapsed_ms, len(result))
        return result
