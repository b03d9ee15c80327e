"""CLI entrypoint for running tools without an MCP client."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from .tools import ToolRegistry, build_tool_registry
from .utils.logging import setup_logging


def _parse_args_json(raw: Optional[str]) -> Dict[str, Any]:
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"--args is not valid JSON: {exc}")
    if not isinstance(data, dict):
        raise SystemExit("--args must be a JSON object")
    return data


def list_tools(registry: ToolRegistry) -> str:
    lines = []
    for tool in registry.list_tools():
        lines.append(f"{tool.name}: {tool.description}")
        for param in tool.parameters:
            flag = "required" if param.required else "optional"
            lines.append(f"    {param.name} ({param.type}, {flag}): {param.description}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="workflow-builder",
        description="Workflow builder tools",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="List available tools")
    call = sub.add_parser("call", help="Run a single tool and print its result")
    call.add_argument("tool", help="Tool name")
    call.add_argument("--args", dest="args_json", help="Tool arguments as a JSON object")
    sub.add_parser("serve", help="Run the MCP server")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "serve":
        from .mcp_bridge.server import main as serve

        serve()
        return 0

    setup_logging()
    registry = build_tool_registry()
    if args.command == "list":
        print(list_tools(registry))
        return 0

    tool_args = _parse_args_json(args.args_json)
    try:
        print(registry.execute(args.tool, tool_args))
    except (ValueError, RuntimeError) as exc:
        print(f"Error executing {args.tool}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
