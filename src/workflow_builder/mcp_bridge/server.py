"""MCP server exposing the workflow builder tools."""

import asyncio
import logging
import os
from typing import Annotated, Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from .. import __version__
from ..services import ServiceContainer
from ..tools import ToolRegistry, build_tool_registry
from ..utils.logging import setup_logging

logger = logging.getLogger("workflow_builder.tool_calls")

SERVER_NAME = "workflow-builder-mcp"


def build_mcp_server(
    host: str | None = None,
    port: int | None = None,
    services: ServiceContainer | None = None,
    registry: ToolRegistry | None = None,
) -> FastMCP:
    setup_logging()
    services = services or ServiceContainer()
    registry = registry or build_tool_registry(services)
    server = FastMCP(
        name=SERVER_NAME,
        instructions=(
            "Build n8n workflows from plain-language descriptions, inspect Airtable "
            "schema and n8n workflows, and talk to a Telegram bot."
        ),
        host=host or services.settings.mcp_host,
        port=port or services.settings.mcp_port,
    )

    def doc(tool_name: str, arg: str) -> str:
        return registry.get(tool_name).parameter(arg).description

    async def run(name: str, args: dict[str, Any]) -> str:
        # Service clients block on requests; keep the event loop free for other sessions.
        logger.info("MCP %s start", name)
        result = await asyncio.to_thread(registry.execute, name, args)
        logger.info("MCP %s complete", name)
        return result

    @server.tool(
        name="create_workflow",
        description=registry.get("create_workflow").description,
    )
    async def create_workflow(
        name: Annotated[str, Field(description=doc("create_workflow", "name"))],
        description: Annotated[str, Field(description=doc("create_workflow", "description"))],
        requirements: Annotated[
            dict[str, Any] | None,
            Field(description=doc("create_workflow", "requirements")),
        ] = None,
    ) -> str:
        return await run(
            "create_workflow",
            {"name": name, "description": description, "requirements": requirements or {}},
        )

    @server.tool(
        name="get_airtable_schema",
        description=registry.get("get_airtable_schema").description,
    )
    async def get_airtable_schema(
        tableId: Annotated[
            str | None,
            Field(description=doc("get_airtable_schema", "tableId")),
        ] = None,
    ) -> str:
        return await run("get_airtable_schema", {"tableId": tableId})

    @server.tool(
        name="get_n8n_workflows",
        description=registry.get("get_n8n_workflows").description,
    )
    async def get_n8n_workflows(
        active: Annotated[
            bool | None,
            Field(description=doc("get_n8n_workflows", "active")),
        ] = None,
    ) -> str:
        return await run("get_n8n_workflows", {"active": active})

    @server.tool(
        name="analyze_workflow_requirements",
        description=registry.get("analyze_workflow_requirements").description,
    )
    async def analyze_workflow_requirements(
        requirements: Annotated[
            str,
            Field(description=doc("analyze_workflow_requirements", "requirements")),
        ],
        context: Annotated[
            dict[str, Any] | None,
            Field(description=doc("analyze_workflow_requirements", "context")),
        ] = None,
        optimize: Annotated[
            bool,
            Field(description=doc("analyze_workflow_requirements", "optimize")),
        ] = False,
    ) -> str:
        return await run(
            "analyze_workflow_requirements",
            {"requirements": requirements, "context": context or {}, "optimize": optimize},
        )

    @server.tool(
        name="send_telegram_message",
        description=registry.get("send_telegram_message").description,
    )
    async def send_telegram_message(
        chat_id: Annotated[str, Field(description=doc("send_telegram_message", "chat_id"))],
        message: Annotated[str, Field(description=doc("send_telegram_message", "message"))],
        parse_mode: Annotated[
            str,
            Field(description=doc("send_telegram_message", "parse_mode")),
        ] = "HTML",
    ) -> str:
        return await run(
            "send_telegram_message",
            {"chat_id": chat_id, "message": message, "parse_mode": parse_mode},
        )

    @server.tool(
        name="get_telegram_updates",
        description=registry.get("get_telegram_updates").description,
    )
    async def get_telegram_updates(
        limit: Annotated[int, Field(description=doc("get_telegram_updates", "limit"))] = 10,
    ) -> str:
        return await run("get_telegram_updates", {"limit": limit})

    logger.info("MCP server %s %s built tools=%s", SERVER_NAME, __version__, registry.names())
    return server


def main() -> None:
    os.environ.setdefault("WORKFLOW_BUILDER_LOG_PREFIX", "mcp")
    services = ServiceContainer()
    settings = services.settings
    server = build_mcp_server(
        host=settings.mcp_host,
        port=settings.mcp_port,
        services=services,
    )
    logger.info(
        "Starting MCP server transport=%s host=%s port=%s",
        settings.mcp_transport,
        settings.mcp_host,
        settings.mcp_port,
    )
    server.run(transport=settings.mcp_transport)


if __name__ == "__main__":
    main()
