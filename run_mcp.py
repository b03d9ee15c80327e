#!/usr/bin/env python3
"""Run the workflow builder MCP server."""

import os

os.environ.setdefault("WORKFLOW_BUILDER_LOG_PREFIX", "mcp")

from workflow_builder.mcp_bridge.server import main

if __name__ == "__main__":
    main()
