"""
Clockify MCP Server

This is the main entry point for the ticktock MCP server.
It creates an MCP server that exposes Clockify as a set of tools and serves
it over stdio.
"""

import asyncio
import logging
import sys

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from ticktock_mcp.api.client import ClockifyApiClient
from ticktock_mcp.api.errors import ClockifyAPIError
from ticktock_mcp.helpers.workspaces import NoWorkspaceError, resolve_default_workspace_id
from ticktock_mcp.tools.client_tools import register_client_tools
from ticktock_mcp.tools.project_tools import register_project_tools
from ticktock_mcp.tools.registry import ToolRegistry
from ticktock_mcp.tools.report_tools import register_report_tools
from ticktock_mcp.tools.tag_tools import register_tag_tools
from ticktock_mcp.tools.task_tools import register_task_tools
from ticktock_mcp.tools.time_entry_tools import register_time_entry_tools
from ticktock_mcp.tools.timer_tools import register_timer_tools
from ticktock_mcp.tools.user_tools import register_user_tools
from ticktock_mcp.tools.workspace_tools import register_workspace_tools
from ticktock_mcp.utils.config import ConfigError, load_config
from ticktock_mcp.utils.logging import configure_logging

logger = logging.getLogger(__name__)

SERVER_NAME = "ticktock-mcp"

instructions = """
All Clockify timestamps are ISO 8601 in UTC (e.g. "2024-01-01T09:00:00Z").
Tools that take a workspace_id fall back to the server's default workspace
when it is omitted. Results are JSON text in Clockify's own field names.
"""


def create_mcp_server(api_client: ClockifyApiClient, default_workspace_id: str) -> FastMCP:
    """
    Create and configure the MCP server with Clockify tools.

    Args:
        api_client: Client used by every tool
        default_workspace_id: Workspace used when a tool call names none

    Returns:
        FastMCP: The configured MCP server
    """
    mcp = FastMCP(SERVER_NAME, instructions=instructions)

    registry = ToolRegistry(api_client, default_workspace_id)

    register_timer_tools(mcp, registry)
    register_time_entry_tools(mcp, registry)
    register_project_tools(mcp, registry)
    register_task_tools(mcp, registry)
    register_tag_tools(mcp, registry)
    register_client_tools(mcp, registry)
    register_workspace_tools(mcp, registry)
    register_user_tools(mcp, registry)
    register_report_tools(mcp, registry)

    return mcp


def main() -> None:
    load_dotenv()
    configure_logging()

    try:
        config = load_config()
    except ConfigError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    api_client = ClockifyApiClient(
        config.api_key,
        base_url=config.base_url,
        reports_url=config.reports_url,
    )

    try:
        workspace_id = asyncio.run(resolve_default_workspace_id(api_client, config.workspace_id))
    except ClockifyAPIError as e:
        logger.error(f"Error fetching workspaces: {e}")
        sys.exit(1)
    except NoWorkspaceError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    mcp = create_mcp_server(api_client, workspace_id)

    try:
        mcp.run()
    except Exception:
        logger.exception("Server error")
        sys.exit(1)


if __name__ == "__main__":
    main()
