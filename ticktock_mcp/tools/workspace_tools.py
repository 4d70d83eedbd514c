"""
MCP tool definitions for Clockify workspaces.
"""

from mcp.server.fastmcp import FastMCP

from ticktock_mcp.api.errors import ClockifyAPIError
from ticktock_mcp.helpers.workspaces import get_workspaces
from ticktock_mcp.tools.registry import READ_ONLY, ToolRegistry, failure, result_json


def register_workspace_tools(mcp: FastMCP, registry: ToolRegistry):
    """Register all workspace-related MCP tools."""

    @mcp.tool(
        name="clockify_workspace_list",
        description="List all workspaces available to the current user",
        annotations=READ_ONLY,
        structured_output=False,
    )
    async def workspace_list() -> str:
        try:
            workspaces = await get_workspaces(registry.client)
        except ClockifyAPIError as e:
            raise failure("list workspaces", e) from e

        return result_json(workspaces)
