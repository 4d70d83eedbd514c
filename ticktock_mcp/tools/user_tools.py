"""
MCP tool definitions for Clockify users.
"""

from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from ticktock_mcp.api.errors import ClockifyAPIError
from ticktock_mcp.helpers.users import get_current_user, get_workspace_users
from ticktock_mcp.tools.registry import (
    READ_ONLY,
    PageParam,
    ToolRegistry,
    WorkspaceIdParam,
    failure,
    result_json,
)


def register_user_tools(mcp: FastMCP, registry: ToolRegistry):
    """
    Register all user-related MCP tools.

    Args:
        mcp: The FastMCP instance
        registry: Shared API client and default workspace
    """

    @mcp.tool(
        name="clockify_user_current",
        description="Get the current authenticated user",
        annotations=READ_ONLY,
        structured_output=False,
    )
    async def user_current() -> str:
        try:
            user = await get_current_user(registry.client)
        except ClockifyAPIError as e:
            raise failure("get current user", e) from e

        return result_json(user)

    @mcp.tool(
        name="clockify_user_list",
        description="List all users in a workspace",
        annotations=READ_ONLY,
        structured_output=False,
    )
    async def user_list(
        page: PageParam = None,
        page_size: Annotated[Optional[int], Field(description="Number of users per page")] = None,
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)

        try:
            users = await get_workspace_users(registry.client, ws_id, page=page, page_size=page_size)
        except ClockifyAPIError as e:
            raise failure("list users", e) from e

        return result_json(users)
