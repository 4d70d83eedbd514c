"""
MCP tool definitions for Clockify tags.
"""

from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from ticktock_mcp.api.errors import ClockifyAPIError
from ticktock_mcp.api.models import TagCreate, TagUpdate
from ticktock_mcp.helpers.tags import (
    create_tag as helper_create_tag,
    delete_tag as helper_delete_tag,
    get_tags,
    update_tag as helper_update_tag,
)
from ticktock_mcp.tools.registry import (
    DESTRUCTIVE,
    READ_ONLY,
    WRITE,
    ToolRegistry,
    WorkspaceIdParam,
    failure,
    optional,
    require,
    result_json,
)


def register_tag_tools(mcp: FastMCP, registry: ToolRegistry):
    """
    Register all tag-related MCP tools.

    Args:
        mcp: The FastMCP instance
        registry: Shared API client and default workspace
    """

    @mcp.tool(
        name="clockify_tag_list",
        description="List all tags in a workspace",
        annotations=READ_ONLY,
        structured_output=False,
    )
    async def tag_list(workspace_id: WorkspaceIdParam = None) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)

        try:
            tags = await get_tags(registry.client, ws_id)
        except ClockifyAPIError as e:
            raise failure("list tags", e) from e

        return result_json(tags)

    @mcp.tool(
        name="clockify_tag_create",
        description="Create a new tag",
        annotations=WRITE,
        structured_output=False,
    )
    async def tag_create(
        name: Annotated[str, Field(description="Tag name")],
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)
        require(name, "name")

        try:
            tag = await helper_create_tag(registry.client, ws_id, TagCreate(name=name))
        except ClockifyAPIError as e:
            raise failure("create tag", e) from e

        return result_json(tag)

    @mcp.tool(
        name="clockify_tag_update",
        description="Update a tag",
        annotations=WRITE,
        structured_output=False,
    )
    async def tag_update(
        tag_id: Annotated[str, Field(description="Tag ID to update")],
        name: Annotated[Optional[str], Field(description="New tag name")] = None,
        archived: Annotated[Optional[bool], Field(description="Whether the tag is archived")] = None,
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)
        require(tag_id, "tag_id")

        body = TagUpdate(name=optional(name), archived=archived)
        try:
            tag = await helper_update_tag(registry.client, ws_id, tag_id, body)
        except ClockifyAPIError as e:
            raise failure("update tag", e) from e

        return result_json(tag)

    @mcp.tool(
        name="clockify_tag_delete",
        description="Delete a tag",
        annotations=DESTRUCTIVE,
        structured_output=False,
    )
    async def tag_delete(
        tag_id: Annotated[str, Field(description="Tag ID to delete")],
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)
        require(tag_id, "tag_id")

        try:
            await helper_delete_tag(registry.client, ws_id, tag_id)
        except ClockifyAPIError as e:
            raise failure("delete tag", e) from e

        return result_json({"deleted": True, "message": "Tag deleted successfully."})
