"""
MCP tool definitions for Clockify projects.

This module provides MCP tools for managing Clockify projects, including
listing, creating, updating and deleting projects.
"""

from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from ticktock_mcp.api.errors import ClockifyAPIError
from ticktock_mcp.api.models import ProjectCreate, ProjectUpdate
from ticktock_mcp.helpers.projects import (
    create_project as helper_create_project,
    delete_project as helper_delete_project,
    get_projects,
    update_project as helper_update_project,
)
from ticktock_mcp.tools.registry import (
    DESTRUCTIVE,
    READ_ONLY,
    WRITE,
    PageParam,
    ToolRegistry,
    WorkspaceIdParam,
    failure,
    optional,
    page_args,
    require,
    result_json,
)


def register_project_tools(mcp: FastMCP, registry: ToolRegistry):
    """
    Register all project-related MCP tools.

    Args:
        mcp: The FastMCP instance
        registry: Shared API client and default workspace
    """

    @mcp.tool(
        name="clockify_project_list",
        description="List projects in a workspace (paginated, default page 1, page_size 50)",
        annotations=READ_ONLY,
        structured_output=False,
    )
    async def project_list(
        archived: Annotated[
            Optional[bool], Field(description="Only archived (true) or only active (false) projects")
        ] = None,
        page: PageParam = None,
        page_size: Annotated[
            Optional[int], Field(description="Number of projects per page (default 50)")
        ] = None,
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)
        page, page_size = page_args(page, page_size)

        try:
            projects = await get_projects(
                registry.client, ws_id, archived=archived, page=page, page_size=page_size
            )
        except ClockifyAPIError as e:
            raise failure("list projects", e) from e

        return result_json(projects)

    @mcp.tool(
        name="clockify_project_create",
        description="Create a new project",
        annotations=WRITE,
        structured_output=False,
    )
    async def project_create(
        name: Annotated[str, Field(description="Project name")],
        client_id: Annotated[Optional[str], Field(description="Client ID")] = None,
        billable: Annotated[Optional[bool], Field(description="Whether the project is billable")] = None,
        color: Annotated[Optional[str], Field(description="Project color (hex, e.g. #FF0000)")] = None,
        is_public: Annotated[
            Optional[bool], Field(description="Whether the project is public (default true)")
        ] = None,
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)
        require(name, "name")

        body = ProjectCreate(
            name=name,
            client_id=optional(client_id),
            billable=bool(billable),
            color=optional(color),
            is_public=True if is_public is None else is_public,
        )
        try:
            project = await helper_create_project(registry.client, ws_id, body)
        except ClockifyAPIError as e:
            raise failure("create project", e) from e

        return result_json(project)

    @mcp.tool(
        name="clockify_project_update",
        description="Update an existing project",
        annotations=WRITE,
        structured_output=False,
    )
    async def project_update(
        project_id: Annotated[str, Field(description="Project ID to update")],
        name: Annotated[Optional[str], Field(description="New project name")] = None,
        client_id: Annotated[Optional[str], Field(description="Client ID")] = None,
        billable: Annotated[Optional[bool], Field(description="Whether the project is billable")] = None,
        color: Annotated[Optional[str], Field(description="Project color (hex)")] = None,
        archived: Annotated[Optional[bool], Field(description="Whether the project is archived")] = None,
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        """Only the fields the caller passes are sent; booleans may be sent as false."""
        ws_id = registry.resolve_workspace_id(workspace_id)
        require(project_id, "project_id")

        body = ProjectUpdate(
            name=optional(name),
            client_id=optional(client_id),
            billable=billable,
            color=optional(color),
            archived=archived,
        )
        try:
            project = await helper_update_project(registry.client, ws_id, project_id, body)
        except ClockifyAPIError as e:
            raise failure("update project", e) from e

        return result_json(project)

    @mcp.tool(
        name="clockify_project_delete",
        description="Delete a project",
        annotations=DESTRUCTIVE,
        structured_output=False,
    )
    async def project_delete(
        project_id: Annotated[str, Field(description="Project ID to delete")],
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)
        require(project_id, "project_id")

        try:
            await helper_delete_project(registry.client, ws_id, project_id)
        except ClockifyAPIError as e:
            raise failure("delete project", e) from e

        return result_json({"deleted": True, "message": "Project deleted successfully."})
