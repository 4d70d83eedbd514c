"""
MCP tool definitions for Clockify time entries.

This module provides MCP tools for listing, creating, updating and deleting
the authenticated user's time entries.
"""

from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from ticktock_mcp.api.errors import ClockifyAPIError
from ticktock_mcp.api.models import TimeEntryCreate, TimeEntryUpdate
from ticktock_mcp.helpers.time_entries import (
    create_time_entry as helper_create_time_entry,
    delete_time_entry as helper_delete_time_entry,
    get_time_entries,
    update_time_entry as helper_update_time_entry,
)
from ticktock_mcp.helpers.users import get_current_user
from ticktock_mcp.tools.registry import (
    DESTRUCTIVE,
    READ_ONLY,
    WRITE,
    PageParam,
    TagIdsParam,
    ToolRegistry,
    WorkspaceIdParam,
    failure,
    optional,
    page_args,
    require,
    result_json,
)

DescriptionParam = Annotated[Optional[str], Field(description="Entry description")]
ProjectIdParam = Annotated[Optional[str], Field(description="Project ID")]
TaskIdParam = Annotated[Optional[str], Field(description="Task ID")]
BillableParam = Annotated[Optional[bool], Field(description="Whether the entry is billable")]


def register_time_entry_tools(mcp: FastMCP, registry: ToolRegistry):
    """
    Register all time entry-related MCP tools.

    Args:
        mcp: The FastMCP instance
        registry: Shared API client and default workspace
    """

    @mcp.tool(
        name="clockify_time_entry_list",
        description="List time entries for the current user (paginated, default page 1, page_size 50)",
        annotations=READ_ONLY,
        structured_output=False,
    )
    async def time_entry_list(
        start: Annotated[
            Optional[str], Field(description="Start date filter (ISO 8601, e.g. 2024-01-01T00:00:00Z)")
        ] = None,
        end: Annotated[Optional[str], Field(description="End date filter (ISO 8601)")] = None,
        project_id: Annotated[Optional[str], Field(description="Filter by project ID")] = None,
        page: PageParam = None,
        page_size: Annotated[
            Optional[int], Field(description="Number of entries per page (default 50)")
        ] = None,
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)

        try:
            user = await get_current_user(registry.client)
        except ClockifyAPIError as e:
            raise failure("get current user", e) from e

        filters = {}
        if start:
            filters["start"] = start
        if end:
            filters["end"] = end
        if project_id:
            filters["project"] = project_id

        page, page_size = page_args(page, page_size)

        try:
            entries = await get_time_entries(
                registry.client, ws_id, user.id, filters, page=page, page_size=page_size
            )
        except ClockifyAPIError as e:
            raise failure("list time entries", e) from e

        return result_json({"entries": entries})

    @mcp.tool(
        name="clockify_time_entry_create",
        description="Create a manual time entry",
        annotations=WRITE,
        structured_output=False,
    )
    async def time_entry_create(
        start: Annotated[str, Field(description="Start time (ISO 8601)")],
        end: Annotated[str, Field(description="End time (ISO 8601)")],
        description: DescriptionParam = None,
        project_id: ProjectIdParam = None,
        task_id: TaskIdParam = None,
        tag_ids: TagIdsParam = None,
        billable: BillableParam = None,
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)
        require(start, "start")
        require(end, "end")

        body = TimeEntryCreate(
            start=start,
            end=end,
            description=optional(description),
            project_id=optional(project_id),
            task_id=optional(task_id),
            tag_ids=tag_ids or None,
            billable=bool(billable),
        )
        try:
            entry = await helper_create_time_entry(registry.client, ws_id, body)
        except ClockifyAPIError as e:
            raise failure("create time entry", e) from e

        return result_json(entry)

    @mcp.tool(
        name="clockify_time_entry_update",
        description="Update an existing time entry",
        annotations=WRITE,
        structured_output=False,
    )
    async def time_entry_update(
        entry_id: Annotated[str, Field(description="Time entry ID to update")],
        start: Annotated[str, Field(description="Start time (ISO 8601)")],
        end: Annotated[Optional[str], Field(description="End time (ISO 8601)")] = None,
        description: DescriptionParam = None,
        project_id: ProjectIdParam = None,
        task_id: TaskIdParam = None,
        tag_ids: TagIdsParam = None,
        billable: BillableParam = None,
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        """
        Replace the mutable fields of a time entry.

        `billable` is only sent when given, so leaving it out keeps the
        entry's current billable flag.
        """
        ws_id = registry.resolve_workspace_id(workspace_id)
        require(entry_id, "entry_id")
        require(start, "start")

        body = TimeEntryUpdate(
            start=start,
            end=optional(end),
            description=optional(description),
            project_id=optional(project_id),
            task_id=optional(task_id),
            tag_ids=tag_ids or None,
            billable=billable,
        )
        try:
            entry = await helper_update_time_entry(registry.client, ws_id, entry_id, body)
        except ClockifyAPIError as e:
            raise failure("update time entry", e) from e

        return result_json(entry)

    @mcp.tool(
        name="clockify_time_entry_delete",
        description="Delete a time entry",
        annotations=DESTRUCTIVE,
        structured_output=False,
    )
    async def time_entry_delete(
        entry_id: Annotated[str, Field(description="Time entry ID to delete")],
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)
        require(entry_id, "entry_id")

        try:
            await helper_delete_time_entry(registry.client, ws_id, entry_id)
        except ClockifyAPIError as e:
            raise failure("delete time entry", e) from e

        return result_json({"deleted": True, "message": "Time entry deleted successfully."})
