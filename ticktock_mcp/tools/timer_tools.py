"""
MCP tool definitions for Clockify timers.

This module provides MCP tools for starting and stopping the caller's timer
and for looking up running timers of one user or of a whole workspace.
"""

from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from ticktock_mcp.api.errors import ClockifyAPIError
from ticktock_mcp.api.models import TimeEntryCreate
from ticktock_mcp.helpers.timers import (
    ALL_RUNNING_PAGE_SIZE,
    get_all_running_timers as helper_get_all_running_timers,
    get_running_timer as helper_get_running_timer,
    start_timer as helper_start_timer,
    stop_timer as helper_stop_timer,
)
from ticktock_mcp.helpers.users import get_current_user
from ticktock_mcp.tools.registry import (
    READ_ONLY,
    WRITE,
    TagIdsParam,
    ToolRegistry,
    WorkspaceIdParam,
    failure,
    optional,
    result_json,
)
from ticktock_mcp.utils.timestamps import current_utc_time


def register_timer_tools(mcp: FastMCP, registry: ToolRegistry):
    """
    Register all timer-related MCP tools.

    Args:
        mcp: The FastMCP instance
        registry: Shared API client and default workspace
    """

    @mcp.tool(
        name="clockify_timer_start",
        description="Start a new timer in Clockify",
        annotations=WRITE,
        structured_output=False,
    )
    async def timer_start(
        description: Annotated[Optional[str], Field(description="Timer description")] = None,
        project_id: Annotated[Optional[str], Field(description="Project ID")] = None,
        task_id: Annotated[Optional[str], Field(description="Task ID")] = None,
        tag_ids: TagIdsParam = None,
        billable: Annotated[Optional[bool], Field(description="Whether the entry is billable")] = None,
        start: Annotated[
            Optional[str], Field(description="Start time (ISO 8601, defaults to now)")
        ] = None,
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)

        body = TimeEntryCreate(
            start=start or current_utc_time(),
            description=optional(description),
            project_id=optional(project_id),
            task_id=optional(task_id),
            tag_ids=tag_ids or None,
            billable=bool(billable),
        )
        try:
            entry = await helper_start_timer(registry.client, ws_id, body)
        except ClockifyAPIError as e:
            raise failure("start timer", e) from e

        return result_json(entry)

    @mcp.tool(
        name="clockify_timer_stop",
        description="Stop the currently running timer",
        annotations=WRITE,
        structured_output=False,
    )
    async def timer_stop(workspace_id: WorkspaceIdParam = None) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)

        try:
            user = await get_current_user(registry.client)
        except ClockifyAPIError as e:
            raise failure("get current user", e) from e

        try:
            entry = await helper_stop_timer(registry.client, ws_id, user.id)
        except ClockifyAPIError as e:
            raise failure("stop timer", e) from e

        return result_json(entry)

    @mcp.tool(
        name="clockify_timer_current",
        description="Get the currently running timer for a user (defaults to the authenticated user)",
        annotations=READ_ONLY,
        structured_output=False,
    )
    async def timer_current(
        user_id: Annotated[
            Optional[str], Field(description="User ID to check (defaults to authenticated user)")
        ] = None,
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        """
        Look up the running timer of a user.

        When nothing is running the result is a normal (non-error) payload
        with "timer": null.
        """
        ws_id = registry.resolve_workspace_id(workspace_id)

        if not user_id:
            try:
                user = await get_current_user(registry.client)
            except ClockifyAPIError as e:
                raise failure("get current user", e) from e
            user_id = user.id

        try:
            entry = await helper_get_running_timer(registry.client, ws_id, user_id)
        except ClockifyAPIError as e:
            raise failure("get running timer", e) from e

        if entry is None:
            return result_json({"timer": None, "message": "No timer is currently running."})

        return result_json(entry)

    @mcp.tool(
        name="clockify_timer_all_running",
        description=(
            "Get all currently running timers for every user in the workspace "
            "(requires admin API key)"
        ),
        annotations=READ_ONLY,
        structured_output=False,
    )
    async def timer_all_running(workspace_id: WorkspaceIdParam = None) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)

        try:
            running = await helper_get_all_running_timers(
                registry.client, ws_id, page=1, page_size=ALL_RUNNING_PAGE_SIZE
            )
        except ClockifyAPIError as e:
            raise failure("get running timers", e) from e

        if not running:
            return result_json({
                "running_timers": [],
                "count": 0,
                "message": "No timers are currently running.",
            })

        return result_json({"running_timers": running, "count": len(running)})
