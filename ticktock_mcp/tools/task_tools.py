"""
MCP tool definitions for Clockify tasks.
"""

from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from ticktock_mcp.api.errors import ClockifyAPIError
from ticktock_mcp.api.models import TaskCreate, TaskUpdate
from ticktock_mcp.helpers.tasks import (
    create_task as helper_create_task,
    delete_task as helper_delete_task,
    get_tasks,
    update_task as helper_update_task,
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

ProjectIdParam = Annotated[str, Field(description="Project ID")]
BillableParam = Annotated[Optional[bool], Field(description="Whether the task is billable")]


def register_task_tools(mcp: FastMCP, registry: ToolRegistry):
    """
    Register all task-related MCP tools.

    Args:
        mcp: The FastMCP instance
        registry: Shared API client and default workspace
    """

    @mcp.tool(
        name="clockify_task_list",
        description="List tasks for a project (paginated, default page 1, page_size 50)",
        annotations=READ_ONLY,
        structured_output=False,
    )
    async def task_list(
        project_id: ProjectIdParam,
        page: PageParam = None,
        page_size: Annotated[
            Optional[int], Field(description="Number of tasks per page (default 50)")
        ] = None,
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)
        require(project_id, "project_id")
        page, page_size = page_args(page, page_size)

        try:
            tasks = await get_tasks(registry.client, ws_id, project_id, page=page, page_size=page_size)
        except ClockifyAPIError as e:
            raise failure("list tasks", e) from e

        return result_json(tasks)

    @mcp.tool(
        name="clockify_task_create",
        description="Create a new task in a project",
        annotations=WRITE,
        structured_output=False,
    )
    async def task_create(
        project_id: ProjectIdParam,
        name: Annotated[str, Field(description="Task name")],
        billable: BillableParam = None,
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)
        require(project_id, "project_id")
        require(name, "name")

        try:
            task = await helper_create_task(
                registry.client, ws_id, project_id, TaskCreate(name=name, billable=bool(billable))
            )
        except ClockifyAPIError as e:
            raise failure("create task", e) from e

        return result_json(task)

    @mcp.tool(
        name="clockify_task_update",
        description="Update a task",
        annotations=WRITE,
        structured_output=False,
    )
    async def task_update(
        project_id: ProjectIdParam,
        task_id: Annotated[str, Field(description="Task ID to update")],
        name: Annotated[Optional[str], Field(description="New task name")] = None,
        billable: BillableParam = None,
        status: Annotated[Optional[str], Field(description="Task status (ACTIVE or DONE)")] = None,
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)
        require(project_id, "project_id")
        require(task_id, "task_id")

        body = TaskUpdate(name=optional(name), billable=billable, status=optional(status))
        try:
            task = await helper_update_task(registry.client, ws_id, project_id, task_id, body)
        except ClockifyAPIError as e:
            raise failure("update task", e) from e

        return result_json(task)

    @mcp.tool(
        name="clockify_task_delete",
        description="Delete a task",
        annotations=DESTRUCTIVE,
        structured_output=False,
    )
    async def task_delete(
        project_id: ProjectIdParam,
        task_id: Annotated[str, Field(description="Task ID to delete")],
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)
        require(project_id, "project_id")
        require(task_id, "task_id")

        try:
            await helper_delete_task(registry.client, ws_id, project_id, task_id)
        except ClockifyAPIError as e:
            raise failure("delete task", e) from e

        return result_json({"deleted": True, "message": "Task deleted successfully."})
