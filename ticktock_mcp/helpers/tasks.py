"""
Helper functions for Clockify tasks. Tasks always live under a project.
"""

from typing import List

from ticktock_mcp.api.client import ClockifyApiClient
from ticktock_mcp.api.models import Task, TaskCreate, TaskUpdate, decode, decode_list, dump


def _tasks_endpoint(workspace_id: str, project_id: str) -> str:
    return f"/workspaces/{workspace_id}/projects/{project_id}/tasks"


async def get_tasks(
    client: ClockifyApiClient,
    workspace_id: str,
    project_id: str,
    page: int = 1,
    page_size: int = 50,
) -> List[Task]:
    """
    Retrieve one page of tasks of a project.

    Args:
        client: The Clockify API client
        workspace_id: Workspace the project belongs to
        project_id: Project to list tasks of
        page: Page number (defaults to 1)
        page_size: Number of tasks per page (defaults to 50)

    Returns:
        List[Task]: Tasks on the requested page
    """
    params = {"page": page, "page-size": page_size}
    data = await client.get(_tasks_endpoint(workspace_id, project_id), params=params)
    return decode_list(Task, data)


async def create_task(
    client: ClockifyApiClient,
    workspace_id: str,
    project_id: str,
    body: TaskCreate,
) -> Task:
    data = await client.post(_tasks_endpoint(workspace_id, project_id), dump(body))
    return decode(Task, data)


async def update_task(
    client: ClockifyApiClient,
    workspace_id: str,
    project_id: str,
    task_id: str,
    body: TaskUpdate,
) -> Task:
    """Update a task. Only the fields set on `body` are sent."""
    data = await client.put(f"{_tasks_endpoint(workspace_id, project_id)}/{task_id}", dump(body))
    return decode(Task, data)


async def delete_task(
    client: ClockifyApiClient,
    workspace_id: str,
    project_id: str,
    task_id: str,
) -> None:
    await client.delete(f"{_tasks_endpoint(workspace_id, project_id)}/{task_id}")
