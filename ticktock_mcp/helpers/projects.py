"""
Helper functions for Clockify projects.

This module provides functions for listing, creating, updating and
deleting projects within a workspace.
"""

from typing import List, Optional

from ticktock_mcp.api.client import ClockifyApiClient
from ticktock_mcp.api.models import (
    Project,
    ProjectCreate,
    ProjectUpdate,
    decode,
    decode_list,
    dump,
)


async def get_projects(
    client: ClockifyApiClient,
    workspace_id: str,
    archived: Optional[bool] = None,
    page: int = 1,
    page_size: int = 50,
) -> List[Project]:
    """
    Retrieve one page of projects in a workspace.

    Args:
        client: The Clockify API client
        workspace_id: ID of the workspace to fetch projects from
        archived: Filter on archived state; None leaves the filter off
        page: Page number (defaults to 1)
        page_size: Number of projects per page (defaults to 50)

    Returns:
        List[Project]: Projects on the requested page
    """
    params = {"page": page, "page-size": page_size}
    if archived is not None:
        params["archived"] = "true" if archived else "false"

    data = await client.get(f"/workspaces/{workspace_id}/projects", params=params)
    return decode_list(Project, data)


async def create_project(
    client: ClockifyApiClient,
    workspace_id: str,
    body: ProjectCreate,
) -> Project:
    """
    Create a project.

    Args:
        client: The Clockify API client
        workspace_id: Workspace to create the project in
        body: Project attributes

    Returns:
        Project: The created project
    """
    data = await client.post(f"/workspaces/{workspace_id}/projects", dump(body))
    return decode(Project, data)


async def update_project(
    client: ClockifyApiClient,
    workspace_id: str,
    project_id: str,
    body: ProjectUpdate,
) -> Project:
    """
    Update a project. Only the fields set on `body` are sent.

    Returns:
        Project: The project as stored after the update
    """
    data = await client.put(f"/workspaces/{workspace_id}/projects/{project_id}", dump(body))
    return decode(Project, data)


async def delete_project(client: ClockifyApiClient, workspace_id: str, project_id: str) -> None:
    await client.delete(f"/workspaces/{workspace_id}/projects/{project_id}")
