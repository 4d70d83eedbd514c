"""
Helper functions for Clockify users.
"""

from typing import List, Optional

from ticktock_mcp.api.client import ClockifyApiClient
from ticktock_mcp.api.models import User, decode, decode_list


async def get_current_user(client: ClockifyApiClient) -> User:
    """Fetch the user the API key belongs to."""
    return decode(User, await client.get("/user"))


async def get_workspace_users(
    client: ClockifyApiClient,
    workspace_id: str,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
) -> List[User]:
    """
    List the members of a workspace.

    Args:
        client: The Clockify API client
        workspace_id: Workspace to list members of
        page: Optional page number
        page_size: Optional number of users per page

    Returns:
        List[User]: Workspace members
    """
    params = {}
    if page is not None:
        params["page"] = page
    if page_size is not None:
        params["page-size"] = page_size

    data = await client.get(f"/workspaces/{workspace_id}/users", params=params or None)
    return decode_list(User, data)
