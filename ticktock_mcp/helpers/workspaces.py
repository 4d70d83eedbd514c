"""
Helper functions for Clockify workspaces.

This module provides functions for listing workspaces and for picking the
default workspace the server falls back to when a tool call names none.
"""

import logging
from typing import List, Optional

from ticktock_mcp.api.client import ClockifyApiClient
from ticktock_mcp.api.models import Workspace, decode_list

logger = logging.getLogger(__name__)


class NoWorkspaceError(LookupError):
    """Raised when the API key has access to no workspace at all."""


async def get_workspaces(client: ClockifyApiClient) -> List[Workspace]:
    """
    Retrieve all workspaces available to the authenticated user.

    Args:
        client: The Clockify API client

    Returns:
        List[Workspace]: Workspaces in the order the API returns them
    """
    return decode_list(Workspace, await client.get("/workspaces"))


async def resolve_default_workspace_id(
    client: ClockifyApiClient,
    configured_workspace_id: Optional[str] = None,
) -> str:
    """
    Determine the workspace tools use when the caller passes none.

    Args:
        client: The Clockify API client
        configured_workspace_id: Workspace ID from configuration, if any

    Returns:
        str: The configured ID, or the ID of the first listed workspace

    Raises:
        NoWorkspaceError: If no workspace is configured and none exist
        ClockifyAPIError: If listing workspaces fails
    """
    if configured_workspace_id:
        return configured_workspace_id

    workspaces = await get_workspaces(client)
    if not workspaces:
        raise NoWorkspaceError("no workspaces found for this API key")

    logger.info(f"Using workspace '{workspaces[0].name}' ({workspaces[0].id}) as default")
    return workspaces[0].id
