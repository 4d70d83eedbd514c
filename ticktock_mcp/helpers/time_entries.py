"""
Helper functions for Clockify time entries.

This module provides functions for listing, creating, updating and
deleting time entries. Timers are open-ended time entries; see
helpers/timers.py.
"""

from typing import Any, Dict, List, Optional

from ticktock_mcp.api.client import ClockifyApiClient
from ticktock_mcp.api.models import (
    TimeEntry,
    TimeEntryCreate,
    TimeEntryUpdate,
    decode,
    decode_list,
    dump,
)


def user_time_entries_endpoint(workspace_id: str, user_id: str) -> str:
    return f"/workspaces/{workspace_id}/user/{user_id}/time-entries"


async def get_time_entries(
    client: ClockifyApiClient,
    workspace_id: str,
    user_id: str,
    filters: Optional[Dict[str, Any]] = None,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
) -> List[TimeEntry]:
    """
    List time entries of one user in a workspace.

    Args:
        client: The Clockify API client
        workspace_id: Workspace to search in
        user_id: Owner of the entries
        filters: Extra query filters passed through as-is
            (e.g. {"start": ..., "end": ..., "project": ..., "in-progress": "true"})
        page: Optional page number
        page_size: Optional number of entries per page

    Returns:
        List[TimeEntry]: Matching time entries, newest first
    """
    params: Dict[str, Any] = dict(filters or {})
    if page is not None:
        params["page"] = page
    if page_size is not None:
        params["page-size"] = page_size

    data = await client.get(
        user_time_entries_endpoint(workspace_id, user_id),
        params=params or None,
    )
    return decode_list(TimeEntry, data)


async def create_time_entry(
    client: ClockifyApiClient,
    workspace_id: str,
    body: TimeEntryCreate,
) -> TimeEntry:
    """
    Create a time entry for the authenticated user.

    Args:
        client: The Clockify API client
        workspace_id: Workspace to create the entry in
        body: Entry attributes; leaving `end` unset creates a running entry

    Returns:
        TimeEntry: The created entry as returned by Clockify
    """
    data = await client.post(f"/workspaces/{workspace_id}/time-entries", dump(body))
    return decode(TimeEntry, data)


async def update_time_entry(
    client: ClockifyApiClient,
    workspace_id: str,
    entry_id: str,
    body: TimeEntryUpdate,
) -> TimeEntry:
    """
    Replace the mutable fields of a time entry.

    Clockify's PUT is a full replace: description, project, task and tags
    left unset on `body` end up cleared on the entry.

    Returns:
        TimeEntry: The updated entry
    """
    data = await client.put(f"/workspaces/{workspace_id}/time-entries/{entry_id}", dump(body))
    return decode(TimeEntry, data)


async def delete_time_entry(client: ClockifyApiClient, workspace_id: str, entry_id: str) -> None:
    await client.delete(f"/workspaces/{workspace_id}/time-entries/{entry_id}")
