"""
Helper functions for Clockify timers.

A timer is not a separate entity: it is a time entry whose interval has no
end yet. Starting one creates such an entry, stopping one sets the end of the
user's open entry.
"""

import logging
from typing import List, Optional

from ticktock_mcp.api.client import ClockifyApiClient
from ticktock_mcp.api.models import TimeEntry, TimeEntryCreate, decode
from ticktock_mcp.helpers.time_entries import (
    create_time_entry,
    get_time_entries,
    user_time_entries_endpoint,
)
from ticktock_mcp.helpers.users import get_workspace_users
from ticktock_mcp.utils.timestamps import current_utc_time

logger = logging.getLogger(__name__)

ALL_RUNNING_PAGE_SIZE = 500


async def start_timer(
    client: ClockifyApiClient,
    workspace_id: str,
    body: TimeEntryCreate,
) -> TimeEntry:
    """
    Start a timer, i.e. create a time entry without an end.

    Any `end` set on `body` is discarded.
    """
    body = body.model_copy(update={"end": None})
    return await create_time_entry(client, workspace_id, body)


async def stop_timer(client: ClockifyApiClient, workspace_id: str, user_id: str) -> TimeEntry:
    """
    Stop the running timer of a user by setting its end to now (UTC).

    Args:
        client: The Clockify API client
        workspace_id: Workspace the timer runs in
        user_id: Owner of the timer

    Returns:
        TimeEntry: The stopped entry
    """
    body = {"end": current_utc_time()}
    data = await client.patch(user_time_entries_endpoint(workspace_id, user_id), body)
    return decode(TimeEntry, data)


async def get_running_timer(
    client: ClockifyApiClient,
    workspace_id: str,
    user_id: str,
) -> Optional[TimeEntry]:
    """
    Fetch the running timer of a user.

    Returns:
        TimeEntry: The in-progress entry
        None: If nothing is running
    """
    entries = await get_time_entries(
        client, workspace_id, user_id, filters={"in-progress": "true"}
    )
    if not entries:
        return None
    return entries[0]


async def get_all_running_timers(
    client: ClockifyApiClient,
    workspace_id: str,
    page: int = 1,
    page_size: int = ALL_RUNNING_PAGE_SIZE,
) -> List[TimeEntry]:
    """
    Collect the running timers of every member of a workspace.

    Users are probed one after another. The first failing probe aborts the
    scan and its error propagates.

    Args:
        client: The Clockify API client
        workspace_id: Workspace to scan
        page: Page of workspace users to scan
        page_size: Number of users to scan (defaults to 500)

    Returns:
        List[TimeEntry]: One entry per user with a running timer
    """
    users = await get_workspace_users(client, workspace_id, page=page, page_size=page_size)
    logger.debug(f"Checking running timers of {len(users)} users in {workspace_id}")

    running = []
    for user in users:
        timer = await get_running_timer(client, workspace_id, user.id)
        if timer is not None:
            running.append(timer)

    return running
