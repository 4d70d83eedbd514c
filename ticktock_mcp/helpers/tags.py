"""
Helper functions for Clockify tags.
"""

from typing import List

from ticktock_mcp.api.client import ClockifyApiClient
from ticktock_mcp.api.models import Tag, TagCreate, TagUpdate, decode, decode_list, dump


async def get_tags(client: ClockifyApiClient, workspace_id: str) -> List[Tag]:
    """List all tags in a workspace."""
    return decode_list(Tag, await client.get(f"/workspaces/{workspace_id}/tags"))


async def create_tag(client: ClockifyApiClient, workspace_id: str, body: TagCreate) -> Tag:
    data = await client.post(f"/workspaces/{workspace_id}/tags", dump(body))
    return decode(Tag, data)


async def update_tag(
    client: ClockifyApiClient,
    workspace_id: str,
    tag_id: str,
    body: TagUpdate,
) -> Tag:
    """Rename and/or (un)archive a tag. Unset fields are left alone."""
    data = await client.put(f"/workspaces/{workspace_id}/tags/{tag_id}", dump(body))
    return decode(Tag, data)


async def delete_tag(client: ClockifyApiClient, workspace_id: str, tag_id: str) -> None:
    await client.delete(f"/workspaces/{workspace_id}/tags/{tag_id}")
