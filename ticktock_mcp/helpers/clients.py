"""
Helper functions for Clockify billing clients.

Billing clients group projects for invoicing; they have nothing to do with
the API client object passed around as `client`.
"""

from typing import List

from ticktock_mcp.api.client import ClockifyApiClient
from ticktock_mcp.api.models import (
    ClientCreate,
    ClientUpdate,
    ClockifyClient,
    decode,
    decode_list,
    dump,
)


async def get_clients(
    client: ClockifyApiClient,
    workspace_id: str,
    page: int = 1,
    page_size: int = 50,
) -> List[ClockifyClient]:
    """
    Retrieve one page of billing clients in a workspace.

    Args:
        client: The Clockify API client
        workspace_id: Workspace to list clients of
        page: Page number (defaults to 1)
        page_size: Number of clients per page (defaults to 50)

    Returns:
        List[ClockifyClient]: Billing clients on the requested page
    """
    params = {"page": page, "page-size": page_size}
    data = await client.get(f"/workspaces/{workspace_id}/clients", params=params)
    return decode_list(ClockifyClient, data)


async def create_client(
    client: ClockifyApiClient,
    workspace_id: str,
    body: ClientCreate,
) -> ClockifyClient:
    data = await client.post(f"/workspaces/{workspace_id}/clients", dump(body))
    return decode(ClockifyClient, data)


async def update_client(
    client: ClockifyApiClient,
    workspace_id: str,
    client_id: str,
    body: ClientUpdate,
) -> ClockifyClient:
    data = await client.put(f"/workspaces/{workspace_id}/clients/{client_id}", dump(body))
    return decode(ClockifyClient, data)


async def delete_client(client: ClockifyApiClient, workspace_id: str, client_id: str) -> None:
    await client.delete(f"/workspaces/{workspace_id}/clients/{client_id}")
