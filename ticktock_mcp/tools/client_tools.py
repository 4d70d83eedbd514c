"""
MCP tool definitions for Clockify billing clients.
"""

from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from ticktock_mcp.api.errors import ClockifyAPIError
from ticktock_mcp.api.models import ClientCreate, ClientUpdate
from ticktock_mcp.helpers.clients import (
    create_client as helper_create_client,
    delete_client as helper_delete_client,
    get_clients,
    update_client as helper_update_client,
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


def register_client_tools(mcp: FastMCP, registry: ToolRegistry):
    """
    Register all billing client-related MCP tools.

    Args:
        mcp: The FastMCP instance
        registry: Shared API client and default workspace
    """

    @mcp.tool(
        name="clockify_client_list",
        description="List clients in a workspace (paginated, default page 1, page_size 50)",
        annotations=READ_ONLY,
        structured_output=False,
    )
    async def client_list(
        page: PageParam = None,
        page_size: Annotated[
            Optional[int], Field(description="Number of clients per page (default 50)")
        ] = None,
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)
        page, page_size = page_args(page, page_size)

        try:
            clients = await get_clients(registry.client, ws_id, page=page, page_size=page_size)
        except ClockifyAPIError as e:
            raise failure("list clients", e) from e

        return result_json({"clients": clients})

    @mcp.tool(
        name="clockify_client_create",
        description="Create a new client",
        annotations=WRITE,
        structured_output=False,
    )
    async def client_create(
        name: Annotated[str, Field(description="Client name")],
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)
        require(name, "name")

        try:
            client = await helper_create_client(registry.client, ws_id, ClientCreate(name=name))
        except ClockifyAPIError as e:
            raise failure("create client", e) from e

        return result_json(client)

    @mcp.tool(
        name="clockify_client_update",
        description="Update a client",
        annotations=WRITE,
        structured_output=False,
    )
    async def client_update(
        client_id: Annotated[str, Field(description="Client ID to update")],
        name: Annotated[Optional[str], Field(description="New client name")] = None,
        archived: Annotated[Optional[bool], Field(description="Whether the client is archived")] = None,
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)
        require(client_id, "client_id")

        body = ClientUpdate(name=optional(name), archived=archived)
        try:
            client = await helper_update_client(registry.client, ws_id, client_id, body)
        except ClockifyAPIError as e:
            raise failure("update client", e) from e

        return result_json(client)

    @mcp.tool(
        name="clockify_client_delete",
        description="Delete a client",
        annotations=DESTRUCTIVE,
        structured_output=False,
    )
    async def client_delete(
        client_id: Annotated[str, Field(description="Client ID to delete")],
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)
        require(client_id, "client_id")

        try:
            await helper_delete_client(registry.client, ws_id, client_id)
        except ClockifyAPIError as e:
            raise failure("delete client", e) from e

        return result_json({"deleted": True, "message": "Client deleted successfully."})
