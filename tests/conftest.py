"""
Shared fixtures for the Clockify MCP server tests.
"""
import pytest
from mcp.shared.memory import create_connected_server_and_client_session

from ticktock_mcp.api.client import ClockifyApiClient
from ticktock_mcp.server import create_mcp_server

WORKSPACE_ID = "ws123"


@pytest.fixture
def api_client():
    """Create a test Clockify client against the default hosts."""
    return ClockifyApiClient(api_key="test_key")


@pytest.fixture
def mcp_server(api_client):
    """FastMCP server with every tool registered and ws123 as default workspace."""
    return create_mcp_server(api_client, WORKSPACE_ID)


@pytest.fixture
def call_tool(mcp_server):
    """Call a tool through a real in-memory MCP client session."""

    async def _call(name, arguments=None):
        async with create_connected_server_and_client_session(mcp_server._mcp_server) as session:
            return await session.call_tool(name, arguments or {})

    return _call


@pytest.fixture
def list_tools(mcp_server):
    """List tools through a real in-memory MCP client session."""

    async def _list():
        async with create_connected_server_and_client_session(mcp_server._mcp_server) as session:
            return (await session.list_tools()).tools

    return _list
