"""
Shared plumbing for the Clockify MCP tools.

Holds the registry every tool module closes over (API client plus default
workspace), the common parameter types, and the result/error conventions:
successful tools return a JSON string, which FastMCP sends back as a single
text block; failing tools raise ToolError, which FastMCP sends back as an
error result. Tools are registered with structured_output=False so no
structured content or output schema ever accompanies the text.
"""

import json
from typing import Annotated, Any, List, Optional

from mcp.server.fastmcp.exceptions import ToolError
from mcp.types import ToolAnnotations
from pydantic import BaseModel, Field

from ticktock_mcp.api.client import ClockifyApiClient
from ticktock_mcp.api.errors import ClockifyAPIError

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 50

READ_ONLY = ToolAnnotations(readOnlyHint=True, openWorldHint=True)
WRITE = ToolAnnotations(readOnlyHint=False, destructiveHint=False, openWorldHint=True)
DESTRUCTIVE = ToolAnnotations(readOnlyHint=False, destructiveHint=True, openWorldHint=True)

WorkspaceIdParam = Annotated[
    Optional[str], Field(description="Workspace ID (uses default if not provided)")
]
PageParam = Annotated[Optional[int], Field(description="Page number (default 1)")]
TagIdsParam = Annotated[Optional[List[str]], Field(description="Tag IDs")]


class ToolRegistry:
    """
    State shared by all tools: the API client and the default workspace.

    Both are set once at construction and only read afterwards.
    """

    def __init__(self, client: ClockifyApiClient, default_workspace_id: Optional[str] = None):
        self._client = client
        self._default_workspace_id = default_workspace_id or ""

    @property
    def client(self) -> ClockifyApiClient:
        return self._client

    def workspace_id(self, override: Optional[str] = None) -> str:
        """Return the provided workspace ID or fall back to the default."""
        if override:
            return override
        return self._default_workspace_id

    def resolve_workspace_id(self, override: Optional[str] = None) -> str:
        """Like workspace_id, but a tool error when neither is set."""
        workspace_id = self.workspace_id(override)
        if not workspace_id:
            raise ToolError("workspace_id is required")
        return workspace_id


def require(value: Any, name: str) -> Any:
    """Reject a missing or empty required argument."""
    if value is None or value == "":
        raise ToolError(f"{name} is required")
    return value


def optional(value: Optional[str]) -> Optional[str]:
    """Treat an empty string argument as not given."""
    return value or None


def page_args(page: Optional[int], page_size: Optional[int]) -> tuple:
    return (page or DEFAULT_PAGE, page_size or DEFAULT_PAGE_SIZE)


def failure(action: str, error: ClockifyAPIError) -> ToolError:
    """Build the error raised when an API call behind a tool fails."""
    return ToolError(f"Failed to {action}: {error}")


def _jsonable(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(data, (list, tuple)):
        return [_jsonable(item) for item in data]
    if isinstance(data, dict):
        return {key: _jsonable(value) for key, value in data.items()}
    return data


def result_json(data: Any) -> str:
    """
    Encode a tool result as JSON text.

    Models are written in Clockify's wire form (camelCase, unset fields
    dropped).
    """
    try:
        return json.dumps(_jsonable(data))
    except (TypeError, ValueError) as e:
        raise ToolError(f"marshal JSON result: {e}") from e

