"""
MCP tool definitions for Clockify reports.

Both reports are generated by Clockify's reports API over a date range,
optionally narrowed to one project and/or one user.
"""

from typing import Annotated, List, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from ticktock_mcp.api.errors import ClockifyAPIError
from ticktock_mcp.api.models import (
    DetailedFilter,
    DetailedReportRequest,
    ReportFilter,
    SummaryFilter,
    SummaryReportRequest,
)
from ticktock_mcp.helpers.reports import get_detailed_report, get_summary_report
from ticktock_mcp.tools.registry import (
    READ_ONLY,
    PageParam,
    ToolRegistry,
    WorkspaceIdParam,
    failure,
    page_args,
    require,
    result_json,
)

StartParam = Annotated[
    str, Field(description="Report start date (ISO 8601, e.g. 2024-01-01T00:00:00Z)")
]
EndParam = Annotated[str, Field(description="Report end date (ISO 8601)")]
ProjectFilterParam = Annotated[Optional[str], Field(description="Filter by project ID")]
UserFilterParam = Annotated[Optional[str], Field(description="Filter by user ID")]


def _id_filter(value: Optional[str]) -> Optional[ReportFilter]:
    return ReportFilter(ids=[value]) if value else None


def register_report_tools(mcp: FastMCP, registry: ToolRegistry):
    """
    Register all report-related MCP tools.

    Args:
        mcp: The FastMCP instance
        registry: Shared API client and default workspace
    """

    @mcp.tool(
        name="clockify_report_summary",
        description="Generate a summary report for a workspace",
        annotations=READ_ONLY,
        structured_output=False,
    )
    async def report_summary(
        start: StartParam,
        end: EndParam,
        project_id: ProjectFilterParam = None,
        user_id: UserFilterParam = None,
        groups: Annotated[
            Optional[List[str]],
            Field(description="Grouping, e.g. PROJECT, USER, CLIENT, TAG, TIMEENTRY (default PROJECT, TIMEENTRY)"),
        ] = None,
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)
        require(start, "start")
        require(end, "end")

        body = SummaryReportRequest(
            date_range_start=start,
            date_range_end=end,
            summary_filter=SummaryFilter(groups=groups) if groups else SummaryFilter(),
            projects=_id_filter(project_id),
            users=_id_filter(user_id),
        )
        try:
            report = await get_summary_report(registry.client, ws_id, body)
        except ClockifyAPIError as e:
            raise failure("get summary report", e) from e

        return result_json(report)

    @mcp.tool(
        name="clockify_report_detailed",
        description="Generate a detailed report for a workspace",
        annotations=READ_ONLY,
        structured_output=False,
    )
    async def report_detailed(
        start: StartParam,
        end: EndParam,
        project_id: ProjectFilterParam = None,
        user_id: UserFilterParam = None,
        page: PageParam = None,
        page_size: Annotated[Optional[int], Field(description="Page size (default 50)")] = None,
        sort_column: Annotated[
            Optional[str], Field(description="Sort column, e.g. DATE, DESCRIPTION, USER, DURATION")
        ] = None,
        sort_order: Annotated[
            Optional[str], Field(description="Sort order (ASCENDING or DESCENDING)")
        ] = None,
        workspace_id: WorkspaceIdParam = None,
    ) -> str:
        ws_id = registry.resolve_workspace_id(workspace_id)
        require(start, "start")
        require(end, "end")
        page, page_size = page_args(page, page_size)

        body = DetailedReportRequest(
            date_range_start=start,
            date_range_end=end,
            detailed_filter=DetailedFilter(page=page, page_size=page_size),
            projects=_id_filter(project_id),
            users=_id_filter(user_id),
            sort_column=sort_column or None,
            sort_order=sort_order or None,
            page=page,
            page_size=page_size,
        )
        try:
            report = await get_detailed_report(registry.client, ws_id, body)
        except ClockifyAPIError as e:
            raise failure("get detailed report", e) from e

        return result_json(report)
