"""
Helper functions for Clockify reports.

Reports are served by a separate host; both operations are POSTs.
"""

from ticktock_mcp.api.client import ClockifyApiClient
from ticktock_mcp.api.models import (
    DetailedReport,
    DetailedReportRequest,
    SummaryReport,
    SummaryReportRequest,
    decode,
    dump,
)


async def get_summary_report(
    client: ClockifyApiClient,
    workspace_id: str,
    body: SummaryReportRequest,
) -> SummaryReport:
    """
    Generate a summary report: totals grouped by the requested dimensions.

    Args:
        client: The Clockify API client
        workspace_id: Workspace to report on
        body: Date range, grouping and optional user/project filters

    Returns:
        SummaryReport: Totals and first-level groups
    """
    data = await client.post_report(f"/workspaces/{workspace_id}/reports/summary", dump(body))
    return decode(SummaryReport, data)


async def get_detailed_report(
    client: ClockifyApiClient,
    workspace_id: str,
    body: DetailedReportRequest,
) -> DetailedReport:
    """Generate one page of a detailed report (individual time entries)."""
    data = await client.post_report(f"/workspaces/{workspace_id}/reports/detailed", dump(body))
    return decode(DetailedReport, data)
