"""
Timestamp helpers for Clockify API interactions.

Clockify takes and returns UTC instants; the server does no local timezone
conversion.
"""

import datetime
from datetime import timezone
from typing import Optional

UTC_API_FORMAT = "%Y-%m-%dT%H:%M:%SZ"  # e.g. 2025-04-09T16:15:22Z


def format_utc(moment: datetime.datetime) -> str:
    """
    Format a datetime the way Clockify expects it.

    Naive datetimes are taken to be UTC already.
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime(UTC_API_FORMAT)


def current_utc_time(now: Optional[datetime.datetime] = None) -> str:
    """
    Get the current UTC time formatted for the Clockify API.

    Returns:
        str: e.g. '2025-04-09T16:15:22Z'
    """
    return format_utc(now or datetime.datetime.now(timezone.utc))
