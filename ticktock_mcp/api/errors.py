"""
Exceptions raised by the Clockify API client.
"""

from typing import Optional

ENCODE_ERROR = "encode_error"
REQUEST_ERROR = "request_error"
TRANSPORT_ERROR = "transport_error"
RATE_LIMITED = "rate_limited"
API_ERROR = "api_error"
DECODE_ERROR = "decode_error"

RATE_LIMIT_MESSAGE = "clockify rate limit exceeded, try again later"


class ClockifyAPIError(Exception):
    """
    Error raised for any failed Clockify call.

    `code` tells the failure kinds apart; `status_code` is only set when the
    server answered.
    """

    def __init__(self, code: str, message: str, status_code: Optional[int] = None):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)
