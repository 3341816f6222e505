"""Network error exception.

This module defines the NetworkError exception raised when the Moz API
cannot be reached or answers with something that is not a JSON-RPC
envelope (connection refused, timeout, non-2xx status without a parseable
body).
"""

from typing import Any

from moz_analytics.exceptions.base import MozAnalyticsError


class NetworkError(MozAnalyticsError):
    """Raised when a request fails at the transport level.
    
    Attributes:
        http_status: HTTP status code, if a response was received
        raw_body: Raw response body, if one was received
    """
    
    def __init__(
        self,
        message: str,
        http_status: int | None = None,
        raw_body: Any = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message, context=context)
        self.http_status = http_status
        self.raw_body = raw_body
