"""API error exception.

This module defines the ApiError exception raised when the Moz API
returns a well-formed JSON-RPC error envelope.
"""

from typing import Any

from moz_analytics.exceptions.base import MozAnalyticsError


class ApiError(MozAnalyticsError):
    """Raised when the remote service answers with an error object.
    
    The exception message follows the format
    ``"Moz API Error: {message} (Code: {code})"`` while the raw values are
    kept on the instance.
    
    Attributes:
        code: JSON-RPC error code
        api_message: Error message as sent by the server
        data: Optional additional error data sent by the server
    """
    
    def __init__(
        self,
        code: int,
        message: str,
        data: Any = None,
        context: dict | None = None,
    ) -> None:
        """Initialize API error.
        
        Args:
            code: JSON-RPC error code
            message: Error message returned by the server
            data: Optional error payload returned by the server
            context: Optional dictionary with additional error context
        """
        super().__init__(f"Moz API Error: {message} (Code: {code})", context=context)
        self.code = code
        self.api_message = message
        self.data = data
