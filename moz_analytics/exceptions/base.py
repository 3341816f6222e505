"""Base exception class for all Moz analytics errors.

This module defines the MozAnalyticsError class that serves as the base
for all custom exceptions in the package. Catching MozAnalyticsError
catches every error raised by the client, the analysis engine and the
tool layer.
"""


class MozAnalyticsError(Exception):
    """Base exception for all Moz analytics errors.
    
    Attributes:
        message: Error message describing what went wrong
        context: Optional dictionary with additional error context
    """
    
    def __init__(
        self,
        message: str,
        context: dict | None = None
    ) -> None:
        """Initialize base error.
        
        Args:
            message: Human-readable error message
            context: Optional dictionary with additional error context
                (e.g., RPC method, HTTP status, tool name)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
    
    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message
    
    def __repr__(self) -> str:
        """Return detailed representation of the error.
        
        Returns:
            Detailed error representation including context
        """
        context_str = f", context={self.context}" if self.context else ""
        return f"{self.__class__.__name__}({self.message!r}{context_str})"
