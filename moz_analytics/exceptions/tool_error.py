"""Tool layer exceptions.

This module defines the errors raised by the tool dispatch layer:
argument validation failures, unknown tool names and execution failures
wrapping any error raised by the client.
"""

from moz_analytics.exceptions.base import MozAnalyticsError


class InvalidArgumentError(MozAnalyticsError):
    """Raised when a required tool argument is missing.
    
    This error is raised before any remote call is made.
    """
    
    pass


class UnknownToolError(MozAnalyticsError):
    """Raised when a tool name is not part of the tool catalog."""
    
    pass


class ToolExecutionError(MozAnalyticsError):
    """Raised when a tool invocation fails.
    
    Wraps the underlying error and tags it with the tool name, using the
    message format ``"Error executing {tool_name}: {message}"``.
    
    Attributes:
        tool_name: Name of the tool that failed
    """
    
    def __init__(
        self,
        tool_name: str,
        message: str,
        context: dict | None = None,
    ) -> None:
        super().__init__(f"Error executing {tool_name}: {message}", context=context)
        self.tool_name = tool_name
