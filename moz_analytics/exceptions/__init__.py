"""Custom exception classes for the Moz analytics client.

This package contains the exception hierarchy:
- MozAnalyticsError: Base exception for all client errors
- InvalidArgumentError: Raised when a required tool argument is missing
- NetworkError: Raised when the Moz API cannot be reached
- ApiError: Raised when the Moz API returns an error envelope
- MissingCredentialError: Raised when a signature needs both credential parts
- AnalysisError: Raised when competitor report assembly fails
- ToolExecutionError: Raised when a tool invocation fails
- UnknownToolError: Raised when a tool name is not registered
"""

from moz_analytics.exceptions.analysis_error import AnalysisError
from moz_analytics.exceptions.api_error import ApiError
from moz_analytics.exceptions.base import MozAnalyticsError
from moz_analytics.exceptions.credential_error import MissingCredentialError
from moz_analytics.exceptions.network_error import NetworkError
from moz_analytics.exceptions.tool_error import (
    InvalidArgumentError,
    ToolExecutionError,
    UnknownToolError,
)

__all__ = [
    "MozAnalyticsError",
    "InvalidArgumentError",
    "NetworkError",
    "ApiError",
    "MissingCredentialError",
    "AnalysisError",
    "ToolExecutionError",
    "UnknownToolError",
]
