"""Analysis error exception.

This module defines the AnalysisError exception raised when a competitor
analysis report cannot be assembled. Individual remote call failures never
raise this error; they are recorded inline in the report instead.
"""

from moz_analytics.exceptions.base import MozAnalyticsError


class AnalysisError(MozAnalyticsError):
    """Raised when competitor report assembly fails."""
    
    pass
