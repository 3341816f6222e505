"""Missing credential exception.

This module defines the MissingCredentialError exception raised when a
request signature is computed without both an access ID and a secret key.
"""

from moz_analytics.exceptions.base import MozAnalyticsError


class MissingCredentialError(MozAnalyticsError):
    """Raised when signature authentication lacks credential parts."""
    
    pass
