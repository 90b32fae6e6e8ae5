"""Application-level exceptions and error classification."""

import re

from gomate.domain.exceptions import UpstreamApiError
from gomate.domain.models.error_details import ErrorDetails


class StationSearchError(LookupError):
    """A station search produced no usable station."""


class DestinationNotFoundError(LookupError):
    """No destination with the requested id is loaded."""


class ValidationFailedError(ValueError):
    """User input was rejected before any request was made."""


class NoConnectionsError(LookupError):
    """A journey search returned no connections."""


class AuthenticationFailedError(RuntimeError):
    """Login was rejected or could not be completed."""


def extract_error_details(error: Exception) -> ErrorDetails:
    """Extract HTTP status code and error reason from an exception."""
    status_code = error.status_code if isinstance(error, UpstreamApiError) else None
    if status_code is None:
        # Format: "Got response (502) from ..."
        status_match = re.search(r"\((\d{3})\)", str(error))
        status_code = int(status_match.group(1)) if status_match else None

    if status_code == 400:
        reason = "Bad request"
    elif status_code == 429:
        reason = "Rate limit exceeded"
    elif status_code == 502:
        reason = "Bad gateway (server error)"
    elif status_code == 503:
        reason = "Service unavailable"
    elif status_code == 504:
        reason = "Gateway timeout"
    elif status_code is not None:
        reason = f"HTTP {status_code}"
    elif isinstance(error, (StationSearchError, DestinationNotFoundError, NoConnectionsError)):
        reason = "Not found"
    else:
        reason = "Unknown error"

    return ErrorDetails(status_code=status_code, reason=reason)
