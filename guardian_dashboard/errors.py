"""Error taxonomy for the data-fetch layer.

NetworkError, ServiceError and ParseError are raised by the API client and
absorbed by the remote-with-fallback policy. Only DataUnavailable and
EmptySelection ever reach the view-state controller.
"""


class GuardianError(Exception):
    """Base class for all dashboard data errors."""


class NetworkError(GuardianError):
    """Service unreachable or request timed out."""


class ServiceError(GuardianError):
    """Service answered with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(GuardianError):
    """Payload is not valid JSON or does not match the expected schema."""


class DataUnavailable(GuardianError):
    """Neither the remote service nor the fallback store can provide the data."""

    def __init__(self, city_id: str):
        super().__init__(f"No analysis available for '{city_id}'")
        self.city_id = city_id


class EmptySelection(GuardianError):
    """No city selected, or the catalog has no city to select."""


# Errors converted into fallback lookups at the loader boundary
REMOTE_ERRORS = (NetworkError, ServiceError, ParseError)
