"""
Exceptions raised by the DOOM API gateway.
"""

from typing import Optional


class ApiError(Exception):
    """Base class for all gateway failures."""
    pass


class ApiRequestError(ApiError):
    """Raised when a request cannot be completed or returns a non-2xx status."""

    def __init__(self, message: str, url: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ApiDecodeError(ApiError):
    """Raised when a response body does not match the expected JSON shape."""
    pass
