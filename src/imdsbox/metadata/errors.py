"""Instance metadata error mapping."""

from __future__ import annotations

from typing import Optional

from requests.exceptions import ConnectionError, HTTPError, RequestException, Timeout


class ImdsboxError(Exception):
    """Base imdsbox error."""


class InvalidBaseURLError(ImdsboxError, ValueError):
    """Malformed metadata base URL given at construction time."""


class ConfigError(ImdsboxError):
    """Config file cannot be read or holds invalid values."""


class MetadataError(ImdsboxError):
    """Metadata request failed.

    Attributes:
        path: Relative metadata path of the failed request.
    """

    def __init__(self, message: str, path: str = "") -> None:
        """Initialize error.

        Args:
            message: Error message.
            path: Relative metadata path.
        """
        super().__init__(message)
        self.path = path


class MetadataTimeoutError(MetadataError):
    """Request exceeded the per-request timeout."""


class MetadataConnectionError(MetadataError):
    """Connection refused, reset or name resolution failed."""


class MetadataHTTPError(MetadataError):
    """Metadata service answered with a non-success status."""

    def __init__(self, message: str, path: str = "", status_code: Optional[int] = None) -> None:
        """Initialize error.

        Args:
            message: Error message.
            path: Relative metadata path.
            status_code: HTTP status code of the response.
        """
        super().__init__(message, path=path)
        self.status_code = status_code


def map_requests_exception(path: str, e: Exception) -> MetadataError:
    """Map requests errors to imdsbox metadata errors.

    Args:
        path: Relative metadata path for contextual message.
        e: Original raised exception.

    Returns:
        MetadataError: Mapped metadata exception.
    """
    target = path or "/"
    if isinstance(e, Timeout):
        return MetadataTimeoutError(f"GET {target} timeout", path=path)
    if isinstance(e, HTTPError):
        status_code = getattr(e.response, "status_code", None)
        return MetadataHTTPError(
            f"GET {target} failed with status: {status_code}",
            path=path,
            status_code=status_code,
        )
    if isinstance(e, ConnectionError):
        return MetadataConnectionError(f"GET {target} connection failed", path=path)
    if isinstance(e, RequestException):
        return MetadataError(f"GET {target} request error: {e}", path=path)
    return MetadataError(f"GET {target} unexpected error: {e}", path=path)
