"""Exception hierarchy raised by the ZeroEntropy client."""

from __future__ import annotations

from typing import Dict, Type


class ZeroEntropyError(Exception):
    """Base class for every error raised by this package."""


class InvalidApiKey(ZeroEntropyError):
    def __init__(self) -> None:
        super().__init__(
            "Invalid API key: API key must be provided either via constructor "
            "or ZEROENTROPY_API_KEY environment variable"
        )


class TransportError(ZeroEntropyError):
    """The request never produced an HTTP response (DNS, connect, timeout)."""


class DecodeError(ZeroEntropyError):
    """A successful response body did not match the expected shape."""


class APIError(ZeroEntropyError):
    """The API answered with a non-success status."""

    label = "API error"

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(self._format())

    def _format(self) -> str:
        return f"{self.label} ({self.status_code}): {self.message}"


class _StatusError(APIError):
    def _format(self) -> str:
        return f"{self.label}: {self.message}"


class BadRequest(_StatusError):
    label = "Bad request"


class AuthenticationError(_StatusError):
    label = "Authentication failed"


class PermissionDenied(_StatusError):
    label = "Permission denied"


class NotFound(_StatusError):
    label = "Not found"


class Conflict(_StatusError):
    """409. The API also uses this for "already exists" on create calls."""

    label = "Conflict"


class UnprocessableEntity(_StatusError):
    label = "Unprocessable entity"


class RateLimitExceeded(_StatusError):
    label = "Rate limit exceeded"


class InternalServerError(_StatusError):
    label = "Internal server error"


_STATUS_ERRORS: Dict[int, Type[APIError]] = {
    400: BadRequest,
    401: AuthenticationError,
    403: PermissionDenied,
    404: NotFound,
    409: Conflict,
    422: UnprocessableEntity,
    429: RateLimitExceeded,
}


def error_from_status(status_code: int, message: str) -> APIError:
    """Map a non-success HTTP status to its exception type."""
    if 500 <= status_code <= 599:
        return InternalServerError(status_code, message)
    error_cls = _STATUS_ERRORS.get(status_code, APIError)
    return error_cls(status_code, message)


__all__ = [
    "APIError",
    "AuthenticationError",
    "BadRequest",
    "Conflict",
    "DecodeError",
    "InternalServerError",
    "InvalidApiKey",
    "NotFound",
    "PermissionDenied",
    "RateLimitExceeded",
    "TransportError",
    "UnprocessableEntity",
    "ZeroEntropyError",
    "error_from_status",
]
