"""ZeroEntropy Python SDK."""

from .client import AsyncClient, Client
from .config import ClientConfig
from .errors import (
    APIError,
    AuthenticationError,
    BadRequest,
    Conflict,
    DecodeError,
    InternalServerError,
    InvalidApiKey,
    NotFound,
    PermissionDenied,
    RateLimitExceeded,
    TransportError,
    UnprocessableEntity,
    ZeroEntropyError,
)
from .types import AutoContent, IndexStatus, LatencyMode, RerankDocument, TextContent

__all__ = [
    "APIError",
    "AsyncClient",
    "AuthenticationError",
    "AutoContent",
    "BadRequest",
    "Client",
    "ClientConfig",
    "Conflict",
    "DecodeError",
    "IndexStatus",
    "InternalServerError",
    "InvalidApiKey",
    "LatencyMode",
    "NotFound",
    "PermissionDenied",
    "RateLimitExceeded",
    "RerankDocument",
    "TextContent",
    "TransportError",
    "UnprocessableEntity",
    "ZeroEntropyError",
]
