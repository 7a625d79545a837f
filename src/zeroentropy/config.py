"""Configuration objects for the ZeroEntropy Python client."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from .errors import InvalidApiKey

API_KEY_ENV = "ZEROENTROPY_API_KEY"
BASE_URL_ENV = "ZEROENTROPY_BASE_URL"

DEFAULT_BASE_URL = "https://api.zeroentropy.dev/v1"
DEFAULT_TIMEOUT = 60.0
DEFAULT_MAX_RETRIES = 2


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    user_agent: str = "zeroentropy-python/0.1.0"
    headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.api_key:
            raise InvalidApiKey()
        if self.max_retries < 0:
            raise ValueError("max_retries must be non-negative")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    @classmethod
    def from_env(
        cls,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        *,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "ClientConfig":
        """Build a config, falling back to the environment for the key and URL.

        Explicit arguments always win. ``environ`` defaults to ``os.environ``
        and exists so callers can load from a plain mapping instead.
        """
        env = os.environ if environ is None else environ
        key = api_key if api_key is not None else env.get(API_KEY_ENV)
        if not key:
            raise InvalidApiKey()
        url = base_url or env.get(BASE_URL_ENV) or DEFAULT_BASE_URL
        return cls(
            api_key=key,
            base_url=url,
            timeout=DEFAULT_TIMEOUT if timeout is None else timeout,
            max_retries=DEFAULT_MAX_RETRIES if max_retries is None else max_retries,
        )


__all__ = [
    "API_KEY_ENV",
    "BASE_URL_ENV",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
]
