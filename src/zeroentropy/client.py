"""HTTP clients for the ZeroEntropy API."""

from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel

from .config import ClientConfig
from .errors import DecodeError, TransportError
from .resources import Collections, Documents, Models, Queries
from .response import resolve_response
from .retry import retry_delay, should_retry

logger = logging.getLogger("zeroentropy.client")

ModelT = TypeVar("ModelT", bound=BaseModel)
RequestBody = Union[BaseModel, Mapping[str, Any]]


class _BaseClient:
    def __init__(
        self,
        config: Optional[ClientConfig],
        api_key: Optional[str],
        base_url: Optional[str],
        timeout: Optional[float],
        max_retries: Optional[int],
    ) -> None:
        if config is None:
            config = ClientConfig.from_env(
                api_key=api_key,
                base_url=base_url,
                timeout=timeout,
                max_retries=max_retries,
            )
        self._config = config
        self.collections = Collections(self)
        self.documents = Documents(self)
        self.queries = Queries(self)
        self.models = Models(self)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._config.api_key}",
            "User-Agent": self._config.user_agent,
            "Content-Type": "application/json",
        }
        headers.update(self._config.headers)
        return headers

    def _url(self, path: str) -> str:
        return self._config.base_url.rstrip("/") + path

    @staticmethod
    def _encode(body: RequestBody) -> str:
        if isinstance(body, BaseModel):
            return body.model_dump_json(exclude_none=True)
        return json.dumps({k: v for k, v in body.items() if v is not None}, separators=(",", ":"))

    def _next_delay(self, path: str, status_code: int, attempts: int) -> Optional[float]:
        """Backoff before the next attempt, or None when the response is final."""
        if attempts >= self._config.max_retries or not should_retry(status_code):
            return None
        delay = retry_delay(attempts + 1)
        logger.warning(
            "Retrying %s status=%s attempt=%s/%s in %.1fs",
            path,
            status_code,
            attempts + 1,
            self._config.max_retries,
            delay,
        )
        return delay


class Client(_BaseClient):
    """Blocking client; every resource call returns the decoded model."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        super().__init__(config, api_key, base_url, timeout, max_retries)
        self._client = httpx.Client(timeout=self._config.timeout, transport=transport)
        self._sleep = time.sleep

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _send(self, url: str, content: str, headers: Dict[str, str]) -> httpx.Response:
        try:
            return self._client.post(url, content=content, headers=headers)
        except httpx.DecodingError as exc:
            logger.debug("Could not decode body from %s: %s", url, exc)
            raise DecodeError(f"Could not decode response body: {exc}") from exc
        except httpx.RequestError as exc:
            logger.debug("Request to %s failed: %s", url, exc)
            raise TransportError(f"HTTP request failed: {exc}") from exc

    def post(self, path: str, body: RequestBody, cast_to: Type[ModelT]) -> ModelT:
        url = self._url(path)
        content = self._encode(body)
        headers = self._headers()
        attempts = 0
        while True:
            response = self._send(url, content, headers)
            delay = self._next_delay(path, response.status_code, attempts)
            if delay is None:
                return resolve_response(response, cast_to)
            attempts += 1
            self._sleep(delay)

    def close(self) -> None:
        self._client.close()


class AsyncClient(_BaseClient):
    """Asyncio client; every resource call returns an awaitable of the decoded model."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(config, api_key, base_url, timeout, max_retries)
        self._client = httpx.AsyncClient(timeout=self._config.timeout, transport=transport)
        self._sleep = asyncio.sleep

    async def __aenter__(self) -> "AsyncClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def _send(self, url: str, content: str, headers: Dict[str, str]) -> httpx.Response:
        try:
            return await self._client.post(url, content=content, headers=headers)
        except httpx.DecodingError as exc:
            logger.debug("Could not decode body from %s: %s", url, exc)
            raise DecodeError(f"Could not decode response body: {exc}") from exc
        except httpx.RequestError as exc:
            logger.debug("Request to %s failed: %s", url, exc)
            raise TransportError(f"HTTP request failed: {exc}") from exc

    async def post(self, path: str, body: RequestBody, cast_to: Type[ModelT]) -> ModelT:
        url = self._url(path)
        content = self._encode(body)
        headers = self._headers()
        attempts = 0
        while True:
            response = await self._send(url, content, headers)
            delay = self._next_delay(path, response.status_code, attempts)
            if delay is None:
                return resolve_response(response, cast_to)
            attempts += 1
            await self._sleep(delay)

    async def aclose(self) -> None:
        await self._client.aclose()


__all__ = ["AsyncClient", "Client"]
