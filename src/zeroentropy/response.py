"""Turn finished HTTP responses into models or typed errors."""

from __future__ import annotations

import json
import logging
from typing import Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .errors import DecodeError, error_from_status

logger = logging.getLogger("zeroentropy.response")

ModelT = TypeVar("ModelT", bound=BaseModel)

UNKNOWN_ERROR = "Unknown error"


def extract_error_message(response: httpx.Response) -> str:
    """Prefer the JSON ``message`` field, then the raw body, then a placeholder."""
    try:
        text = response.text
    except (httpx.ResponseNotRead, UnicodeDecodeError, LookupError):
        return UNKNOWN_ERROR
    if not text:
        return UNKNOWN_ERROR
    try:
        data = json.loads(text)
    except ValueError:
        return text
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return data["message"]
    return text


def resolve_response(response: httpx.Response, cast_to: Type[ModelT]) -> ModelT:
    if response.is_success:
        try:
            return cast_to.model_validate_json(response.content)
        except ValidationError as exc:
            logger.error(
                "Could not decode %s response status=%s body=%s",
                cast_to.__name__,
                response.status_code,
                response.text,
            )
            raise DecodeError(f"Could not decode {cast_to.__name__}: {exc}") from exc

    message = extract_error_message(response)
    logger.debug("API request failed status=%s message=%s", response.status_code, message)
    raise error_from_status(response.status_code, message)


__all__ = ["UNKNOWN_ERROR", "extract_error_message", "resolve_response"]
