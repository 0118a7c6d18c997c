"""Classify failed responses into ApiError variants."""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from fetchflow.domain.errors import (
    MSG_UNKNOWN,
    ApiError,
    ClientError,
    ServerError,
    UnknownError,
)
from fetchflow.domain.models import ErrorResponseDto
from fetchflow.domain.ports import ApiErrorMapper

LOGGER = logging.getLogger(__name__)


class DefaultApiErrorMapper(ApiErrorMapper):
    """Fallback mapper that reads an optional ``message`` from a JSON body.

    The body is parsed best-effort: malformed JSON, non-object payloads and
    mistyped fields all degrade to a generic message that names the status
    code. Classification itself is purely by status range.
    """

    def map_error(self, error_body: Optional[str], error_code: int) -> ApiError:
        """Map a failed response to a stable ApiError variant.

        Args:
            error_body (Optional[str]): Raw error body text, if one was read.
            error_code (int): HTTP status code of the response.

        Returns:
            ApiError: ``ClientError`` for 4xx, ``ServerError`` for 5xx,
            ``UnknownError`` otherwise.
        """
        message = _parse_message(error_body) or f"{MSG_UNKNOWN} (code: {error_code})"
        if 400 <= error_code <= 499:
            return ClientError(message, error_code)
        if 500 <= error_code <= 599:
            return ServerError(message, error_code)
        return UnknownError(message, error_code)


class UserApiErrorMapper(ApiErrorMapper):
    """Fixed copy for user lookups; everything else goes to ``fallback``."""

    def __init__(self, fallback: Optional[ApiErrorMapper] = None) -> None:
        self.fallback = fallback or DefaultApiErrorMapper()

    def map_error(self, error_body: Optional[str], error_code: int) -> ApiError:
        if error_code == 404:
            return ClientError("User not found", 404)
        if error_code == 403:
            return ClientError("You don't have permission to access this user", 403)
        return self.fallback.map_error(error_body, error_code)


def _parse_message(error_body: Optional[str]) -> Optional[str]:
    if not error_body:
        return None
    try:
        dto = ErrorResponseDto.model_validate_json(error_body)
    except ValidationError as exc:
        LOGGER.debug("Unparseable error body (%d chars): %s", len(error_body), exc.errors()[:1])
        return None
    if dto.message is None or not dto.message.strip():
        return None
    return dto.message


__all__ = ["DefaultApiErrorMapper", "UserApiErrorMapper"]
