from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import TypeAdapter

from fetchflow.domain.models import UserDto
from fetchflow.domain.ports import UserApiPort

from .http_client import ApiResponse, HttpConfig, HttpSession

LOGGER = logging.getLogger(__name__)

_USERS_BODY = TypeAdapter(Optional[List[UserDto]])


class UserRestAdapter(UserApiPort):
    """REST adapter for the users endpoint.

    Non-2xx responses come back as unsuccessful ``ApiResponse`` values carrying
    the raw error body; classifying them is left to the caller's mapper. A 2xx
    body that does not decode as a user list raises ``pydantic.ValidationError``.
    """

    def __init__(
        self,
        base_url: str,
        *,
        api_key: Optional[str] = None,
        request_timeout_s: int = 10,
        raise_for_status: bool = False,
    ) -> None:
        if not base_url or not base_url.strip():
            raise ValueError("UserRestAdapter requires a base URL")
        self.base_url = base_url.strip().rstrip("/")
        self.raise_for_status = raise_for_status
        self.http = HttpSession(api_key, HttpConfig(request_timeout_s=request_timeout_s))

    def get_users(self) -> ApiResponse[List[UserDto]]:
        resp = self.http.get(
            self._make_url("/users"), raise_for_status=self.raise_for_status
        )
        status = int(resp.status_code)
        content = resp.content or b""
        if not 200 <= status < 300:
            LOGGER.debug("users: HTTP %s with %d byte error body", status, len(content))
            return ApiResponse(code=status, raw_error=content or None)
        if not content.strip():
            return ApiResponse(code=status)
        return ApiResponse(code=status, body=_USERS_BODY.validate_json(content))

    def close(self) -> None:
        self.http.close()

    def _make_url(self, path: str) -> str:
        return f"{self.base_url}{path}"


__all__ = ["UserRestAdapter"]
