"""Shared HTTP transport utilities for REST adapters.

This module provides a thin wrapper around ``requests.Session`` so adapter
implementations share timeout policy and API-key header construction, plus
the ``ApiResponse`` value handed to the safe-call wrapper.

Dependencies:
    - ``requests`` for network I/O.
    - ``fetchflow.adapters.api_errors`` for typed transport failures.

Call context:
    - Constructed by ``fetchflow.adapters.user_rest.UserRestAdapter``.
    - Used only inside adapter layer methods; use cases interact through ports.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Generic, Optional, TypeVar

import requests
from requests import exceptions as req_exc

from fetchflow.adapters.api_errors import HttpStatusError, TransportError

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class HttpConfig:
    """Timeout configuration for adapter HTTP calls.

    Attributes:
        request_timeout_s: Default timeout in seconds for JSON API calls.
    """
    request_timeout_s: int = 10


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Completed HTTP exchange with the body already read and the connection released.

    Attributes:
        code: HTTP status code.
        body: Decoded success payload, ``None`` when absent or not decoded.
        raw_error: Raw bytes of a failed response body, if any.
    """
    code: int
    body: Optional[T] = None
    raw_error: Optional[bytes] = None

    @property
    def is_successful(self) -> bool:
        return 200 <= self.code < 300

    def error_body(self) -> Optional[str]:
        """Return the failed response body as text, or ``None`` when empty."""
        if not self.raw_error:
            return None
        return self.raw_error.decode("utf-8", errors="replace")


class HttpSession:
    """Single-attempt requests wrapper with API-key headers.

    This class is intentionally transport-only. Callers provide endpoint URLs and
    decide how to turn status codes into ``ApiResponse`` values.
    """

    def __init__(self, api_key: Optional[str], cfg: HttpConfig) -> None:
        """Create a session.

        Args:
            api_key: API key value to place in ``X-API-Key`` headers, or ``None``.
            cfg: Shared timeout settings.

        Side Effects:
            Creates a persistent ``requests.Session`` object.
        """
        self.session = requests.Session()
        self.api_key = api_key
        self.cfg = cfg

    def _headers(self, accept: str = "application/json") -> Dict[str, str]:
        headers = {"Accept": accept}
        if self.api_key:
            headers["X-API-Key"] = self.api_key
        return headers

    def get(
        self,
        url: str,
        *,
        accept: str = "application/json",
        timeout: Optional[int] = None,
        raise_for_status: bool = False,
    ) -> requests.Response:
        """Send one GET request and return the fully read response.

        Args:
            url: Absolute endpoint URL.
            accept: ``Accept`` header value.
            timeout: Optional timeout override in seconds.
            raise_for_status: Treat non-2xx statuses as ``HttpStatusError``.

        Returns:
            ``requests.Response`` whose content is loaded and whose connection
            has been released back to the pool.

        Raises:
            TransportError: Timeout or connectivity failure; no response exists.
            HttpStatusError: ``raise_for_status`` is set and the status is non-2xx.
        """
        context = f"GET {url}"
        try:
            resp = self.session.get(
                url,
                headers=self._headers(accept=accept),
                timeout=timeout or self.cfg.request_timeout_s,
            )
        except (req_exc.Timeout, req_exc.ConnectionError) as exc:
            raise TransportError(f"Timeout contacting {url}", context=context) from exc

        try:
            # Load the body now so closing below never truncates it.
            _ = resp.content
            if raise_for_status:
                resp.raise_for_status()
        except req_exc.HTTPError as exc:
            status = getattr(exc.response, "status_code", None) or resp.status_code
            raise HttpStatusError(
                f"{context} failed with {status}", status_code=status, context=context
            ) from exc
        except (req_exc.Timeout, req_exc.ConnectionError) as exc:
            raise TransportError(f"Connection lost reading {url}", context=context) from exc
        finally:
            resp.close()
        LOGGER.debug("%s -> %s", context, resp.status_code)
        return resp

    def close(self) -> None:
        self.session.close()


__all__ = ["ApiResponse", "HttpConfig", "HttpSession"]
