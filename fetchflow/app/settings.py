"""Runtime settings for the fetch client, read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

ENV_BASE_URL = "FETCHFLOW_BASE_URL"
ENV_API_KEY = "FETCHFLOW_API_KEY"
ENV_TIMEOUT_S = "FETCHFLOW_TIMEOUT_S"
ENV_MAX_WORKERS = "FETCHFLOW_MAX_WORKERS"

DEFAULT_BASE_URL = "http://localhost:8000"


@dataclass(frozen=True)
class AppSettings:
    """Typed settings consumed by ``AppController``.

    Attributes:
        base_url: API root; ``/users`` is appended by the adapter.
        api_key: Sent as ``X-API-Key`` when set.
        request_timeout_s: Per-request timeout in seconds.
        max_workers: Size of the I/O thread pool owned by a worker scope.
    """

    base_url: str = DEFAULT_BASE_URL
    api_key: Optional[str] = None
    request_timeout_s: int = 10
    max_workers: int = 4

    def __post_init__(self) -> None:
        if not isinstance(self.base_url, str) or not self.base_url.strip():
            raise ValueError("base_url must be a non-empty string.")
        _coerce_positive_int("request_timeout_s", self.request_timeout_s)
        _coerce_positive_int("max_workers", self.max_workers)


def load_settings(env: Optional[Mapping[str, str]] = None) -> AppSettings:
    """Build ``AppSettings`` from ``env`` (defaults to ``os.environ``)."""
    source = os.environ if env is None else env
    base_url = (source.get(ENV_BASE_URL) or "").strip() or DEFAULT_BASE_URL
    api_key = (source.get(ENV_API_KEY) or "").strip() or None
    timeout = source.get(ENV_TIMEOUT_S)
    workers = source.get(ENV_MAX_WORKERS)
    return AppSettings(
        base_url=base_url,
        api_key=api_key,
        request_timeout_s=_coerce_positive_int("request_timeout_s", timeout) if timeout else 10,
        max_workers=_coerce_positive_int("max_workers", workers) if workers else 4,
    )


def _coerce_positive_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer.")
    if isinstance(value, (int, float)):
        coerced = int(value)
    elif isinstance(value, str):
        try:
            coerced = int(value.strip())
        except (TypeError, ValueError) as exc:
            raise ValueError(f"{name} must be an integer.") from exc
    else:
        raise ValueError(f"{name} must be an integer.")
    if coerced <= 0:
        raise ValueError(f"{name} must be positive.")
    return coerced


__all__ = ["AppSettings", "load_settings"]
