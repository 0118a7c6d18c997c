"""Typed transport failures raised by adapters.

These are the only exception types the safe-call wrapper recognises by
name. Adapters translate library exceptions into them so that use cases
never depend on ``requests`` directly.
"""
from __future__ import annotations

from typing import Optional


class TransportError(OSError):
    """No response was obtained (timeout, refused connection, DNS)."""

    def __init__(self, message: str, *, context: Optional[str] = None) -> None:
        super().__init__(message)
        self.context = context


class HttpStatusError(Exception):
    """A response arrived but the transport treated its status as a failure."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = int(status_code)
        self.context = context


__all__ = ["HttpStatusError", "TransportError"]
