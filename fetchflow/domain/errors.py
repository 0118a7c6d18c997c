"""Classified API errors that travel through the fetch pipeline as values.

The set is closed: every failure observed at the safe-call boundary becomes
exactly one of the five variants below. Consumers dispatch on the concrete
type and treat anything else as a programming error.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple, Type, Union

MSG_NETWORK = "Couldn't reach the server. Please check your connection."
MSG_UNKNOWN = "Unexpected error occurred."
MSG_SERVER = "Server error"


def _validate(kind: str, message: Any, code: Any) -> None:
    if not isinstance(message, str) or not message.strip():
        raise ValueError(f"{kind}.message must be a non-empty string.")
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError(f"{kind}.code must be an integer.")


@dataclass(frozen=True)
class HttpError:
    """Protocol failure raised by the transport with its own status code."""

    message: str
    code: int

    def __post_init__(self) -> None:
        _validate("HttpError", self.message, self.code)


@dataclass(frozen=True)
class NetworkError:
    """No HTTP exchange happened (connectivity, DNS, timeout)."""

    message: str = MSG_NETWORK
    code: int = 0

    def __post_init__(self) -> None:
        _validate("NetworkError", self.message, self.code)


@dataclass(frozen=True)
class ServerError:
    """HTTP 5xx."""

    message: str
    code: int

    def __post_init__(self) -> None:
        _validate("ServerError", self.message, self.code)


@dataclass(frozen=True)
class ClientError:
    """HTTP 4xx."""

    message: str
    code: int

    def __post_init__(self) -> None:
        _validate("ClientError", self.message, self.code)


@dataclass(frozen=True)
class UnknownError:
    """Anything else, including unexpected local exceptions."""

    message: str = MSG_UNKNOWN
    code: int = 0

    def __post_init__(self) -> None:
        _validate("UnknownError", self.message, self.code)


ApiError = Union[HttpError, NetworkError, ServerError, ClientError, UnknownError]

API_ERROR_TYPES: Tuple[Type[Any], ...] = (
    HttpError,
    NetworkError,
    ServerError,
    ClientError,
    UnknownError,
)


def is_api_error(value: Any) -> bool:
    """Return True when ``value`` is one of the classified error variants."""
    return type(value) in API_ERROR_TYPES


__all__ = [
    "API_ERROR_TYPES",
    "ApiError",
    "ClientError",
    "HttpError",
    "MSG_NETWORK",
    "MSG_SERVER",
    "MSG_UNKNOWN",
    "NetworkError",
    "ServerError",
    "UnknownError",
    "is_api_error",
]
