from __future__ import annotations

from typing import Iterator, List, Optional, Protocol, TypeVar

from .errors import ApiError
from .models import User, UserDto
from .resource import Resource

T_co = TypeVar("T_co", covariant=True)


# ---- Transport boundary ----
class HttpResponse(Protocol[T_co]):
    """What the safe-call wrapper needs from a completed HTTP exchange."""

    @property
    def is_successful(self) -> bool: ...

    @property
    def body(self) -> Optional[T_co]: ...

    @property
    def code(self) -> int: ...

    def error_body(self) -> Optional[str]: ...  # raw text of a failed response


# ---- Classification ----
class ApiErrorMapper(Protocol):
    """Turns a failed response's (body, status code) into a classified error."""

    def map_error(self, error_body: Optional[str], error_code: int) -> ApiError: ...


# ---- Ports (Hexagonal boundaries) ----
class UserApiPort(Protocol):
    """Remote users endpoint."""

    def get_users(self) -> HttpResponse[List[UserDto]]: ...


class UserRepository(Protocol):
    """Users as a stream of resources; never raises for remote failures."""

    def get_users(self) -> Iterator[Resource[List[User]]]: ...
