from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Union

from fetchflow.domain.models import UserDto
from fetchflow.domain.ports import UserApiPort

from .http_client import ApiResponse

Scripted = Union[ApiResponse[List[UserDto]], BaseException]


def _seed_users() -> List[UserDto]:
    return [
        UserDto(id=1, name="Ada Lovelace", email="ada@example.org"),
        UserDto(id=2, name="Grace Hopper", email="grace@example.org"),
    ]


@dataclass
class UserApiMock(UserApiPort):
    """Offline substitute for ``UserRestAdapter`` with scripted outcomes.

    Each call consumes the next scripted entry: an ``ApiResponse`` is returned,
    an exception is raised. Once the script is exhausted every call returns a
    200 with the seed users.
    """

    script: List[Scripted] = field(default_factory=list)
    users: List[UserDto] = field(default_factory=_seed_users)
    calls: int = 0

    @classmethod
    def failing_with(cls, status: int, body: Optional[Any] = None) -> "UserApiMock":
        raw = body.encode("utf-8") if isinstance(body, str) else body
        return cls(script=[ApiResponse(code=status, raw_error=raw)])

    def enqueue(self, outcomes: Iterable[Scripted]) -> None:
        self.script.extend(outcomes)

    # ---------- UserApiPort ----------

    def get_users(self) -> ApiResponse[List[UserDto]]:
        self.calls += 1
        if self.script:
            outcome = self.script.pop(0)
            if isinstance(outcome, BaseException):
                raise outcome
            return outcome
        return ApiResponse(code=200, body=list(self.users))


__all__ = ["UserApiMock"]
