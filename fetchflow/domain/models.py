"""Wire DTOs and domain records for the users feature."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorResponseDto(BaseModel):
    """Expected (not guaranteed) shape of a server error body."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    message: Optional[str] = None
    code: Optional[int] = None


class UserDto(BaseModel):
    """User record as returned by ``GET /users``; every field may be missing."""

    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None


@dataclass(frozen=True)
class User:
    id: int
    name: str
    email: str


def user_from_dto(dto: UserDto) -> User:
    return User(
        id=dto.id if dto.id is not None else 0,
        name=dto.name or "",
        email=dto.email or "",
    )


__all__ = ["ErrorResponseDto", "User", "UserDto", "user_from_dto"]
