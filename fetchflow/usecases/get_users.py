from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

from fetchflow.domain.models import User
from fetchflow.domain.ports import UserRepository
from fetchflow.domain.resource import Resource


@dataclass
class GetUsers:
    """Expose the repository's user stream to view models."""

    repository: UserRepository

    def __call__(self) -> Iterator[Resource[List[User]]]:
        return self.repository.get_users()


__all__ = ["GetUsers"]
