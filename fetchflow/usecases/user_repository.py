"""Users repository: safe remote call plus DTO-to-domain mapping."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

from fetchflow.domain.models import User, user_from_dto
from fetchflow.domain.ports import ApiErrorMapper, UserApiPort, UserRepository
from fetchflow.domain.resource import Resource, map_resources
from fetchflow.usecases.error_mapping import DefaultApiErrorMapper
from fetchflow.usecases.safe_call import safe_api_call


@dataclass
class UserRepositoryImpl(UserRepository):
    """Fetch users through ``UserApiPort`` and expose them as domain records.

    Classified errors from ``error_mapper`` pass through untouched; only
    ``Success`` payloads are converted.
    """

    api: UserApiPort
    error_mapper: ApiErrorMapper = field(default_factory=DefaultApiErrorMapper)

    def get_users(self) -> Iterator[Resource[List[User]]]:
        return map_resources(
            safe_api_call(self.api.get_users, self.error_mapper),
            user_from_dto,
            each=True,
        )


__all__ = ["UserRepositoryImpl"]
