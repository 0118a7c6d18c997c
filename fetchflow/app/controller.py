"""Adapter and use-case wiring for the client runtime.

This module owns lazy construction of the users adapter, error mapper,
repository and use case from :class:`fetchflow.app.settings.AppSettings`.
It is invoked by ``fetchflow.app.main`` and by embedding applications before
building view models.
"""

from __future__ import annotations

from typing import Optional

from ..adapters.user_rest import UserRestAdapter
from ..domain.ports import ApiErrorMapper, UserApiPort
from ..usecases.error_mapping import DefaultApiErrorMapper, UserApiErrorMapper
from ..usecases.get_users import GetUsers
from ..usecases.user_repository import UserRepositoryImpl
from ..viewmodels.users_vm import UsersVM
from .settings import AppSettings
from .worker_scope import WorkerScope


class AppController:
    """Create and cache runtime adapters/use-cases from settings.

    Call chain:
        ``fetchflow.app.main.main`` creates one instance and asks it for view
        models. ``ensure_ready`` builds dependencies on first use.
    """

    def __init__(
        self,
        settings: AppSettings,
        *,
        user_api: Optional[UserApiPort] = None,
    ) -> None:
        """Initialize controller with settings-backed lazy dependencies.

        Args:
            settings: Base URL, API key and timeouts for the REST adapter.
            user_api: Optional prebuilt port (for example ``UserApiMock``);
                skips building ``UserRestAdapter``.
        """
        self.settings = settings
        self._user_api: Optional[UserApiPort] = user_api
        self._injected = user_api is not None
        self.error_mapper: Optional[ApiErrorMapper] = None
        self.uc_get_users: Optional[GetUsers] = None

    @property
    def user_api(self) -> Optional[UserApiPort]:
        return self._user_api

    def reset(self) -> None:
        """Drop cached objects so the next ``ensure_ready`` rebuilds them."""
        if not self._injected:
            close = getattr(self._user_api, "close", None)
            if close is not None:
                close()
            self._user_api = None
        self.error_mapper = None
        self.uc_get_users = None

    def ensure_ready(self) -> GetUsers:
        if self.uc_get_users is not None:
            return self.uc_get_users
        if self._user_api is None:
            self._user_api = UserRestAdapter(
                self.settings.base_url,
                api_key=self.settings.api_key,
                request_timeout_s=self.settings.request_timeout_s,
            )
        self.error_mapper = UserApiErrorMapper(fallback=DefaultApiErrorMapper())
        repository = UserRepositoryImpl(api=self._user_api, error_mapper=self.error_mapper)
        self.uc_get_users = GetUsers(repository)
        return self.uc_get_users

    def make_scope(self) -> WorkerScope:
        return WorkerScope(max_workers=self.settings.max_workers)

    def make_users_vm(self, scope: Optional[WorkerScope] = None, **kwargs) -> UsersVM:
        """Build a ``UsersVM``; extra keyword arguments go to its constructor."""
        return UsersVM(self.ensure_ready(), scope or self.make_scope(), **kwargs)


__all__ = ["AppController"]
