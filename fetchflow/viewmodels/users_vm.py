from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Tuple

from ..app.worker_scope import CancellationToken, Job, WorkerScope
from ..domain.errors import ApiError
from ..domain.models import User
from ..usecases.collect_resource import collect_resource, with_loading
from ..usecases.get_users import GetUsers

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserUiState:
    """Snapshot rendered by the users view."""

    is_loading: bool = False
    users: Tuple[User, ...] = ()
    error: str = ""
    error_code: int = 0

    @property
    def has_error(self) -> bool:
        return bool(self.error)


Reducer = Callable[[UserUiState], UserUiState]


class UsersVM:
    """Owns the users list state; fetches through ``GetUsers`` on a worker scope.

    - State is an immutable ``UserUiState``; every change is a pure reducer
      applied to the latest snapshot under a lock.
    - ``on_state_changed`` is called on the thread that applied the change;
      views marshal to their UI thread themselves.
    - ``close`` cancels the scope so no handler fires after teardown.
    """

    def __init__(
        self,
        get_users: GetUsers,
        scope: WorkerScope,
        *,
        on_state_changed: Optional[Callable[[UserUiState], None]] = None,
        auto_fetch: bool = True,
    ) -> None:
        self._get_users = get_users
        self._scope = scope
        self.on_state_changed = on_state_changed
        self._lock = threading.Lock()
        self._state = UserUiState(is_loading=True)
        self._job: Optional[Job] = None
        if auto_fetch:
            self.fetch_users()

    @property
    def state(self) -> UserUiState:
        with self._lock:
            return self._state

    @property
    def current_job(self) -> Optional[Job]:
        return self._job

    def update(self, reducer: Reducer) -> UserUiState:
        """Apply ``reducer`` to the latest state and publish the result.

        After ``close`` the state is frozen: the reducer is skipped and no
        listener is notified.
        """
        with self._lock:
            if self._scope.cancelled:
                return self._state
            new_state = reducer(self._state)
            self._state = new_state
        if self.on_state_changed:
            self.on_state_changed(new_state)
        return new_state

    # ---- Commands ----
    def fetch_users(self) -> Job:
        def pipeline(token: CancellationToken):
            return collect_resource(
                token.guard(with_loading(self._get_users())),
                on_success=self._on_users,
                on_error=self._on_error,
                on_loading=self._on_loading,
            )

        self._job = self._scope.launch(pipeline, name="users")
        return self._job

    def close(self) -> None:
        self._scope.cancel()

    # ---- Handlers ----
    def _on_loading(self) -> None:
        self.update(lambda s: replace(s, is_loading=True, error="", error_code=0))

    def _on_users(self, users: List[User]) -> None:
        self.update(
            lambda s: replace(s, is_loading=False, users=tuple(users), error="", error_code=0)
        )

    def _on_error(self, api_error: ApiError) -> None:
        LOGGER.info("Users fetch failed (%s): %s", api_error.code, api_error.message)
        self.update(
            lambda s: replace(
                s, is_loading=False, error=api_error.message, error_code=api_error.code
            )
        )


__all__ = ["Reducer", "UserUiState", "UsersVM"]
