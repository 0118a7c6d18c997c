from __future__ import annotations

import threading
from dataclasses import replace
from typing import List

from fetchflow.adapters.api_errors import TransportError
from fetchflow.adapters.user_mock import UserApiMock
from fetchflow.app.worker_scope import WorkerScope
from fetchflow.domain.errors import MSG_NETWORK
from fetchflow.domain.models import User
from fetchflow.usecases.error_mapping import UserApiErrorMapper
from fetchflow.usecases.get_users import GetUsers
from fetchflow.usecases.user_repository import UserRepositoryImpl
from fetchflow.viewmodels.users_vm import UserUiState, UsersVM


def _vm(api, states: List[UserUiState], **kwargs) -> UsersVM:
    repo = UserRepositoryImpl(api=api, error_mapper=UserApiErrorMapper())
    return UsersVM(
        GetUsers(repo),
        WorkerScope(max_workers=1),
        on_state_changed=states.append,
        **kwargs,
    )


def test_initial_state_is_loading_before_fetch():
    vm = _vm(UserApiMock(), [], auto_fetch=False)

    assert vm.state == UserUiState(is_loading=True)
    assert vm.current_job is None
    vm.close()


def test_fetch_success_populates_users():
    states: List[UserUiState] = []
    vm = _vm(UserApiMock(), states)

    vm.current_job.result(timeout=5)

    assert states[0].is_loading is True
    assert vm.state.is_loading is False
    assert vm.state.users == (
        User(1, "Ada Lovelace", "ada@example.org"),
        User(2, "Grace Hopper", "grace@example.org"),
    )
    assert vm.state.error == ""
    vm.close()


def test_fetch_error_surfaces_message_and_code():
    states: List[UserUiState] = []
    vm = _vm(UserApiMock.failing_with(403, "{}"), states)

    vm.current_job.result(timeout=5)

    assert vm.state.is_loading is False
    assert vm.state.error == "You don't have permission to access this user"
    assert vm.state.error_code == 403
    assert vm.state.has_error
    vm.close()


def test_network_failure_keeps_previous_users():
    api = UserApiMock()
    vm = _vm(api, [])
    vm.current_job.result(timeout=5)
    api.enqueue([TransportError("offline")])

    vm.fetch_users().result(timeout=5)

    assert vm.state.error == MSG_NETWORK
    assert vm.state.error_code == 0
    assert len(vm.state.users) == 2
    vm.close()


def test_refetch_clears_previous_error():
    api = UserApiMock.failing_with(500)
    vm = _vm(api, [])
    vm.current_job.result(timeout=5)
    assert vm.state.error_code == 500

    vm.fetch_users().result(timeout=5)

    assert vm.state.error == ""
    assert vm.state.error_code == 0
    vm.close()


def test_update_applies_reducer_to_latest_state():
    vm = _vm(UserApiMock(), [], auto_fetch=False)
    barrier = threading.Barrier(8)

    def bump():
        barrier.wait(5)
        for _ in range(100):
            vm.update(lambda s: replace(s, error_code=s.error_code + 1))

    threads = [threading.Thread(target=bump) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(5)

    assert vm.state.error_code == 800
    vm.close()


def test_close_prevents_late_handlers():
    states: List[UserUiState] = []
    release = threading.Event()

    class _SlowApi(UserApiMock):
        def get_users(self):
            release.wait(5)
            return super().get_users()

    vm = _vm(_SlowApi(), states)
    job = vm.current_job
    vm.close()
    release.set()

    assert job.result(timeout=5) is None
    assert all(state.users == () for state in states)
    assert vm.state.users == ()


def test_update_after_close_is_ignored():
    states: List[UserUiState] = []
    vm = _vm(UserApiMock(), states, auto_fetch=False)
    vm.close()

    result = vm.update(lambda s: replace(s, error="late", error_code=99))

    assert result == UserUiState(is_loading=True)
    assert vm.state == UserUiState(is_loading=True)
    assert states == []


def test_handler_firing_after_close_does_not_publish():
    states: List[UserUiState] = []
    vm = _vm(UserApiMock(), states, auto_fetch=False)
    vm.close()

    vm._on_users([User(9, "Late", "late@example.org")])

    assert vm.state.users == ()
    assert states == []
