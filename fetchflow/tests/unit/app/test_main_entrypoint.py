import threading
import logging

from fetchflow.adapters.user_mock import UserApiMock
from fetchflow.app import main as main_module
from fetchflow.app.controller import AppController
from fetchflow.app.settings import AppSettings
from fetchflow.usecases.error_mapping import UserApiErrorMapper


def test_offline_run_exits_zero(monkeypatch):
    monkeypatch.delenv("FETCHFLOW_BASE_URL", raising=False)

    assert main_module.main(["--offline"]) == 0


def test_failed_fetch_exits_one(monkeypatch):
    failing = UserApiMock.failing_with(500, '{"message": "down"}')
    monkeypatch.setattr(main_module, "UserApiMock", lambda: failing)

    assert main_module.main(["--offline"]) == 1


def test_controller_caches_use_case_and_wires_user_mapper():
    controller = AppController(AppSettings(), user_api=UserApiMock())

    first = controller.ensure_ready()

    assert controller.ensure_ready() is first
    assert isinstance(controller.error_mapper, UserApiErrorMapper)


def test_controller_reset_keeps_injected_port():
    api = UserApiMock()
    controller = AppController(AppSettings(), user_api=api)
    controller.ensure_ready()

    controller.reset()

    assert controller.uc_get_users is None
    assert controller.user_api is api


def test_controller_builds_rest_adapter_from_settings():
    controller = AppController(AppSettings(base_url="http://api.local/", api_key="k"))

    controller.ensure_ready()

    assert controller.user_api.base_url == "http://api.local"
    assert controller.user_api.http.api_key == "k"
    controller.reset()
    assert controller.user_api is None


def test_fetch_timeout_exits_one_and_resets_controller(monkeypatch):
    release = threading.Event()
    resets = []

    class _SlowApi(UserApiMock):
        def get_users(self):
            release.wait(5)
            return super().get_users()

    original_reset = AppController.reset

    def _recording_reset(self):
        resets.append(True)
        original_reset(self)

    monkeypatch.setattr(main_module, "UserApiMock", _SlowApi)
    monkeypatch.setattr(AppController, "reset", _recording_reset)
    try:
        assert main_module.main(["--offline", "--timeout", "0.2"]) == 1
    finally:
        release.set()

    assert resets == [True]


def test_main_logs_effective_level_name(monkeypatch, caplog):
    monkeypatch.setenv("FETCHFLOW_LOG_LEVEL", "DEBUG")
    root = logging.getLogger()
    previous = root.level
    try:
        assert main_module.main(["--offline"]) == 0
    finally:
        root.setLevel(previous)

    assert "Log level DEBUG" in caplog.text
