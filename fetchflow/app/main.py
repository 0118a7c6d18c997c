"""Console entry point: fetch users once and log the resulting UI state."""

from __future__ import annotations

import argparse
import logging
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import replace
from typing import Optional, Sequence

from ..adapters.user_mock import UserApiMock
from ..utils import logging as logging_utils
from .controller import AppController
from .settings import load_settings

LOGGER = logging.getLogger(__name__)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="fetchflow-demo", description=__doc__)
    parser.add_argument("--base-url", help="API root (overrides FETCHFLOW_BASE_URL)")
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Serve users from the in-memory mock instead of HTTP",
    )
    parser.add_argument("--timeout", type=float, default=30.0, help="Seconds to wait for the fetch")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    level = logging_utils.configure_root()
    LOGGER.debug("Log level %s", logging_utils.level_name(level))

    settings = load_settings()
    if args.base_url:
        settings = replace(settings, base_url=args.base_url)
    controller = AppController(settings, user_api=UserApiMock() if args.offline else None)

    try:
        with controller.make_scope() as scope:
            vm = controller.make_users_vm(scope)
            job = vm.current_job
            if job is not None:
                try:
                    job.result(timeout=args.timeout)
                except FutureTimeoutError:
                    LOGGER.error("Fetch did not finish within %.1f s", args.timeout)
                    return 1
            state = vm.state
    finally:
        controller.reset()

    if state.has_error:
        LOGGER.error("Fetch failed (code %s): %s", state.error_code, state.error)
        return 1
    for user in state.users:
        LOGGER.info("#%s %s <%s>", user.id, user.name, user.email)
    LOGGER.info("Fetched %d user(s)", len(state.users))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
