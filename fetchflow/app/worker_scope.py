"""Scope that runs resource pipelines on an I/O thread pool.

A view model owns one ``WorkerScope``. Every fetch it starts is a ``Job``
draining a resource stream on the pool; cancelling the scope (for example
when the view closes) cancels every live job so no handler fires afterwards.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from typing import Any, Callable, Iterable, Iterator, Optional, Set

from fetchflow.domain.resource import Resource

LOGGER = logging.getLogger(__name__)

Pipeline = Callable[["CancellationToken"], Iterable[Resource[Any]]]


class CancellationToken:
    """Cooperative cancellation flag shared by a job and its pipeline."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def guard(self, resources: Iterable[Resource[Any]]) -> Iterator[Resource[Any]]:
        """Pass items through until cancelled, then close the upstream stream.

        The flag is checked before pulling each item and again before handing
        it on, so an item produced after cancellation is discarded.
        """
        iterator = iter(resources)
        try:
            while not self.cancelled:
                try:
                    item = next(iterator)
                except StopIteration:
                    return
                if self.cancelled:
                    return
                yield item
        finally:
            close = getattr(iterator, "close", None)
            if close is not None:
                close()


class Job:
    """Handle for one launched pipeline."""

    def __init__(self, name: str, token: CancellationToken, future: Future) -> None:
        self.name = name
        self._token = token
        self._future = future

    @property
    def cancelled(self) -> bool:
        return self._token.cancelled

    def cancel(self) -> None:
        self._token.cancel()
        self._future.cancel()

    def done(self) -> bool:
        return self._future.done()

    def result(self, timeout: Optional[float] = None) -> Optional[Resource[Any]]:
        """Return the last resource seen, ``None`` when the job was cancelled.

        Exceptions raised by handlers inside the pipeline are re-raised here.
        """
        try:
            return self._future.result(timeout)
        except CancelledError:
            return None


class WorkerScope:
    """Own an I/O executor and the jobs launched on it."""

    def __init__(self, max_workers: int = 4, *, thread_name_prefix: str = "fetchflow-io") -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix=thread_name_prefix
        )
        self._lock = threading.Lock()
        self._jobs: Set[Job] = set()
        self._closed = False

    @property
    def cancelled(self) -> bool:
        return self._closed

    @property
    def active_jobs(self) -> int:
        with self._lock:
            return len(self._jobs)

    def launch(self, pipeline: Pipeline, *, name: str = "fetch") -> Job:
        """Build and drain ``pipeline(token)`` on the pool.

        Args:
            pipeline: Factory receiving the job's token and returning the
                resource stream to drain. It runs on the worker thread.
            name: Label used in logs.

        Raises:
            RuntimeError: The scope was already cancelled.
        """
        with self._lock:
            if self._closed:
                raise RuntimeError("WorkerScope is cancelled")
            token = CancellationToken()
            future = self._executor.submit(self._run, pipeline, token, name)
            job = Job(name, token, future)
            self._jobs.add(job)
        future.add_done_callback(lambda f: self._finish(job, f))
        return job

    def cancel(self) -> None:
        """Cancel every live job and stop the executor without waiting."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            jobs = list(self._jobs)
        for job in jobs:
            job.cancel()
        LOGGER.debug("Scope cancelled with %d live job(s)", len(jobs))
        self._executor.shutdown(wait=False, cancel_futures=True)

    def __enter__(self) -> "WorkerScope":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.cancel()

    @staticmethod
    def _run(
        pipeline: Pipeline, token: CancellationToken, name: str
    ) -> Optional[Resource[Any]]:
        last: Optional[Resource[Any]] = None
        for resource in token.guard(pipeline(token)):
            last = resource
        if token.cancelled:
            LOGGER.debug("Job %s cancelled; result discarded", name)
            return None
        return last

    def _finish(self, job: Job, future: Future) -> None:
        with self._lock:
            self._jobs.discard(job)
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            LOGGER.error("Job %s failed: %s", job.name, exc)


__all__ = ["CancellationToken", "Job", "Pipeline", "WorkerScope"]
