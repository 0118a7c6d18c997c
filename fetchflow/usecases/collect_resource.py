"""Fan a stream of resources out to success / error / loading handlers."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Optional, TypeVar

from fetchflow.domain.errors import ApiError
from fetchflow.domain.resource import LOADING, Error, Loading, Resource, Success

T = TypeVar("T")


def collect_resource(
    resources: Iterable[Resource[T]],
    on_success: Callable[[T], None],
    on_error: Callable[[ApiError], None],
    on_loading: Optional[Callable[[], None]] = None,
) -> Iterator[Resource[T]]:
    """Call the handler matching each resource, then yield it unchanged.

    Lazy: nothing happens until the returned iterator is consumed. Handler
    exceptions propagate to whoever drains the stream.
    """
    for resource in resources:
        if isinstance(resource, Success):
            on_success(resource.data)
        elif isinstance(resource, Error):
            on_error(resource.api_error)
        elif isinstance(resource, Loading):
            if on_loading is not None:
                on_loading()
        else:
            raise TypeError(f"Not a Resource variant: {type(resource).__name__}")
        yield resource


def with_loading(resources: Iterable[Resource[T]]) -> Iterator[Resource[T]]:
    """Prefix a stream with ``LOADING`` before pulling its first item."""
    yield LOADING
    yield from resources


def drain(resources: Iterable[Resource[T]]) -> Optional[Resource[T]]:
    """Consume a stream and return the last resource seen (``None`` if empty)."""
    last: Optional[Resource[T]] = None
    for resource in resources:
        last = resource
    return last


__all__ = ["collect_resource", "drain", "with_loading"]
