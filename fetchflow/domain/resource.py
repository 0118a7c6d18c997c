"""Three-state result wrapper used from the data layer up to view models."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, List, TypeVar, Union

from .errors import ApiError, is_api_error

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Payload of a completed call."""

    data: T


@dataclass(frozen=True)
class Error:
    """Classified failure of a call."""

    api_error: ApiError

    def __post_init__(self) -> None:
        if not is_api_error(self.api_error):
            raise TypeError(
                f"Error requires a classified ApiError, got {type(self.api_error).__name__}."
            )


@dataclass(frozen=True)
class Loading:
    """Marker emitted by callers before a call starts."""

    def __repr__(self) -> str:
        return "Loading"


LOADING = Loading()

Resource = Union[Success[T], Error, Loading]


def _unknown_variant(resource: Any) -> TypeError:
    return TypeError(f"Not a Resource variant: {type(resource).__name__}")


def map_resource(resource: Resource[T], fn: Callable[[T], R]) -> Resource[R]:
    """Map a ``Success`` payload; ``Error`` and ``Loading`` pass through as-is."""
    if isinstance(resource, Success):
        return Success(fn(resource.data))
    if isinstance(resource, (Error, Loading)):
        return resource
    raise _unknown_variant(resource)


def map_resource_items(
    resource: Resource[Iterable[T]], fn: Callable[[T], R]
) -> Resource[List[R]]:
    """Map each element of a ``Success`` sequence payload."""
    if isinstance(resource, Success):
        return Success([fn(item) for item in resource.data])
    if isinstance(resource, (Error, Loading)):
        return resource
    raise _unknown_variant(resource)


def map_resources(
    resources: Iterable[Resource[Any]],
    fn: Callable[[Any], Any],
    *,
    each: bool = False,
) -> Iterator[Resource[Any]]:
    """Lazily apply :func:`map_resource` (or the element-wise variant) to a stream."""
    mapper = map_resource_items if each else map_resource
    for resource in resources:
        yield mapper(resource, fn)


__all__ = [
    "Error",
    "LOADING",
    "Loading",
    "Resource",
    "Success",
    "map_resource",
    "map_resource_items",
    "map_resources",
]
