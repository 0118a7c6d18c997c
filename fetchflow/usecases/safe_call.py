"""Run one remote call and turn every outcome into a single Resource.

This is the only place in the pipeline where exceptions from the transport
are caught. Everything downstream sees ``Success`` or ``Error`` values.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, Optional, TypeVar

from fetchflow.adapters.api_errors import HttpStatusError
from fetchflow.domain.errors import (
    MSG_SERVER,
    MSG_UNKNOWN,
    ApiError,
    HttpError,
    NetworkError,
    UnknownError,
    is_api_error,
)
from fetchflow.domain.ports import ApiErrorMapper, HttpResponse
from fetchflow.domain.resource import Error, Resource, Success
from fetchflow.usecases.error_mapping import DefaultApiErrorMapper

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

ApiCall = Callable[[], HttpResponse[T]]


def safe_api_call(
    api_call: ApiCall[T],
    error_mapper: Optional[ApiErrorMapper] = None,
) -> Iterator[Resource[T]]:
    """Return a lazy stream that yields exactly one ``Success`` or ``Error``.

    ``api_call`` is invoked once, when the stream is first advanced, on the
    thread that drains it. Callers that want a ``Loading`` marker add it
    themselves (see ``collect_resource.with_loading``).
    """
    mapper = error_mapper if error_mapper is not None else DefaultApiErrorMapper()
    yield _attempt(api_call, mapper)


def _attempt(api_call: ApiCall[T], mapper: ApiErrorMapper) -> Resource[T]:
    try:
        response = api_call()
        if response.is_successful and response.body is not None:
            return Success(response.body)
        code = int(response.code)
        api_error = mapper.map_error(_read_error_body(response), code)
        if not is_api_error(api_error):
            raise TypeError(
                f"{type(mapper).__name__}.map_error returned {type(api_error).__name__}"
            )
        LOGGER.info("Call failed with HTTP %s: %s", code, api_error.message)
    except HttpStatusError as exc:
        api_error = HttpError(f"{MSG_SERVER}: {exc.status_code}", exc.status_code)
        LOGGER.info("Transport rejected response with HTTP %s", exc.status_code)
    except OSError as exc:
        api_error = NetworkError()
        LOGGER.warning("Network failure: %s", exc)
    except Exception as exc:
        api_error = _unexpected(exc)
        LOGGER.warning("Unexpected failure during call", exc_info=True)
    return Error(api_error)


def _read_error_body(response: HttpResponse[T]) -> Optional[str]:
    try:
        return response.error_body()
    except Exception as exc:
        LOGGER.debug("Error body unreadable: %s", exc)
        return None


def _unexpected(exc: Exception) -> ApiError:
    text = str(exc)
    return UnknownError(text if text.strip() else MSG_UNKNOWN)


__all__ = ["ApiCall", "safe_api_call"]
