"""Domain package exports for resources, classified errors and user records."""

from .errors import (
    API_ERROR_TYPES,
    ApiError,
    ClientError,
    HttpError,
    MSG_NETWORK,
    MSG_SERVER,
    MSG_UNKNOWN,
    NetworkError,
    ServerError,
    UnknownError,
    is_api_error,
)
from .models import ErrorResponseDto, User, UserDto, user_from_dto
from .resource import (
    LOADING,
    Error,
    Loading,
    Resource,
    Success,
    map_resource,
    map_resource_items,
    map_resources,
)

__all__ = [
    "API_ERROR_TYPES",
    "ApiError",
    "ClientError",
    "Error",
    "ErrorResponseDto",
    "HttpError",
    "LOADING",
    "Loading",
    "MSG_NETWORK",
    "MSG_SERVER",
    "MSG_UNKNOWN",
    "NetworkError",
    "Resource",
    "ServerError",
    "Success",
    "UnknownError",
    "User",
    "UserDto",
    "is_api_error",
    "map_resource",
    "map_resource_items",
    "map_resources",
    "user_from_dto",
]
