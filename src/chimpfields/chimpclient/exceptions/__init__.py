from .exception_factory import raise_from_response
from .exceptions import (
    APIError,
    AuthenticationError,
    BadRequestError,
    MethodNotAllowedError,
    PermissionDeniedError,
    ResourceNotFoundError,
    ServerError,
    TooManyRequestsError,
)

__all__ = [
    "APIError",
    "AuthenticationError",
    "BadRequestError",
    "MethodNotAllowedError",
    "PermissionDeniedError",
    "ResourceNotFoundError",
    "ServerError",
    "TooManyRequestsError",
    "raise_from_response",
]
