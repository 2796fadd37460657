from collections.abc import Hashable
from typing import Any

import pandas as pd


class APIError(Exception):
    """Base class for all errors reported by the Mailchimp API.

    Mailchimp answers failed requests with a problem-detail document carrying
    ``type``, ``title``, ``status``, ``detail`` and ``instance`` and, for
    invalid resources, a list of field-level ``errors``.
    """

    _default_message: str = "An error occurred in the Mailchimp API."

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
        title: str | None = None,
        detail: str | None = None,
        error_type: str | None = None,
        instance: str | None = None,
        errors: list[dict[Hashable, Any]] | None = None,
    ):
        self.message = message or self._default_message
        self.status_code = status_code
        self.title = title
        self.detail = detail
        self.error_type = error_type
        self.instance = instance
        self.errors = errors or []
        super().__init__(self.message)

    @property
    def status(self) -> int | None:
        """The HTTP status code of the failed response."""
        return self.status_code

    def to_list(self) -> list[dict[Hashable, Any]]:
        """Return the field-level errors as a list of dictionaries.

        Returns:
            list[dict[Hashable, Any]]: List of field error details.
        """
        return self.errors

    def to_pandas(self) -> pd.DataFrame | None:
        """Return the field-level errors as a pandas DataFrame.

        Returns:
            pd.DataFrame | None: DataFrame of field errors, or None if
                not possible.
        """
        if not self.errors:
            return None

        try:
            return pd.DataFrame(self.errors)
        except Exception:
            # the error list does not have a tabular shape
            return None


class BadRequestError(APIError):
    """400: The resource sent was invalid."""

    _default_message = "The request was invalid."


class AuthenticationError(APIError):
    _default_message = "API key missing or invalid."


class PermissionDeniedError(APIError):
    _default_message = "Permission denied."


class ResourceNotFoundError(APIError):
    _default_message = "The requested resource was not found."


class MethodNotAllowedError(APIError):
    _default_message = "The method is not allowed on this resource."


class TooManyRequestsError(APIError):
    _default_message = "Too many requests."


class ServerError(APIError):
    _default_message = "The server encountered an internal error."
