import logging

from httpx import Response

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

logger = logging.getLogger(__name__)

STATUS_ERROR_MAPPING: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: ResourceNotFoundError,
    405: MethodNotAllowedError,
    429: TooManyRequestsError,
    500: ServerError,
}


def raise_from_response(response: Response) -> None:
    """Raise an appropriate APIError based on the HTTP response.

    Args:
        response (Response): The HTTP response object.
    Raises:
        APIError: An appropriate exception based on the response status code.
    """
    if 200 <= response.status_code < 400:
        return None

    status = response.status_code

    # 1. Parse the problem document safely
    try:
        json_body = response.json()
    except Exception:
        json_body = {}
    if not isinstance(json_body, dict):
        json_body = {}

    # 2. Extract the problem-detail fields
    # We expect: {"type": "...", "title": "...", "status": 404,
    #   "detail": "...", "instance": "...", "errors": [...]}
    title = json_body.get("title")
    detail = json_body.get("detail")
    error_type = json_body.get("type")
    instance = json_body.get("instance")
    errors = json_body.get("errors")
    if not isinstance(errors, list):
        errors = None

    # 3. Construct a helpful message
    message = f"HTTP {status} Error"
    if title and detail:
        message = f"{title} ({status}): {detail}"
    elif detail:
        message = f"{status} Error: {detail}"
    elif title:
        message = f"{title} ({status} Error)"

    # 4. Select the exception class
    exc_class = STATUS_ERROR_MAPPING.get(status)
    if not exc_class:
        if 400 <= status < 500:
            exc_class = APIError
        else:
            exc_class = ServerError

    logger.warning("Mailchimp API error: %s", message)

    # 5. Instantiate and Raise
    raise exc_class(
        message=message,
        status_code=status,
        title=title,
        detail=detail,
        error_type=error_type,
        instance=instance,
        errors=errors,
    )
