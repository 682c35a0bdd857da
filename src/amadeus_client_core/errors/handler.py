"""Error handling utilities for HTTP responses."""

import httpx

from amadeus_client_core.errors.exceptions import (
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    RequestError,
    ServerError,
    UnauthorizedError,
)

REQUEST_BODY_LIMIT = 500
AUTH_BODY_LIMIT = 200
CORRELATION_ID_HEADER = "x-correlation-id"

_EXCEPTION_MAP: dict[int, type[ClientError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
}


def truncate(text: str | None, limit: int) -> str | None:
    """Cut ``text`` down to at most ``limit`` characters."""
    if text is None:
        return None
    return text[:limit]


def correlation_id(response: httpx.Response) -> str | None:
    """Return the correlation id header of a response, joining repeated values."""
    values = response.headers.get_list(CORRELATION_ID_HEADER)
    if not values:
        return None
    return ",".join(values)


async def read_body(response: httpx.Response, limit: int) -> str | None:
    """Read a response body for diagnostics.

    Returns None when the body cannot be read (stream already closed,
    undecodable content) so that error reporting never masks the original failure.
    """
    try:
        await response.aread()
        return truncate(response.text, limit)
    except (httpx.StreamError, httpx.DecodingError, UnicodeDecodeError, LookupError):
        return None


async def raise_for_status(response: httpx.Response) -> None:
    """Raise the matching RequestError subclass for a non-success response.

    Args:
        response: HTTP response object

    Raises:
        RequestError subclass based on status code
    """
    if response.is_success:
        return

    status_code = response.status_code
    body = await read_body(response, REQUEST_BODY_LIMIT)

    if status_code in _EXCEPTION_MAP:
        exc_class: type[RequestError] = _EXCEPTION_MAP[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = RequestError

    message = f"Request failed with status {status_code} ({response.reason_phrase})."
    kwargs = {
        "status_code": status_code,
        "response_body": body,
        "correlation_id": correlation_id(response),
        "response": response,
    }

    if exc_class is RateLimitError:
        retry_after = None
        if "retry-after" in response.headers:
            try:
                retry_after = int(response.headers["retry-after"])
            except (ValueError, TypeError):
                retry_after = None
        raise RateLimitError(message, retry_after=retry_after, **kwargs)

    raise exc_class(message, **kwargs)
