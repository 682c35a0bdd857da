"""Structured exceptions for API errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class AmadeusError(Exception):
    """Base exception for every error raised by the client library."""

    pass


class RequestError(AmadeusError):
    """An HTTP request to the API completed with a non-success status.

    Attributes:
        status_code: HTTP status code returned by the API.
        response_body: Response body, truncated to 500 characters.
        correlation_id: Value of the ``x-correlation-id`` response header, if present.
        response: The response that triggered the error.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
        correlation_id: str | None = None,
        response: "httpx.Response | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body
        self.correlation_id = correlation_id
        self.response = response


class ClientError(RequestError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(RequestError):
    """5xx server errors."""

    pass


class RetryExhaustedError(RequestError):
    """Every permitted attempt ended with a retry-eligible status code."""

    def __init__(self, message: str, attempts: int, **kwargs):
        super().__init__(message, **kwargs)
        self.attempts = attempts


class AuthenticationError(AmadeusError):
    """The API rejected the bearer credential twice in a row.

    Attributes:
        status_code: Status of the final rejected response (401).
        response_body: Response body, truncated to 200 characters.
    """

    def __init__(self, message: str, status_code: int | None = None, response_body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body
