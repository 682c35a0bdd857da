"""Error types and response-to-exception mapping for Amadeus API clients."""

from amadeus_client_core.errors.exceptions import (
    AmadeusError,
    AuthenticationError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    RequestError,
    RetryExhaustedError,
    ServerError,
    UnauthorizedError,
)
from amadeus_client_core.errors.handler import correlation_id, raise_for_status, read_body, truncate

__all__ = [
    "AmadeusError",
    "AuthenticationError",
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitError",
    "RequestError",
    "RetryExhaustedError",
    "ServerError",
    "UnauthorizedError",
    "correlation_id",
    "raise_for_status",
    "read_body",
    "truncate",
]
