"""Request/response logging with credential redaction."""

import logging
import time

import httpx

from amadeus_client_core.pipeline.context import PipelineContext
from amadeus_client_core.pipeline.policy import HttpPipelinePolicy, NextPolicy

logger = logging.getLogger(__name__)

REDACTED_AUTHORIZATION = "Bearer ***REDACTED***"
SENSITIVE_HEADERS = frozenset(["authorization", "proxy-authorization"])


def redact_headers(headers: httpx.Headers) -> dict[str, str]:
    """Return a loggable copy of ``headers`` with credentials replaced."""
    return {
        key: (REDACTED_AUTHORIZATION if key.lower() in SENSITIVE_HEADERS else value)
        for key, value in headers.multi_items()
    }


class LoggingPolicy(HttpPipelinePolicy):
    """Log every request and the response status with elapsed time.

    Logging is best-effort: a failing logger never aborts the request. The
    request itself is not modified; redaction only applies to what is logged.

    Args:
        sink: Destination logger. Defaults to this module's logger.
    """

    def __init__(self, sink: logging.Logger | None = None) -> None:
        self._logger = sink if sink is not None else logger

    def _log_request(self, context: PipelineContext, request: httpx.Request) -> None:
        try:
            self._logger.info(f"Request {context.request_id} {request.method} {request.url}")
            if self._logger.isEnabledFor(logging.DEBUG):
                self._logger.debug(f"Request {context.request_id} headers: {redact_headers(request.headers)}")
        except Exception:  # noqa: BLE001 - logging never fails the request
            pass

    def _log_response(self, context: PipelineContext, response: httpx.Response, elapsed_ms: float) -> None:
        try:
            self._logger.info(f"Response {context.request_id} {response.status_code} in {elapsed_ms:.1f}ms")
        except Exception:  # noqa: BLE001 - logging never fails the request
            pass

    async def process(
        self,
        context: PipelineContext,
        request: httpx.Request,
        next_policy: NextPolicy,
    ) -> httpx.Response:
        self._log_request(context, request)

        start = time.perf_counter()
        response = await next_policy(context, request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        self._log_response(context, response, elapsed_ms)
        return response
