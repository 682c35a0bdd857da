"""Retry policy with exponential backoff and additive jitter.

The policy retries everything downstream of it (additional policies and the
transport). Policies placed before it in the pipeline run once per send.

## Outcome Classification

| Outcome | Retried | Notes |
|---------|---------|-------|
| Status 408 or >= 500 | ✅ | Response released before the next attempt |
| `httpx.TimeoutException` | Only if `retry_on_timeouts` | |
| Other `httpx.TransportError` | ✅ | Except `httpx.UnsupportedProtocol` |
| Any other status | ❌ | Returned as-is |
| Any other exception | ❌ | Propagated, cancellation included |

When the last attempt is still retry-eligible, the captured transport error is
re-raised, or RetryExhaustedError is raised for a retry-eligible status.

## Backoff

Attempt *k* (1-indexed) waits
`min(base_delay * 2 ** (k - 1) + uniform(0, base_delay), max_delay)` seconds.

## Example

```python
from amadeus_client_core.config import RetryOptions
from amadeus_client_core.pipeline import HttpPipeline
from amadeus_client_core.pipeline.policies import RetryPolicy

pipeline = HttpPipeline(
    [RetryPolicy(RetryOptions(max_attempts=3, base_delay=0.5))],
    httpx.AsyncHTTPTransport(),
)
```

Request bodies are buffered in memory once before the first attempt, so only
bodies that fit in memory are supported.
"""

import asyncio
import logging
import random

import httpx

from amadeus_client_core.config import RetryOptions
from amadeus_client_core.errors.exceptions import RetryExhaustedError
from amadeus_client_core.errors.handler import REQUEST_BODY_LIMIT, correlation_id, read_body
from amadeus_client_core.pipeline.context import PipelineContext
from amadeus_client_core.pipeline.policy import HttpPipelinePolicy, NextPolicy

logger = logging.getLogger(__name__)

MAX_BACKOFF_EXPONENT = 1023


class RetryPolicy(HttpPipelinePolicy):
    """Bounded attempt loop over the downstream stages.

    Args:
        options: Attempt limit, backoff bounds and timeout handling.
        rng: Random source for jitter (default: a private ``random.Random``).

    Example:
        ```python
        policy = RetryPolicy(RetryOptions(max_attempts=5, base_delay=0.2, max_delay=5.0))
        ```
    """

    def __init__(self, options: RetryOptions | None = None, *, rng: random.Random | None = None) -> None:
        self.options = options or RetryOptions()
        self._rng = rng or random.Random()

    async def process(
        self,
        context: PipelineContext,
        request: httpx.Request,
        next_policy: NextPolicy,
    ) -> httpx.Response:
        body = await request.aread()
        max_attempts = self.options.max_attempts

        for attempt in range(1, max_attempts + 1):
            context.attempt += 1
            attempt_request = self._clone_request(request, body)

            response: httpx.Response | None = None
            failure: httpx.TransportError | None = None
            try:
                response = await next_policy(context, attempt_request)
            except httpx.TransportError as e:
                if not self._is_transient(e):
                    raise
                failure = e
            else:
                if not self._should_retry(response):
                    return response

            if attempt == max_attempts:
                if failure is not None:
                    raise failure
                raise await self._exhausted(response, attempt)

            if response is not None:
                await response.aclose()

            delay = self._calculate_backoff_delay(attempt)
            reason = response.status_code if response is not None else repr(failure)
            logger.warning(
                f"Request {request.method} {request.url} failed with {reason}, "
                f"retrying in {delay:.3f}s (attempt {attempt}/{max_attempts})"
            )

            await asyncio.sleep(delay)

        # Never reached: RetryOptions enforces max_attempts >= 1.
        raise RuntimeError("Retry loop exited unexpectedly")

    @staticmethod
    def _clone_request(original: httpx.Request, body: bytes) -> httpx.Request:
        """Build a fresh request with the same method, URL, headers and body bytes.

        The buffered body is fixed-length, so the original framing headers are
        dropped and httpx sets ``Content-Length`` from ``body``.
        """
        headers = original.headers.copy()
        headers.pop("transfer-encoding", None)
        headers.pop("content-length", None)
        return httpx.Request(
            original.method,
            original.url,
            headers=headers,
            content=body,
            extensions=dict(original.extensions),
        )

    @staticmethod
    def _should_retry(response: httpx.Response) -> bool:
        return response.status_code == httpx.codes.REQUEST_TIMEOUT or response.status_code >= 500

    def _is_transient(self, error: httpx.TransportError) -> bool:
        if isinstance(error, httpx.TimeoutException):
            return self.options.retry_on_timeouts
        return not isinstance(error, httpx.UnsupportedProtocol)

    def _calculate_backoff_delay(self, attempt: int) -> float:
        """Calculate the delay after a failed attempt.

        Uses formula: min(base_delay * 2 ** (attempt - 1) + uniform(0, base_delay), max_delay)
        Default sequence before jitter: 0.2, 0.4, 0.8, 1.6 seconds (capped at max_delay)

        Args:
            attempt: The attempt that just failed (1-indexed)

        Returns:
            Delay in seconds
        """
        base = self.options.base_delay
        # float pow raises OverflowError past 2.0 ** 1023
        exponential = base * 2.0 ** min(attempt - 1, MAX_BACKOFF_EXPONENT)
        jitter = self._rng.uniform(0, base)
        return min(exponential + jitter, self.options.max_delay)

    async def _exhausted(self, response: httpx.Response, attempts: int) -> RetryExhaustedError:
        body = await read_body(response, REQUEST_BODY_LIMIT)
        return RetryExhaustedError(
            f"Exceeded {attempts} attempts; last status {response.status_code}",
            attempts=attempts,
            status_code=response.status_code,
            response_body=body,
            correlation_id=correlation_id(response),
            response=response,
        )
