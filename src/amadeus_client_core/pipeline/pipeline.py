"""Composition of policies into a single callable chain."""

from collections.abc import Iterable
from functools import reduce

import httpx

from amadeus_client_core.pipeline.context import PipelineContext
from amadeus_client_core.pipeline.policy import HttpPipelinePolicy, NextPolicy


def _bind(policy: HttpPipelinePolicy, next_policy: NextPolicy) -> NextPolicy:
    async def call(context: PipelineContext, request: httpx.Request) -> httpx.Response:
        return await policy.process(context, request, next_policy)

    return call


class HttpPipeline:
    """Run requests through an ordered list of policies and a transport.

    The first policy is the outermost: it sees the request first and the
    response last. The transport is only borrowed; the pipeline never closes it.

    Args:
        policies: Policies in execution order.
        transport: Terminal transport that performs the actual HTTP exchange.

    Example:
        ```python
        pipeline = HttpPipeline(
            [TelemetryPolicy("my-app", "1.0.0"), RetryPolicy(RetryOptions())],
            httpx.AsyncHTTPTransport(),
        )
        response = await pipeline.send(httpx.Request("GET", "https://api.example.com/"))
        ```
    """

    def __init__(self, policies: Iterable[HttpPipelinePolicy], transport: httpx.AsyncBaseTransport) -> None:
        self._policies = tuple(policies)
        self._transport = transport
        self._chain = reduce(lambda next_policy, policy: _bind(policy, next_policy), reversed(self._policies), self._terminal)

    @property
    def policies(self) -> tuple[HttpPipelinePolicy, ...]:
        return self._policies

    async def _terminal(self, context: PipelineContext, request: httpx.Request) -> httpx.Response:
        return await self._transport.handle_async_request(request)

    async def send(self, request: httpx.Request, *, request_id: str | None = None) -> httpx.Response:
        """Send ``request`` through every policy with a fresh context.

        Args:
            request: The request to send.
            request_id: Correlation id to use instead of a generated one.

        Returns:
            The response after all policies have post-processed it.
        """
        context = PipelineContext(request_id=request_id) if request_id else PipelineContext()
        return await self._chain(context, request)
