"""The policy contract every pipeline stage implements."""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

import httpx

from amadeus_client_core.pipeline.context import PipelineContext

NextPolicy = Callable[[PipelineContext, httpx.Request], Awaitable[httpx.Response]]
"""Continuation representing the rest of the chain, ending in the transport."""


class HttpPipelinePolicy(ABC):
    """A pipeline stage.

    A policy may modify the request, must await ``next_policy`` to reach the
    transport (any number of times), and may inspect or replace the response
    on the way back out.

    Example:
        ```python
        class TenantHeaderPolicy(HttpPipelinePolicy):
            def __init__(self, tenant: str) -> None:
                self._tenant = tenant

            async def process(self, context, request, next_policy):
                request.headers["x-tenant"] = self._tenant
                return await next_policy(context, request)
        ```
    """

    @abstractmethod
    async def process(
        self,
        context: PipelineContext,
        request: httpx.Request,
        next_policy: NextPolicy,
    ) -> httpx.Response:
        """Handle ``request`` and return the response for the stages above."""
