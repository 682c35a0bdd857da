"""Testing utilities for code built on the Amadeus client pipeline.

Combine these helpers with ``httpx.MockTransport`` to exercise policies
without network access.

Example:
    ```python
    from amadeus_client_core.testing import RecordingPolicy, StaticTokenProvider

    events = []
    pipeline = HttpPipeline(
        [RecordingPolicy("outer", events), AuthPolicy(StaticTokenProvider(["t1", "t2"]))],
        httpx.MockTransport(lambda request: httpx.Response(200)),
    )
    ```
"""

from collections.abc import Sequence
from datetime import UTC, datetime, timedelta

import httpx

from amadeus_client_core.auth.tokens import AccessToken, TokenRequestContext
from amadeus_client_core.pipeline.context import PipelineContext
from amadeus_client_core.pipeline.policy import HttpPipelinePolicy, NextPolicy


class StaticTokenProvider:
    """Token provider that hands out a fixed sequence of tokens.

    Plain calls return the current token; forced refreshes advance to the next
    one (the last token repeats once the sequence is used up).

    Attributes:
        calls: Number of ``get_token`` invocations.
        forced_refreshes: Number of invocations with ``force_refresh=True``.
        contexts: Every request context received, in order.
    """

    def __init__(self, tokens: Sequence[str] = ("test-token",), lifetime: timedelta = timedelta(hours=1)) -> None:
        if not tokens:
            raise ValueError("tokens must not be empty")
        self._tokens = list(tokens)
        self._index = 0
        self._lifetime = lifetime
        self.calls = 0
        self.forced_refreshes = 0
        self.contexts: list[TokenRequestContext] = []

    async def get_token(self, context: TokenRequestContext, *, force_refresh: bool = False) -> AccessToken:
        self.calls += 1
        self.contexts.append(context)
        if force_refresh:
            self.forced_refreshes += 1
            self._index = min(self._index + 1, len(self._tokens) - 1)
        return AccessToken(self._tokens[self._index], datetime.now(UTC) + self._lifetime)


class RecordingPolicy(HttpPipelinePolicy):
    """Append ``"<name>-pre"`` and ``"<name>-post"`` to ``events`` around the next stage."""

    def __init__(self, name: str, events: list[str]) -> None:
        self.name = name
        self.events = events

    async def process(
        self,
        context: PipelineContext,
        request: httpx.Request,
        next_policy: NextPolicy,
    ) -> httpx.Response:
        self.events.append(f"{self.name}-pre")
        response = await next_policy(context, request)
        self.events.append(f"{self.name}-post")
        return response


__all__ = ["RecordingPolicy", "StaticTokenProvider"]
