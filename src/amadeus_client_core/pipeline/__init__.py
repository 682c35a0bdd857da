"""Request/response pipeline for Amadeus API clients.

A pipeline is an ordered list of policies wrapped around an httpx transport.
Each policy receives the per-call context, the request and a continuation to
the rest of the chain:

    caller -> Telemetry -> Logging -> Auth -> Retry -> custom policies -> transport

Example:
    ```python
    import httpx

    from amadeus_client_core.pipeline import HttpPipeline
    from amadeus_client_core.pipeline.policies import RetryPolicy, TelemetryPolicy

    pipeline = HttpPipeline(
        [TelemetryPolicy("my-app", "1.0.0"), RetryPolicy()],
        httpx.AsyncHTTPTransport(),
    )
    response = await pipeline.send(httpx.Request("GET", "https://api.example.com/"))
    ```
"""

from amadeus_client_core.pipeline.context import PipelineContext
from amadeus_client_core.pipeline.pipeline import HttpPipeline
from amadeus_client_core.pipeline.policy import HttpPipelinePolicy, NextPolicy

__all__ = [
    "HttpPipeline",
    "HttpPipelinePolicy",
    "NextPolicy",
    "PipelineContext",
]
