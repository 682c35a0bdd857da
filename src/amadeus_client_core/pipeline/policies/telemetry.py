"""Telemetry headers for API analytics and request correlation."""

import platform

import httpx

from amadeus_client_core.pipeline.context import PipelineContext
from amadeus_client_core.pipeline.policy import HttpPipelinePolicy, NextPolicy

REQUEST_ID_HEADER = "x-sdk-request-id"


class TelemetryPolicy(HttpPipelinePolicy):
    """Tag outgoing requests with a User-Agent and the pipeline request id.

    The User-Agent reads ``{product_name}/{version} (Python {python_version})``.
    Responses pass through untouched.
    """

    def __init__(self, product_name: str, version: str) -> None:
        self.user_agent = f"{product_name}/{version} (Python {platform.python_version()})"

    async def process(
        self,
        context: PipelineContext,
        request: httpx.Request,
        next_policy: NextPolicy,
    ) -> httpx.Response:
        request.headers["User-Agent"] = self.user_agent
        request.headers[REQUEST_ID_HEADER] = context.request_id
        return await next_policy(context, request)
