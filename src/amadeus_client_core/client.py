"""Client facade that assembles the default pipeline."""

import logging
from typing import Any

import httpx

from amadeus_client_core import __version__
from amadeus_client_core.config import ClientOptions
from amadeus_client_core.errors.handler import raise_for_status
from amadeus_client_core.pipeline import HttpPipeline, HttpPipelinePolicy
from amadeus_client_core.pipeline.policies import AuthPolicy, LoggingPolicy, RetryPolicy, TelemetryPolicy

PRODUCT_NAME = "amadeus-client-core"


class AmadeusClient:
    """Entry point for calling the Amadeus API through the policy pipeline.

    Policies run in this order: Telemetry (if enabled), Logging (if a logger
    is given), Auth (if a token provider is configured), Retry, then the
    additional policies from ``options`` in insertion order.

    Args:
        options: Endpoint, auth, retry and transport settings.
        logger: Enables request/response logging to this logger.

    Example:
        ```python
        options = ClientOptions(endpoint="https://test.api.amadeus.com/", token_provider=provider)
        async with AmadeusClient(options) as client:
            response = await client.request("GET", "v1/reference-data/locations", params={"keyword": "MUC"})
        ```
    """

    def __init__(self, options: ClientOptions, logger: logging.Logger | None = None) -> None:
        if options is None:
            raise TypeError("options must not be None")
        self._options = options

        self._owns_transport = options.transport is None
        self._transport = options.transport or httpx.AsyncHTTPTransport()

        self._pipeline = HttpPipeline(self._build_policies(options, logger), self._transport)

    @staticmethod
    def _build_policies(options: ClientOptions, logger: logging.Logger | None) -> list[HttpPipelinePolicy]:
        policies: list[HttpPipelinePolicy] = []

        if options.enable_telemetry:
            policies.append(TelemetryPolicy(PRODUCT_NAME, __version__))

        if logger is not None:
            policies.append(LoggingPolicy(logger))

        if options.token_provider is not None:
            policies.append(AuthPolicy(options.token_provider, options.default_scopes))

        policies.append(RetryPolicy(options.retry))
        policies.extend(options.additional_policies)
        return policies

    @property
    def options(self) -> ClientOptions:
        return self._options

    @property
    def pipeline(self) -> HttpPipeline:
        return self._pipeline

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Send a prepared request through the pipeline and return the raw response."""
        return await self._pipeline.send(request)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Call ``path`` relative to the configured endpoint.

        The response body is read before returning.

        Raises:
            RequestError: For any non-success response.
            AuthenticationError: If the API rejects the token twice.
            RetryExhaustedError: If every attempt ended with a retry-eligible status.
        """
        if not path or not path.strip():
            raise ValueError("path must be provided")

        url = httpx.URL(self._options.endpoint).join(path)
        request = httpx.Request(
            method,
            url,
            params=params,
            json=json,
            headers=headers,
            extensions={"timeout": httpx.Timeout(self._options.default_timeout).as_dict()},
        )

        response = await self.send(request)
        await response.aread()
        await raise_for_status(response)
        return response

    async def aclose(self) -> None:
        """Release the transport if this client created it."""
        if self._owns_transport:
            await self._transport.aclose()

    async def __aenter__(self) -> "AmadeusClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
