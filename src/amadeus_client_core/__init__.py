"""Amadeus Client Core - async HTTP pipeline runtime for Amadeus API clients.

This library provides the request/response pipeline that every API call flows through:
- Chain-of-responsibility pipeline of composable policies
- Telemetry and logging policies (with credential redaction)
- OAuth2 bearer authentication with a single forced refresh on 401
- Retry with exponential backoff and jitter
- Single-flight OAuth2 client-credentials token cache

Example:
    ```python
    import httpx

    from amadeus_client_core.auth import BearerTokenProvider
    from amadeus_client_core.client import AmadeusClient
    from amadeus_client_core.config import ClientOptions, RetryOptions

    async with httpx.AsyncClient() as http_client:
        provider = BearerTokenProvider.from_env(
            http_client,
            token_endpoint="https://test.api.amadeus.com/v1/security/oauth2/token",
        )
        options = ClientOptions(
            endpoint="https://test.api.amadeus.com/",
            token_provider=provider,
            retry=RetryOptions(max_attempts=3),
        )
        async with AmadeusClient(options) as client:
            response = await client.request("GET", "v1/reference-data/locations", params={"keyword": "MUC"})
    ```
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
