"""OAuth2 client-credentials token provider with a single-flight token cache.

The provider keeps at most one cached ``AccessToken``. Readers on the fast path
never take the lock: the cached token is immutable and replaced wholesale, so a
reader sees either the old or the new token, never a mix.

Refreshes are serialized by an ``asyncio.Lock`` owned by the provider instance.
Callers that queued up behind an in-flight fetch re-check the cache once they
hold the lock and reuse the freshly fetched token instead of fetching again.

Example:
    ```python
    import httpx

    from amadeus_client_core.auth import BearerTokenProvider, TokenRequestContext

    async with httpx.AsyncClient() as http_client:
        provider = BearerTokenProvider(
            http_client,
            token_endpoint="https://test.api.amadeus.com/v1/security/oauth2/token",
            client_id="my-client",
            client_secret="my-secret",
        )
        token = await provider.get_token(TokenRequestContext())
    ```
"""

import asyncio
import logging
from collections.abc import Sequence
from datetime import UTC, datetime, timedelta

import httpx

from amadeus_client_core.auth.credentials import CredentialResolver
from amadeus_client_core.auth.exceptions import TokenRequestError
from amadeus_client_core.auth.tokens import (
    DEFAULT_EARLY_REFRESH_WINDOW,
    AccessToken,
    TokenRequestContext,
)
from amadeus_client_core.errors.handler import AUTH_BODY_LIMIT, read_body

logger = logging.getLogger(__name__)

DEFAULT_EXPIRES_IN = 3600


class BearerTokenProvider:
    """Acquire and cache bearer tokens through the OAuth2 client-credentials grant.

    The ``http_client`` is owned by the caller and is never closed by the provider.

    Args:
        http_client: Client used to reach the token endpoint.
        token_endpoint: Absolute URL of the OAuth2 token endpoint.
        client_id: OAuth2 client id.
        client_secret: OAuth2 client secret.
        default_scopes: Scopes requested when the request context has none.
        early_refresh_window: Margin before expiry at which a cached token is
            treated as expired.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        token_endpoint: str,
        client_id: str,
        client_secret: str,
        default_scopes: Sequence[str] | None = None,
        *,
        early_refresh_window: timedelta = DEFAULT_EARLY_REFRESH_WINDOW,
    ) -> None:
        for name, value in (
            ("http_client", http_client),
            ("token_endpoint", token_endpoint),
            ("client_id", client_id),
            ("client_secret", client_secret),
        ):
            if value is None:
                raise TypeError(f"{name} must not be None")

        self._http_client = http_client
        self._token_endpoint = token_endpoint
        self._client_id = client_id
        self._client_secret = client_secret
        self._default_scopes = tuple(default_scopes or ())
        self._early_refresh_window = early_refresh_window
        self._lock = asyncio.Lock()
        self._cached_token: AccessToken | None = None

    @classmethod
    def from_env(
        cls,
        http_client: httpx.AsyncClient,
        token_endpoint: str,
        default_scopes: Sequence[str] | None = None,
        *,
        resolver: CredentialResolver | None = None,
    ) -> "BearerTokenProvider":
        """Build a provider whose client id and secret come from the environment.

        Raises:
            CredentialNotFoundError: If the client id or secret is missing.
        """
        credentials = (resolver or CredentialResolver()).resolve_client_credentials()
        return cls(
            http_client,
            token_endpoint,
            credentials.client_id,
            credentials.client_secret,
            default_scopes,
        )

    @property
    def cached_token(self) -> AccessToken | None:
        return self._cached_token

    def invalidate(self) -> None:
        """Drop the cached token so the next call fetches a new one."""
        self._cached_token = None

    def _is_usable(self, token: AccessToken | None) -> bool:
        return token is not None and bool(token.token) and not token.is_expired(self._early_refresh_window)

    async def get_token(self, context: TokenRequestContext, *, force_refresh: bool = False) -> AccessToken:
        """Return a valid access token, fetching one if needed.

        Args:
            context: Requested scopes; empty scopes fall back to ``default_scopes``.
            force_refresh: Skip the lock-free fast path and never return the token
                that was cached when the call started.

        Raises:
            TokenRequestError: If the token endpoint does not return a usable token.
        """
        snapshot = self._cached_token
        if not force_refresh and self._is_usable(snapshot):
            return snapshot

        async with self._lock:
            current = self._cached_token
            if self._is_usable(current) and (not force_refresh or current is not snapshot):
                return current

            token = await self._fetch_token(context)
            self._cached_token = token
            return token

    async def _fetch_token(self, context: TokenRequestContext) -> AccessToken:
        scopes = context.scopes if context.scopes else self._default_scopes
        form = {
            "grant_type": "client_credentials",
            "client_id": self._client_id,
            "client_secret": self._client_secret,
            "scope": " ".join(scopes),
        }

        logger.debug(f"Requesting access token from {self._token_endpoint} (scopes: {form['scope'] or '<none>'})")
        response = await self._http_client.post(self._token_endpoint, data=form)

        if not response.is_success:
            body = await read_body(response, AUTH_BODY_LIMIT)
            raise TokenRequestError(
                f"Token request failed with status {response.status_code}",
                status_code=response.status_code,
                response_body=body,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise TokenRequestError(
                "Token endpoint returned a non-JSON payload",
                status_code=response.status_code,
            ) from e

        token = payload.get("access_token") if isinstance(payload, dict) else None
        if not isinstance(token, str) or not token:
            raise TokenRequestError(
                "Token endpoint response has no access_token",
                status_code=response.status_code,
            )

        expires_in = payload.get("expires_in", DEFAULT_EXPIRES_IN)
        try:
            expires_in = int(expires_in)
        except (TypeError, ValueError) as e:
            raise TokenRequestError(
                f"Token endpoint returned an invalid expires_in: {expires_in!r}",
                status_code=response.status_code,
            ) from e

        logger.info(f"Acquired access token (expires in {expires_in}s)")
        return AccessToken(token=token, expires_on=datetime.now(UTC) + timedelta(seconds=expires_in))
