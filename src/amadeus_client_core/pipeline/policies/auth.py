"""Bearer authentication with a single forced token refresh on 401."""

import logging
from collections.abc import Sequence

import httpx

from amadeus_client_core.auth.tokens import TokenProvider, TokenRequestContext
from amadeus_client_core.errors.exceptions import AuthenticationError
from amadeus_client_core.errors.handler import AUTH_BODY_LIMIT, read_body
from amadeus_client_core.pipeline.context import PipelineContext
from amadeus_client_core.pipeline.policy import HttpPipelinePolicy, NextPolicy

logger = logging.getLogger(__name__)


class AuthPolicy(HttpPipelinePolicy):
    """Attach a bearer token and recover once from a rejected token.

    The first attempt uses whatever token the provider hands out (possibly
    cached). If the downstream stages answer 401, that response is released,
    a token is obtained through the provider's forced-refresh path and the
    request is sent exactly once more. A second 401 raises AuthenticationError.
    Every other response is returned unchanged.
    """

    MAX_ATTEMPTS = 2

    def __init__(self, token_provider: TokenProvider, scopes: Sequence[str] = ()) -> None:
        self._token_provider = token_provider
        self._scopes = tuple(scopes)

    async def process(
        self,
        context: PipelineContext,
        request: httpx.Request,
        next_policy: NextPolicy,
    ) -> httpx.Response:
        response: httpx.Response | None = None

        for attempt in range(1, self.MAX_ATTEMPTS + 1):
            if response is not None:
                await response.aclose()

            token = await self._token_provider.get_token(
                TokenRequestContext(self._scopes),
                force_refresh=attempt > 1,
            )
            request.headers["Authorization"] = f"Bearer {token.token}"

            response = await next_policy(context, request)
            if response.status_code != httpx.codes.UNAUTHORIZED:
                return response

            logger.debug(f"Request {context.request_id} rejected with 401 (auth attempt {attempt}/{self.MAX_ATTEMPTS})")

        body = await read_body(response, AUTH_BODY_LIMIT)
        raise AuthenticationError(
            f"Authentication failed (401). Body: {body}",
            status_code=response.status_code,
            response_body=body,
        )
