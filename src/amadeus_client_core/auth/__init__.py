"""Authentication components for Amadeus API clients.

This module provides:
- Access token value types and the token provider contract
- OAuth2 client-credentials provider with a single-flight token cache
- Multi-source client-credential resolution

Example:
    ```python
    from amadeus_client_core.auth import BearerTokenProvider, CredentialResolver

    credentials = CredentialResolver().resolve_client_credentials()
    ```
"""

from amadeus_client_core.auth.bearer import BearerTokenProvider
from amadeus_client_core.auth.credentials import ClientCredentials, CredentialResolver
from amadeus_client_core.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
    TokenRequestError,
)
from amadeus_client_core.auth.tokens import AccessToken, TokenProvider, TokenRequestContext

__all__ = [
    "AccessToken",
    "BearerTokenProvider",
    "ClientCredentials",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "TokenProvider",
    "TokenRequestContext",
    "TokenRequestError",
]
