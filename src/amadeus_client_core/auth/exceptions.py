"""Custom exceptions for credential resolution and token acquisition.

Example:
    ```python
    from amadeus_client_core.auth.exceptions import CredentialNotFoundError

    if not client_id:
        raise CredentialNotFoundError("Client id not found", env_var_name="AMADEUS_CLIENT_ID")
    ```
"""

from amadeus_client_core.errors.exceptions import AmadeusError


class CredentialError(AmadeusError):
    """Base exception for credential-related errors.

    All credential-specific exceptions inherit from this class,
    making it easy to catch any credential-related error.
    """

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when a credential file cannot be read."""

    pass


class TokenRequestError(CredentialError):
    """Raised when the token endpoint does not hand out a usable access token.

    Covers non-success responses as well as success responses whose payload
    lacks a non-empty ``access_token``.

    Attributes:
        status_code: HTTP status returned by the token endpoint.
        response_body: Token endpoint response body, truncated to 200 characters.
    """

    def __init__(self, message: str, status_code: int | None = None, response_body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body
