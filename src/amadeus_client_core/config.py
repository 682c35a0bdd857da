"""Configuration value objects for the client and its pipeline."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from amadeus_client_core.auth.tokens import TokenProvider
    from amadeus_client_core.pipeline.policy import HttpPipelinePolicy

DEFAULT_TIMEOUT = 100.0


@dataclass(frozen=True)
class RetryOptions:
    """Retry settings applied by RetryPolicy.

    Attributes:
        max_attempts: Total attempts including the first one (>= 1).
        base_delay: Backoff base in seconds.
        max_delay: Upper bound for a single backoff delay in seconds.
        retry_on_timeouts: Whether request timeouts are retried.
    """

    max_attempts: int = 5
    base_delay: float = 0.2
    max_delay: float = 5.0
    retry_on_timeouts: bool = True

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.base_delay < 0:
            raise ValueError(f"base_delay must not be negative, got {self.base_delay}")
        if self.max_delay < 0:
            raise ValueError(f"max_delay must not be negative, got {self.max_delay}")


@dataclass
class ClientOptions:
    """Settings for ``AmadeusClient``.

    ``transport`` is caller-owned when supplied; when omitted the client creates
    and closes its own ``httpx.AsyncHTTPTransport``. Omitting ``token_provider``
    disables authentication.
    """

    endpoint: str
    token_provider: "TokenProvider | None" = None
    default_scopes: Sequence[str] = ()
    retry: RetryOptions = field(default_factory=RetryOptions)
    default_timeout: float = DEFAULT_TIMEOUT
    enable_telemetry: bool = True
    transport: "httpx.AsyncBaseTransport | None" = None
    additional_policies: list["HttpPipelinePolicy"] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.endpoint:
            raise ValueError("endpoint must be provided")
        self.default_scopes = tuple(self.default_scopes)

    def add_policy(self, policy: "HttpPipelinePolicy") -> "ClientOptions":
        """Append a policy that runs after the built-in ones."""
        if policy is None:
            raise TypeError("policy must not be None")
        self.additional_policies.append(policy)
        return self
