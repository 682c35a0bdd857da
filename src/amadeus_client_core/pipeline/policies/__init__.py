"""Built-in pipeline policies.

Modules:
    telemetry: User-Agent and request id headers
    http_logging: Request/response logging with credential redaction
    auth: Bearer authentication with one forced refresh on 401
    retry: Exponential backoff retry over downstream stages
"""

from amadeus_client_core.pipeline.policies.auth import AuthPolicy
from amadeus_client_core.pipeline.policies.http_logging import LoggingPolicy, redact_headers
from amadeus_client_core.pipeline.policies.retry import RetryPolicy
from amadeus_client_core.pipeline.policies.telemetry import TelemetryPolicy

__all__ = [
    "AuthPolicy",
    "LoggingPolicy",
    "RetryPolicy",
    "TelemetryPolicy",
    "redact_headers",
]
