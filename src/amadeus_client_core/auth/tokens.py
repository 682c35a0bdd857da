"""Bearer token value types and the token provider contract."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol, runtime_checkable

DEFAULT_EARLY_REFRESH_WINDOW = timedelta(minutes=2)


@dataclass(frozen=True, slots=True)
class AccessToken:
    """An immutable bearer credential and the moment it stops being valid."""

    token: str
    expires_on: datetime

    def is_expired(
        self,
        window: timedelta = DEFAULT_EARLY_REFRESH_WINDOW,
        now: datetime | None = None,
    ) -> bool:
        """Return True once ``now`` has entered the early-refresh window before expiry."""
        current = now if now is not None else datetime.now(UTC)
        return current >= self.expires_on - window

    def __repr__(self) -> str:
        return f"AccessToken(token='***', expires_on={self.expires_on.isoformat()})"


@dataclass(frozen=True, slots=True)
class TokenRequestContext:
    """The scopes requested for a single token acquisition."""

    scopes: Sequence[str] = ()

    def __post_init__(self) -> None:
        if self.scopes is None:
            raise TypeError("scopes must not be None")
        object.__setattr__(self, "scopes", tuple(self.scopes))


@runtime_checkable
class TokenProvider(Protocol):
    """Acquires access tokens for the authentication policy.

    Implementations should return cached tokens while they are valid.
    ``force_refresh=True`` is requested after the API rejected a token; the
    provider must not hand back the token that was just rejected.
    """

    async def get_token(self, context: TokenRequestContext, *, force_refresh: bool = False) -> AccessToken: ...
