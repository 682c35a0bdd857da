"""Tests for token value types."""

import dataclasses
from datetime import UTC, datetime, timedelta

import pytest

from amadeus_client_core.auth import AccessToken, BearerTokenProvider, TokenProvider, TokenRequestContext
from amadeus_client_core.testing import StaticTokenProvider


class TestAccessToken:
    """Test AccessToken expiry semantics."""

    @pytest.mark.unit
    def test_not_expired_outside_window(self):
        now = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
        token = AccessToken("abc", now + timedelta(minutes=10))

        assert token.is_expired(now=now) is False

    @pytest.mark.unit
    def test_expired_inside_default_window(self):
        now = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
        token = AccessToken("abc", now + timedelta(seconds=90))

        assert token.is_expired(now=now) is True

    @pytest.mark.unit
    def test_window_boundary_counts_as_expired(self):
        now = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
        token = AccessToken("abc", now + timedelta(minutes=2))

        assert token.is_expired(now=now) is True

    @pytest.mark.unit
    def test_custom_window(self):
        now = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
        token = AccessToken("abc", now + timedelta(seconds=90))

        assert token.is_expired(timedelta(seconds=30), now=now) is False
        assert token.is_expired(timedelta(0), now=now + timedelta(seconds=90)) is True

    @pytest.mark.unit
    def test_uses_current_time_by_default(self):
        assert AccessToken("abc", datetime.now(UTC) + timedelta(hours=1)).is_expired() is False
        assert AccessToken("abc", datetime.now(UTC) - timedelta(seconds=1)).is_expired() is True

    @pytest.mark.unit
    def test_is_immutable(self):
        token = AccessToken("abc", datetime.now(UTC))

        with pytest.raises(dataclasses.FrozenInstanceError):
            token.token = "changed"

    @pytest.mark.unit
    def test_repr_hides_token(self):
        token = AccessToken("very-secret", datetime.now(UTC))

        assert "very-secret" not in repr(token)


class TestTokenRequestContext:
    """Test TokenRequestContext."""

    @pytest.mark.unit
    def test_scopes_are_frozen_in_order(self):
        scopes = ["b", "a"]
        context = TokenRequestContext(scopes)
        scopes.append("c")

        assert context.scopes == ("b", "a")

    @pytest.mark.unit
    def test_default_is_empty(self):
        assert TokenRequestContext().scopes == ()

    @pytest.mark.unit
    def test_rejects_none(self):
        with pytest.raises(TypeError):
            TokenRequestContext(None)


class TestTokenProviderProtocol:
    """Both built-in providers satisfy the TokenProvider protocol."""

    @pytest.mark.unit
    def test_static_provider(self):
        assert isinstance(StaticTokenProvider(), TokenProvider)

    @pytest.mark.unit
    def test_bearer_provider(self):
        assert issubclass(BearerTokenProvider, TokenProvider)
