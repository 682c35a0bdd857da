"""Tests for configuration value objects."""

import dataclasses

import pytest

from amadeus_client_core.config import DEFAULT_TIMEOUT, ClientOptions, RetryOptions
from amadeus_client_core.testing import RecordingPolicy


class TestRetryOptions:
    """Test RetryOptions defaults and validation."""

    @pytest.mark.unit
    def test_defaults(self):
        options = RetryOptions()

        assert options.max_attempts == 5
        assert options.base_delay == 0.2
        assert options.max_delay == 5.0
        assert options.retry_on_timeouts is True

    @pytest.mark.unit
    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            RetryOptions().max_attempts = 10

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "kwargs",
        [{"max_attempts": 0}, {"max_attempts": -1}, {"base_delay": -0.1}, {"max_delay": -1.0}],
    )
    def test_rejects_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            RetryOptions(**kwargs)


class TestClientOptions:
    """Test ClientOptions defaults and policy registration."""

    @pytest.mark.unit
    def test_defaults(self):
        options = ClientOptions(endpoint="https://api.example.com/")

        assert options.token_provider is None
        assert options.default_scopes == ()
        assert options.retry == RetryOptions()
        assert options.default_timeout == DEFAULT_TIMEOUT == 100.0
        assert options.enable_telemetry is True
        assert options.transport is None
        assert options.additional_policies == []

    @pytest.mark.unit
    def test_requires_endpoint(self):
        with pytest.raises(ValueError):
            ClientOptions(endpoint="")

    @pytest.mark.unit
    def test_scopes_are_copied(self):
        scopes = ["a"]
        options = ClientOptions(endpoint="https://api.example.com/", default_scopes=scopes)
        scopes.append("b")

        assert options.default_scopes == ("a",)

    @pytest.mark.unit
    def test_add_policy_is_fluent_and_ordered(self):
        events: list[str] = []
        first, second = RecordingPolicy("first", events), RecordingPolicy("second", events)
        options = ClientOptions(endpoint="https://api.example.com/")

        result = options.add_policy(first).add_policy(second)

        assert result is options
        assert options.additional_policies == [first, second]

    @pytest.mark.unit
    def test_add_policy_rejects_none(self):
        with pytest.raises(TypeError):
            ClientOptions(endpoint="https://api.example.com/").add_policy(None)

    @pytest.mark.unit
    def test_policy_lists_are_not_shared(self):
        a = ClientOptions(endpoint="https://a.example.com/")
        b = ClientOptions(endpoint="https://b.example.com/")
        a.add_policy(RecordingPolicy("x", []))

        assert b.additional_policies == []
