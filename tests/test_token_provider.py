"""Tests for the bearer token providers."""

import datetime

import pytest
from google.oauth2.credentials import Credentials

from calbridge.integrations.gsuite.auth import (
    DEFAULT_TOKEN_ENV_VAR,
    EnvironmentTokenProvider,
    GoogleCredentialsTokenProvider,
    StaticTokenProvider,
)
from calbridge.integrations.gsuite.gcalendar import CredentialError


class TestEnvironmentTokenProvider:
    def test_default_variable(self):
        assert DEFAULT_TOKEN_ENV_VAR == "ISTRUZI_API_KEY"

    def test_reads_variable_at_call_time(self, monkeypatch):
        provider = EnvironmentTokenProvider("CALBRIDGE_TEST_TOKEN")

        monkeypatch.setenv("CALBRIDGE_TEST_TOKEN", "first")
        assert provider() == "first"

        monkeypatch.setenv("CALBRIDGE_TEST_TOKEN", "second")
        assert provider() == "second"

    def test_missing_variable(self, monkeypatch):
        monkeypatch.delenv("CALBRIDGE_TEST_TOKEN", raising=False)

        with pytest.raises(CredentialError, match="CALBRIDGE_TEST_TOKEN"):
            EnvironmentTokenProvider("CALBRIDGE_TEST_TOKEN")()

    def test_missing_variable_is_not_logged(self, monkeypatch, caplog):
        """The adapter reports the failure; the provider only raises."""
        monkeypatch.delenv("CALBRIDGE_TEST_TOKEN", raising=False)

        with caplog.at_level("DEBUG"), pytest.raises(CredentialError):
            EnvironmentTokenProvider("CALBRIDGE_TEST_TOKEN")()

        assert caplog.records == []

    def test_empty_variable(self, monkeypatch):
        monkeypatch.setenv("CALBRIDGE_TEST_TOKEN", "")

        with pytest.raises(CredentialError):
            EnvironmentTokenProvider("CALBRIDGE_TEST_TOKEN")()


class TestStaticTokenProvider:
    def test_returns_token(self):
        assert StaticTokenProvider("abc")() == "abc"

    def test_repr_hides_token(self):
        assert "abc" not in repr(StaticTokenProvider("abc"))

    def test_rejects_empty_token(self):
        with pytest.raises(ValueError):
            StaticTokenProvider("")


class TestGoogleCredentialsTokenProvider:
    def test_returns_access_token(self):
        provider = GoogleCredentialsTokenProvider(Credentials(token="ya29.token"))
        assert provider() == "ya29.token"

    def test_expired_token_is_still_returned(self):
        """Refreshing is left to the owner of the credentials."""
        credentials = Credentials(
            token="ya29.old",
            expiry=datetime.datetime.utcnow() - datetime.timedelta(hours=1),
        )
        assert GoogleCredentialsTokenProvider(credentials)() == "ya29.old"

    def test_missing_access_token(self):
        provider = GoogleCredentialsTokenProvider(Credentials(token=None))

        with pytest.raises(CredentialError):
            provider()
