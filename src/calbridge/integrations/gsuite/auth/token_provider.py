"""
Bearer token providers for the Google Calendar client.

A token provider is any zero-argument callable returning the access token to
send. Providers are resolved on every request; none of them caches or
refreshes tokens.
"""

import logging
import os
from typing import Optional

from google.oauth2.credentials import Credentials

from ..gcalendar.errors import CredentialError

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_ENV_VAR = "ISTRUZI_API_KEY"
TOKEN_ENV_VAR = os.getenv("CALBRIDGE_TOKEN_ENV_VAR", DEFAULT_TOKEN_ENV_VAR)


class EnvironmentTokenProvider:
    """
    Read the access token from an environment variable at call time.

    Environment Variables:
        CALBRIDGE_TOKEN_ENV_VAR: Name of the variable holding the token
            (optional, defaults to ISTRUZI_API_KEY)

    Usage:
        >>> provider = EnvironmentTokenProvider()
        >>> token = provider()
    """

    def __init__(self, env_var: Optional[str] = None):
        self.env_var = env_var or TOKEN_ENV_VAR

    def __call__(self) -> str:
        token = os.environ.get(self.env_var)
        if not token:
            raise CredentialError(f"{self.env_var} environment variable not set")
        return token

    def __repr__(self) -> str:
        return f"EnvironmentTokenProvider(env_var={self.env_var!r})"


class StaticTokenProvider:
    """Always return the same access token."""

    def __init__(self, token: str):
        if not token:
            raise ValueError("token must be a non-empty string")
        self._token = token

    def __call__(self) -> str:
        return self._token

    def __repr__(self) -> str:
        # Never expose the token itself
        return "StaticTokenProvider(token=***)"


class GoogleCredentialsTokenProvider:
    """
    Use the current access token of pre-authorized Google OAuth credentials.

    The credentials are not refreshed here. Callers that own a refresh flow
    should refresh the credentials object before invoking the tools.

    Args:
        credentials: google.oauth2 Credentials, e.g. loaded from a token store
    """

    def __init__(self, credentials: Credentials):
        self.credentials = credentials

    def __call__(self) -> str:
        token = self.credentials.token
        if not token:
            raise CredentialError("Google credentials have no access token")
        if self.credentials.expired:
            logger.warning("Using an expired Google access token; the API will reject it")
        return token
