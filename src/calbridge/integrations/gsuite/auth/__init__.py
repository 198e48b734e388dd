"""
Google Workspace Authentication Module

This module provides the bearer token providers injected into the Calendar
client. A provider is any callable returning an access token; it is invoked
once per request.

Quick Start:
    >>> from calbridge.integrations.gsuite.auth import EnvironmentTokenProvider
    >>>
    >>> # Read ISTRUZI_API_KEY (or $CALBRIDGE_TOKEN_ENV_VAR) on every call
    >>> provider = EnvironmentTokenProvider()
    >>>
    >>> # Or wrap pre-authorized OAuth credentials
    >>> provider = GoogleCredentialsTokenProvider(credentials)
"""

from .token_provider import (
    DEFAULT_TOKEN_ENV_VAR,
    TOKEN_ENV_VAR,
    EnvironmentTokenProvider,
    GoogleCredentialsTokenProvider,
    StaticTokenProvider,
)

__all__ = [
    # Providers
    'EnvironmentTokenProvider',
    'GoogleCredentialsTokenProvider',
    'StaticTokenProvider',

    # Configuration
    'DEFAULT_TOKEN_ENV_VAR',
    'TOKEN_ENV_VAR',
]
