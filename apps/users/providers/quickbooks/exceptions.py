"""
Exceptions raised by the QuickBooks OAuth provider.

All of them derive from allauth's ProviderException so that the OAuth2
callback view renders its authentication error page instead of a 500.
"""

from allauth.socialaccount.providers.base import ProviderException


class QuickBooksOAuthError(ProviderException):
    """Base exception for all QuickBooks OAuth errors."""


class MissingRealmIdError(QuickBooksOAuthError):
    """The access token has no realm id, so company info cannot be looked up."""


class QuickBooksAPIError(QuickBooksOAuthError):
    """Intuit returned an ``errors`` payload."""

    def __init__(self, errors, response_body=None):
        super().__init__(errors)
        self.errors = errors
        self.response_body = response_body


class TokenRefreshError(QuickBooksOAuthError):
    """Raised when token refresh fails."""
