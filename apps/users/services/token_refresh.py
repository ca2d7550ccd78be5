"""OAuth token refresh service.

Handles refreshing expired QuickBooks access tokens. Intuit access tokens
live for an hour and every refresh rotates the refresh token, so the
stored token secret is replaced on each call. Nothing schedules this;
callers invoke it before a token expires or after a 401.
"""

from __future__ import annotations

import logging
from datetime import timedelta

import requests
from django.utils import timezone

from apps.users.providers.quickbooks.constants import TOKEN_URL
from apps.users.providers.quickbooks.exceptions import TokenRefreshError

logger = logging.getLogger(__name__)

# Refresh tokens that expire within this window
REFRESH_BUFFER = timedelta(minutes=5)


def token_needs_refresh(expires_at: timezone.datetime | None) -> bool:
    """Check if a token needs refreshing based on its expiry time.

    Returns True if the token expires within REFRESH_BUFFER.
    Returns False if expires_at is None (unknown expiry -- assume valid).
    """
    if expires_at is None:
        return False
    return timezone.now() + REFRESH_BUFFER >= expires_at


def refresh_oauth_token(social_token, token_url: str = TOKEN_URL) -> str:
    """Refresh an OAuth token using the refresh token grant.

    Args:
        social_token: allauth SocialToken instance with token_secret (refresh token)
            and app (SocialApp with client_id and secret).
        token_url: The provider's token endpoint URL.

    Returns:
        The new access token string.

    Raises:
        TokenRefreshError: If the refresh request fails.
    """
    client_id = social_token.app.client_id
    try:
        response = requests.post(
            token_url,
            data={
                "grant_type": "refresh_token",
                "refresh_token": social_token.token_secret,
            },
            auth=(client_id, social_token.app.secret),
            headers={"Accept": "application/json"},
            timeout=30,
        )
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.error("Token refresh failed for app %s: %s", client_id, e)
        raise TokenRefreshError(f"Failed to refresh OAuth token: {e}") from e

    if data.get("errors"):
        logger.error("Token refresh rejected for app %s: %s", client_id, data["errors"])
        raise TokenRefreshError(f"Failed to refresh OAuth token: {data['errors']}")

    social_token.token = data["access_token"]
    if data.get("refresh_token"):
        social_token.token_secret = data["refresh_token"]
    if data.get("expires_in"):
        social_token.expires_at = timezone.now() + timedelta(seconds=int(data["expires_in"]))
    social_token.save()

    logger.info("Successfully refreshed OAuth token for app %s", client_id)
    return social_token.token
