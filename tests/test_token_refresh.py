from datetime import timedelta
from unittest.mock import MagicMock

import pytest
import requests_mock as rm
from django.utils import timezone

from apps.users.providers.quickbooks.constants import TOKEN_URL
from apps.users.services.token_refresh import (
    TokenRefreshError,
    refresh_oauth_token,
    token_needs_refresh,
)


@pytest.fixture
def stored_token():
    token = MagicMock()
    token.token = "old-access"
    token.token_secret = "old-refresh"
    token.app.client_id = "qb-client"
    token.app.secret = "qb-secret"
    return token


class TestTokenNeedsRefresh:
    def test_unknown_expiry_is_valid(self):
        assert token_needs_refresh(None) is False

    def test_expiring_soon(self):
        assert token_needs_refresh(timezone.now() + timedelta(minutes=2)) is True

    def test_expired(self):
        assert token_needs_refresh(timezone.now() - timedelta(minutes=1)) is True

    def test_fresh(self):
        assert token_needs_refresh(timezone.now() + timedelta(minutes=30)) is False


class TestRefreshOAuthToken:
    def test_rotates_tokens(self, stored_token):
        with rm.Mocker() as m:
            m.post(
                TOKEN_URL,
                json={
                    "access_token": "new-access",
                    "refresh_token": "new-refresh",
                    "expires_in": 3600,
                },
            )
            result = refresh_oauth_token(stored_token)

            assert m.last_request.headers["Authorization"].startswith("Basic ")
            assert m.last_request.headers["Accept"] == "application/json"
            assert "grant_type=refresh_token" in m.last_request.text
            assert "refresh_token=old-refresh" in m.last_request.text

        assert result == "new-access"
        assert stored_token.token == "new-access"
        assert stored_token.token_secret == "new-refresh"
        assert stored_token.expires_at > timezone.now() + timedelta(minutes=59)
        stored_token.save.assert_called_once()

    def test_keeps_refresh_token_when_not_rotated(self, stored_token):
        with rm.Mocker() as m:
            m.post(TOKEN_URL, json={"access_token": "new-access"})
            refresh_oauth_token(stored_token)

        assert stored_token.token_secret == "old-refresh"

    def test_http_error_raises(self, stored_token):
        with rm.Mocker() as m:
            m.post(TOKEN_URL, json={"error": "invalid_grant"}, status_code=400)
            with pytest.raises(TokenRefreshError):
                refresh_oauth_token(stored_token)

        stored_token.save.assert_not_called()

    def test_errors_payload_raises(self, stored_token):
        with rm.Mocker() as m:
            m.post(TOKEN_URL, json={"errors": [{"message": "bad"}]})
            with pytest.raises(TokenRefreshError, match="bad"):
                refresh_oauth_token(stored_token)

        stored_token.save.assert_not_called()
