"""
Pytest configuration and fixtures for the QuickBooks provider tests.
"""
import pytest
from allauth.socialaccount.models import SocialApp, SocialToken

from apps.users.providers.quickbooks.views import QuickBooksOAuth2Adapter

CALLBACK_PATH = "/accounts/quickbooks/login/callback/"


@pytest.fixture
def callback_request(rf):
    """The redirect Intuit sends back after the user picks a company."""
    return rf.get(CALLBACK_PATH, {"code": "auth-code", "state": "xyz", "realmId": "123"})


@pytest.fixture
def adapter(rf):
    return QuickBooksOAuth2Adapter(rf.get(CALLBACK_PATH))


@pytest.fixture
def quickbooks_app():
    """An unsaved SocialApp with test credentials."""
    return SocialApp(
        provider="quickbooks",
        name="QuickBooks",
        client_id="qb-client",
        secret="qb-secret",
    )


@pytest.fixture
def social_token():
    token = SocialToken(token="access-123", token_secret="refresh-456")
    token.resource_owner_id = "123"
    return token


@pytest.fixture
def company_info_response():
    return {
        "CompanyInfo": {
            "CompanyName": "Acme Widgets",
            "LegalName": "Acme Widgets LLC",
            "Country": "US",
            "Email": {"Address": "books@acme.example"},
            "Id": "1",
        },
        "time": "2024-05-01T10:00:00.000-07:00",
    }
