"""QuickBooks Online OAuth2 provider for django-allauth."""

from allauth.socialaccount.providers.base import ProviderAccount
from allauth.socialaccount.providers.oauth2.provider import OAuth2Provider

from .views import QuickBooksOAuth2Adapter


class QuickBooksAccount(ProviderAccount):
    def get_avatar_url(self) -> str | None:
        return None

    def to_str(self) -> str:
        return self.account.extra_data.get("company_name") or super().to_str()


class QuickBooksProvider(OAuth2Provider):
    """
    OAuth2 provider for QuickBooks Online.

    The account uid is the company's realm id, not a user id: Intuit grants
    access per company.

    To add this provider:
    1. Add 'apps.users.providers.quickbooks' to INSTALLED_APPS
    2. Create a SocialApp via Django admin with:
       - Provider: quickbooks
       - Client ID: Your Intuit app client ID
       - Secret Key: Your Intuit app client secret
    """

    id = "quickbooks"
    name = "QuickBooks Online"
    account_class = QuickBooksAccount
    oauth2_adapter_class = QuickBooksOAuth2Adapter

    def get_default_scope(self) -> list[str]:
        return self.oauth2_adapter_class(self.request).default_scopes()

    def extract_uid(self, data: dict) -> str:
        return str(data["id"])

    def extract_extra_data(self, data: dict) -> dict:
        return data

    def extract_common_fields(self, data: dict) -> dict:
        return {
            "email": data.get("email", ""),
            "first_name": data.get("company_name", ""),
            "last_name": "",
        }


provider_classes = [QuickBooksProvider]
