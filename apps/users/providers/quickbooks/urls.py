"""
URL configuration for QuickBooks OAuth provider.

These URLs are automatically included by django-allauth when the
provider is added to INSTALLED_APPS.

Standard allauth URL pattern:
- /accounts/quickbooks/login/ - Initiates OAuth flow
- /accounts/quickbooks/login/callback/ - OAuth callback endpoint (receives realmId)
"""

from allauth.socialaccount.providers.oauth2.urls import default_urlpatterns

from .provider import QuickBooksProvider

urlpatterns = default_urlpatterns(QuickBooksProvider)
