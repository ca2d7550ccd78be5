"""
Django app configuration for the QuickBooks OAuth provider.
"""

from django.apps import AppConfig


class QuickBooksProviderConfig(AppConfig):
    """App configuration for QuickBooks OAuth provider."""

    name = "apps.users.providers.quickbooks"
    label = "quickbooks_provider"
    verbose_name = "QuickBooks Online OAuth Provider"
