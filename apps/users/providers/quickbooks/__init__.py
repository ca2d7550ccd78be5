"""
QuickBooks Online OAuth2 provider for django-allauth.

Intuit's redirect carries the company identifier (``realmId``) next to
``code`` and ``state``. The token response never includes it, so the
adapter captures it from the callback and stores it as the resource
owner id of the resulting token.

Usage:
    1. Add 'apps.users.providers.quickbooks' to INSTALLED_APPS
    2. Configure OAuth app credentials via Django admin (SocialApp model)
       or QUICKBOOKS_CLIENT_ID / QUICKBOOKS_CLIENT_SECRET
    3. The provider will be available at /accounts/quickbooks/login/

For Intuit OAuth documentation, see:
https://developer.intuit.com/app/developer/qbo/docs/develop/authentication-and-authorization
"""
