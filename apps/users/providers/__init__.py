"""
Custom OAuth providers.

This package contains custom OAuth provider implementations for systems
not supported by django-allauth out of the box, built on the hook
contract in ``base.py``.

To add a new custom provider:
1. Create a new subpackage (e.g., apps/users/providers/yourprovider/)
2. Implement provider.py with YourProvider and YourAccount classes
3. Implement views.py with a YourOAuth2Adapter(HookedOAuth2Adapter) class
4. Implement urls.py with URL configuration
5. Add 'apps.users.providers.yourprovider' to INSTALLED_APPS

See the quickbooks package for a complete example.
"""
