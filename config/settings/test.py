"""
Django test settings for the QuickBooks Online OAuth provider.
"""

from .base import *  # noqa: F401, F403

DEBUG = False

# Use faster password hasher in tests
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Disable email sending in tests
EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"

SOCIALACCOUNT_LOGIN_ON_GET = True

# Credentials come from SocialApp fixtures, never the environment
SOCIALACCOUNT_PROVIDERS = {
    "quickbooks": {
        "API_URL": "https://sandbox-quickbooks.api.intuit.com",
        "MINOR_VERSION": "69",
    },
}
