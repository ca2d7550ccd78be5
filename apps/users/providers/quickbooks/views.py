"""QuickBooks Online OAuth2 adapter and views for django-allauth."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from allauth.socialaccount import app_settings
from allauth.socialaccount.providers.oauth2.views import (
    OAuth2CallbackView,
    OAuth2LoginView,
)

from apps.users.providers.base import RESOURCE_OWNER_ID_KEY, HookedOAuth2Adapter

from .company import QuickBooksCompany
from .constants import (
    API_URL_PRODUCTION,
    AUTHORIZE_URL,
    COMPANY_INFO_URL,
    DEFAULT_MINOR_VERSION,
    REALM_ID_PARAM,
    SCOPE_ACCOUNTING,
    TOKEN_URL,
)
from .exceptions import MissingRealmIdError, QuickBooksAPIError

logger = logging.getLogger(__name__)


class QuickBooksOAuth2Adapter(HookedOAuth2Adapter):
    """OAuth2 adapter for QuickBooks Online (appcenter.intuit.com)."""

    provider_id = "quickbooks"

    # Intuit only accepts client credentials via HTTP Basic auth
    basic_auth = True

    def __init__(self, request):
        super().__init__(request)
        provider_settings = app_settings.PROVIDERS.get(self.provider_id, {})
        self.api_url: str = provider_settings.get("API_URL", API_URL_PRODUCTION)
        self.minor_version: str = str(
            provider_settings.get("MINOR_VERSION", DEFAULT_MINOR_VERSION)
        )
        self.realm_id: str | None = None

    def set_api_url(self, api_url: str) -> QuickBooksOAuth2Adapter:
        self.api_url = api_url
        return self

    def set_api_minor_version(self, minor_version: str) -> QuickBooksOAuth2Adapter:
        self.minor_version = minor_version
        return self

    def authorization_endpoint(self) -> str:
        return AUTHORIZE_URL

    def token_endpoint(self, params: Mapping[str, Any]) -> str:
        # The redirect carries realmId next to state and code; the token
        # response never does, so it has to be captured here.
        if params.get(REALM_ID_PARAM) is not None:
            self.realm_id = params[REALM_ID_PARAM]
            logger.debug("Captured QuickBooks realm id %s", self.realm_id)
        return TOKEN_URL

    def postprocess_token_response(self, result: dict) -> dict:
        result = super().postprocess_token_response(result)
        if self.realm_id:
            result[RESOURCE_OWNER_ID_KEY] = self.realm_id
        return result

    def resource_owner_details_url(self, token) -> str:
        realm_id = token.resource_owner_id
        if not realm_id:
            raise MissingRealmIdError(
                "Missing realmId, please include this URL parameter in the options "
                "passed to the access token request"
            )
        return COMPANY_INFO_URL.format(
            api_url=self.api_url,
            realm_id=realm_id,
            minor_version=self.minor_version,
        )

    def default_scopes(self) -> list[str]:
        return [SCOPE_ACCOUNTING]

    def default_headers(self) -> dict[str, str]:
        return {"Accept": "application/json"}

    def validate_response(self, response, data) -> None:
        errors = data.get("errors") if isinstance(data, Mapping) else None
        if errors:
            logger.warning("QuickBooks API returned errors: %s", errors)
            raise QuickBooksAPIError(errors, data)

    def build_resource_owner(self, response: dict, token) -> QuickBooksCompany:
        logger.info("Loaded CompanyInfo for QuickBooks realm %s", token.resource_owner_id)
        return QuickBooksCompany(response, token.resource_owner_id)


oauth2_login = OAuth2LoginView.adapter_view(QuickBooksOAuth2Adapter)
oauth2_callback = OAuth2CallbackView.adapter_view(QuickBooksOAuth2Adapter)
