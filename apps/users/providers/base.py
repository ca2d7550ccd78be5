"""
Hook contract for custom OAuth2 providers.

django-allauth's OAuth2 views drive the authorization-code flow through
an ``OAuth2Adapter``. ``HookedOAuth2Adapter`` maps allauth's extension
points onto the small set of methods in ``OAuth2ProviderHooks`` so that
a concrete provider only has to supply URLs, scopes, headers, response
checks and a resource owner factory.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

import requests
from allauth.socialaccount.providers.oauth2.views import OAuth2Adapter

logger = logging.getLogger(__name__)

RESOURCE_OWNER_ID_KEY = "resource_owner_id"


@runtime_checkable
class OAuth2ProviderHooks(Protocol):
    def authorization_endpoint(self) -> str: ...

    def token_endpoint(self, params: Mapping[str, Any]) -> str: ...

    def postprocess_token_response(self, result: dict) -> dict: ...

    def resource_owner_details_url(self, token) -> str: ...

    def default_scopes(self) -> list[str]: ...

    def default_headers(self) -> dict[str, str]: ...

    def validate_response(self, response: requests.Response, data) -> None: ...

    def build_resource_owner(self, response: dict, token) -> Any: ...


class HookedOAuth2Adapter(OAuth2Adapter):
    """
    OAuth2Adapter that delegates to OAuth2ProviderHooks.

    allauth instantiates one adapter per request, so any value a hook
    captures on ``self`` is scoped to a single login or callback request.

    Subclasses must set ``provider_id`` and implement the hook methods.
    The resource owner returned by ``build_resource_owner`` must provide
    ``to_dict()``; its output is handed to the provider as the profile.
    """

    request_timeout = 30

    @property
    def authorize_url(self) -> str:
        return self.authorization_endpoint()

    @property
    def headers(self) -> dict[str, str]:
        return self.default_headers()

    def postprocess_token_response(self, result: dict) -> dict:
        return dict(result)

    def get_authorization_headers(self, token) -> dict[str, str]:
        return {"Authorization": f"Bearer {token.token}"}

    def get_client(self, request, app):
        self.access_token_url = self.token_endpoint(request.GET)
        return super().get_client(request, app)

    def get_access_token_data(self, request, app, client, **kwargs):
        data = super().get_access_token_data(request, app, client, **kwargs)
        return self.postprocess_token_response(data)

    def parse_token(self, data):
        token = super().parse_token(data)
        token.resource_owner_id = data.get(RESOURCE_OWNER_ID_KEY)
        return token

    def fetch_resource_owner(self, token):
        """Fetch and validate the resource owner details for ``token``."""
        url = self.resource_owner_details_url(token)
        response = requests.get(
            url,
            headers={**self.default_headers(), **self.get_authorization_headers(token)},
            timeout=self.request_timeout,
        )
        try:
            data = response.json()
        except ValueError:
            response.raise_for_status()
            raise
        self.validate_response(response, data)
        response.raise_for_status()
        return self.build_resource_owner(data, token)

    def complete_login(self, request, app, token, **kwargs):
        owner = self.fetch_resource_owner(token)
        return self.get_provider().sociallogin_from_response(request, owner.to_dict())
