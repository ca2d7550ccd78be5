"""Intuit endpoints and defaults for QuickBooks Online."""

SCOPE_ACCOUNTING = "com.intuit.quickbooks.accounting"

AUTHORIZE_URL = "https://appcenter.intuit.com/connect/oauth2"
TOKEN_URL = "https://oauth.platform.intuit.com/oauth2/v1/tokens/bearer"

API_URL_PRODUCTION = "https://quickbooks.api.intuit.com"
API_URL_SANDBOX = "https://sandbox-quickbooks.api.intuit.com"

DEFAULT_MINOR_VERSION = "69"

COMPANY_INFO_URL = (
    "{api_url}/v3/company/{realm_id}/companyinfo/{realm_id}?minorversion={minor_version}"
)

# Query parameter on the OAuth redirect that identifies the company
REALM_ID_PARAM = "realmId"
