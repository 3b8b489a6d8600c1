"""Host and base URL construction for NetSuite endpoints."""

SUITETALK_HOST = "suitetalk.api.netsuite.com"
RESTLET_HOST = "restlets.api.netsuite.com"

RECORD_PATH = "/services/rest/record/v1"
SUITEQL_PATH = "/services/rest/query/v1/suiteql"
RESTLET_PATH = "/app/site/hosting/restlet.nl"


def normalize_account_id(account_id: str) -> str:
    """Normalize an account id for use in a host name.

    Sandbox accounts use the underscore form (``1234567_SB1``) but host
    names require ``1234567-sb1``.
    """
    return account_id.lower().replace("_", "-")


def build_suitetalk_url(account_id: str) -> str:
    """Base URL of the SuiteTalk REST API for an account."""
    return f"https://{normalize_account_id(account_id)}.{SUITETALK_HOST}"


def build_restlet_url(account_id: str) -> str:
    """Base URL of the RESTlet domain for an account."""
    return f"https://{normalize_account_id(account_id)}.{RESTLET_HOST}"
