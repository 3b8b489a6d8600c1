"""SuiteQL query execution, pagination and statement building."""

from netsuite_sdk.suiteql.builder import SuiteQLBuilder, escape_value, suiteql
from netsuite_sdk.suiteql.client import SuiteQLClient
from netsuite_sdk.suiteql.models import MAX_PAGE_SIZE, SuiteQLOptions, SuiteQLPage, SuiteQLResult

__all__ = [
    "MAX_PAGE_SIZE",
    "SuiteQLBuilder",
    "SuiteQLClient",
    "SuiteQLOptions",
    "SuiteQLPage",
    "SuiteQLResult",
    "escape_value",
    "suiteql",
]
