"""SuiteQL query execution with automatic pagination."""

import logging
import time
from collections.abc import AsyncIterator
from typing import Any

from netsuite_sdk.suiteql.models import MAX_PAGE_SIZE, SuiteQLOptions, SuiteQLPage, SuiteQLResult
from netsuite_sdk.transport.http import HttpTransport
from netsuite_sdk.utils.urls import SUITEQL_PATH, build_suitetalk_url

logger = logging.getLogger(__name__)

TRANSIENT_HEADERS = {"Prefer": "transient"}


class SuiteQLClient:
    """Run SuiteQL queries against the REST query endpoint.

    Pages are fetched strictly in offset order, one request at a time. Every
    page request carries ``Prefer: transient``, which the endpoint requires.

    Example:
        ```python
        result = await client.suiteql.query("SELECT id, companyname FROM customer", page_size=500)
        print(len(result.items), result.total_results)

        async for page in client.suiteql.query_pages("SELECT id FROM transaction"):
            await process(page)
        ```
    """

    def __init__(self, transport: HttpTransport, account_id: str):
        self._transport = transport
        self.base_url = build_suitetalk_url(account_id) + SUITEQL_PATH

    async def _fetch_page(self, sql: str, limit: int, offset: int, timeout: float | None) -> SuiteQLPage:
        url = f"{self.base_url}?limit={limit}&offset={offset}"
        response = await self._transport.request(
            url,
            method="POST",
            body={"q": sql},
            headers=TRANSIENT_HEADERS,
            timeout=timeout,
        )
        return SuiteQLPage.from_body(response.data)

    async def query(
        self,
        sql: str,
        *,
        page_size: int = MAX_PAGE_SIZE,
        offset: int = 0,
        max_rows: int | None = None,
        timeout: float | None = None,
    ) -> SuiteQLResult:
        """Execute a query and return every matching row.

        Args:
            sql: SuiteQL statement
            page_size: Rows per request (capped at 1000)
            offset: Starting offset
            max_rows: Stop after this many rows (default: unbounded)
            timeout: Per-page timeout override in seconds

        Returns:
            SuiteQLResult with all rows and pagination metadata

        Raises:
            NetSuiteError: If any page request fails
        """
        options = SuiteQLOptions(page_size=page_size, offset=offset, max_rows=max_rows, timeout=timeout)
        start = time.perf_counter()

        items: list[dict[str, Any]] = []
        current_offset = options.offset
        total_results = 0
        pages_fetched = 0

        while True:
            limit = options.remaining(len(items))
            if limit <= 0:
                break

            page = await self._fetch_page(sql, limit, current_offset, options.timeout)
            total_results = page.total_results
            pages_fetched += 1
            items.extend(page.items)

            if not page.items or not page.more_after(current_offset):
                break
            if options.max_rows is not None and len(items) >= options.max_rows:
                break

            current_offset += len(page.items)

        duration_ms = round((time.perf_counter() - start) * 1000)
        logger.debug(f"SuiteQL query fetched {len(items)} rows in {pages_fetched} pages ({duration_ms}ms)")

        return SuiteQLResult(
            items=items,
            total_results=total_results,
            pages_fetched=pages_fetched,
            has_more=len(items) < total_results,
            duration_ms=duration_ms,
        )

    async def query_one(
        self,
        sql: str,
        *,
        offset: int = 0,
        timeout: float | None = None,
    ) -> dict[str, Any] | None:
        """Execute a query and return the first row, or None if nothing matched."""
        result = await self.query(sql, offset=offset, max_rows=1, timeout=timeout)
        return result.items[0] if result.items else None

    async def query_pages(
        self,
        sql: str,
        *,
        page_size: int = MAX_PAGE_SIZE,
        offset: int = 0,
        max_rows: int | None = None,
        timeout: float | None = None,
    ) -> AsyncIterator[list[dict[str, Any]]]:
        """Yield result pages one at a time.

        The generator is single-pass: iterate it again and it is exhausted.
        An empty page ends the stream without being yielded.
        """
        options = SuiteQLOptions(page_size=page_size, offset=offset, max_rows=max_rows, timeout=timeout)
        current_offset = options.offset
        total_yielded = 0

        while True:
            limit = options.remaining(total_yielded)
            if limit <= 0:
                return

            page = await self._fetch_page(sql, limit, current_offset, options.timeout)
            if not page.items:
                return

            yield page.items

            total_yielded += len(page.items)
            if not page.more_after(current_offset):
                return
            if options.max_rows is not None and total_yielded >= options.max_rows:
                return

            current_offset += len(page.items)
