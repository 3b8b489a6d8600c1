"""SuiteQL request options, page envelope and result models."""

from dataclasses import dataclass, field
from typing import Any

# NetSuite rejects SuiteQL pages larger than this
MAX_PAGE_SIZE = 1000


@dataclass
class SuiteQLOptions:
    """Pagination options for a SuiteQL query.

    Attributes:
        page_size: Rows per page (default 1000, capped at 1000).
        offset: Starting offset (default 0).
        max_rows: Maximum rows across all pages; None means unbounded.
        timeout: Per-page timeout override in seconds.
    """

    page_size: int = MAX_PAGE_SIZE
    offset: int = 0
    max_rows: int | None = None
    timeout: float | None = None

    def __post_init__(self) -> None:
        self.page_size = min(self.page_size, MAX_PAGE_SIZE)

    def remaining(self, rows_so_far: int) -> int:
        """Limit to send for the next page; <= 0 means stop before sending."""
        if self.max_rows is None:
            return self.page_size
        return min(self.page_size, self.max_rows - rows_so_far)


@dataclass
class SuiteQLPage:
    """One page of the SuiteQL response envelope."""

    items: list[dict[str, Any]]
    total_results: int
    has_more: bool
    offset: int
    count: int

    @classmethod
    def from_body(cls, body: Any) -> "SuiteQLPage":
        body = body if isinstance(body, dict) else {}
        items = body.get("items") or []
        return cls(
            items=items,
            total_results=body.get("totalResults") or 0,
            has_more=bool(body.get("hasMore", False)),
            offset=body.get("offset") or 0,
            count=body.get("count", len(items)),
        )

    def more_after(self, current_offset: int) -> bool:
        """Whether rows remain after this page.

        The server flag and the local count can disagree when ``totalResults``
        is stale; pagination continues while either says more rows exist.
        """
        return self.has_more or current_offset + len(self.items) < self.total_results


@dataclass
class SuiteQLResult:
    """Materialized SuiteQL result."""

    items: list[dict[str, Any]] = field(default_factory=list)
    total_results: int = 0
    pages_fetched: int = 0
    has_more: bool = False
    duration_ms: int = 0
