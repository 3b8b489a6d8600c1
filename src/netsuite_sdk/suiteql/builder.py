"""Fluent SuiteQL statement builder with value escaping.

Example:
    ```python
    from netsuite_sdk.suiteql import suiteql

    sql = (
        suiteql()
        .select("c.id", "c.companyname", "c.email")
        .from_("customer", "c")
        .left_join("transaction t", "c.id = t.entity")
        .where_equals("c.isinactive", False)
        .where_not_null("c.email")
        .order_by("c.companyname")
        .build()
    )
    ```

Only values are escaped. Column names, table names and raw conditions are
inserted verbatim and must never come from untrusted input.
"""

from typing import Literal

SqlValue = str | int | float | bool

JoinType = Literal["INNER", "LEFT", "RIGHT"]
SortDirection = Literal["ASC", "DESC"]


def escape_value(value: SqlValue) -> str:
    """Render a value as a SuiteQL literal.

    Booleans become ``'T'``/``'F'`` (NetSuite checkbox values), numbers are
    emitted verbatim and strings are single-quoted with quotes doubled.
    """
    # bool first: bool is a subclass of int
    if isinstance(value, bool):
        return "'T'" if value else "'F'"
    if isinstance(value, (int, float)):
        return str(value)
    escaped = str(value).replace("'", "''")
    return f"'{escaped}'"


class SuiteQLBuilder:
    """Accumulate clauses and render a SuiteQL statement."""

    def __init__(self) -> None:
        self._select: list[str] = []
        self._from = ""
        self._joins: list[str] = []
        self._where: list[str] = []
        self._group_by: list[str] = []
        self._having: list[str] = []
        self._order_by: list[str] = []

    def select(self, *columns: str) -> "SuiteQLBuilder":
        self._select.extend(columns)
        return self

    def from_(self, table: str, alias: str | None = None) -> "SuiteQLBuilder":
        self._from = f"{table} {alias}" if alias else table
        return self

    def join(self, table: str, condition: str, join_type: JoinType = "INNER") -> "SuiteQLBuilder":
        self._joins.append(f"{join_type} JOIN {table} ON {condition}")
        return self

    def left_join(self, table: str, condition: str) -> "SuiteQLBuilder":
        return self.join(table, condition, "LEFT")

    def right_join(self, table: str, condition: str) -> "SuiteQLBuilder":
        return self.join(table, condition, "RIGHT")

    def where(self, condition: str) -> "SuiteQLBuilder":
        """Add a raw condition (not escaped)."""
        self._where.append(condition)
        return self

    def where_equals(self, column: str, value: SqlValue) -> "SuiteQLBuilder":
        self._where.append(f"{column} = {escape_value(value)}")
        return self

    def where_not_equals(self, column: str, value: SqlValue) -> "SuiteQLBuilder":
        self._where.append(f"{column} != {escape_value(value)}")
        return self

    def where_in(self, column: str, values: list[SqlValue]) -> "SuiteQLBuilder":
        rendered = ", ".join(escape_value(v) for v in values)
        self._where.append(f"{column} IN ({rendered})")
        return self

    def where_null(self, column: str) -> "SuiteQLBuilder":
        self._where.append(f"{column} IS NULL")
        return self

    def where_not_null(self, column: str) -> "SuiteQLBuilder":
        self._where.append(f"{column} IS NOT NULL")
        return self

    def where_between(self, column: str, start: SqlValue, end: SqlValue) -> "SuiteQLBuilder":
        self._where.append(f"{column} BETWEEN {escape_value(start)} AND {escape_value(end)}")
        return self

    def where_like(self, column: str, pattern: str) -> "SuiteQLBuilder":
        self._where.append(f"{column} LIKE {escape_value(pattern)}")
        return self

    def group_by(self, *columns: str) -> "SuiteQLBuilder":
        self._group_by.extend(columns)
        return self

    def having(self, condition: str) -> "SuiteQLBuilder":
        self._having.append(condition)
        return self

    def order_by(self, column: str, direction: SortDirection = "ASC") -> "SuiteQLBuilder":
        self._order_by.append(f"{column} {direction}")
        return self

    def build(self) -> str:
        """Render the statement.

        Raises:
            ValueError: If SELECT or FROM is missing.
        """
        if not self._select:
            raise ValueError("SuiteQLBuilder: SELECT clause is required")
        if not self._from:
            raise ValueError("SuiteQLBuilder: FROM clause is required")

        parts = [f"SELECT {', '.join(self._select)}", f"FROM {self._from}"]
        if self._joins:
            parts.append(" ".join(self._joins))
        if self._where:
            parts.append(f"WHERE {' AND '.join(self._where)}")
        if self._group_by:
            parts.append(f"GROUP BY {', '.join(self._group_by)}")
        if self._having:
            parts.append(f"HAVING {' AND '.join(self._having)}")
        if self._order_by:
            parts.append(f"ORDER BY {', '.join(self._order_by)}")

        return " ".join(parts)

    def __str__(self) -> str:
        return self.build()


def suiteql() -> SuiteQLBuilder:
    """Start a new SuiteQL builder."""
    return SuiteQLBuilder()
