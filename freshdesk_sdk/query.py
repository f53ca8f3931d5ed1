"""Builder for Freshdesk search query-language expressions.

Example:
    query = Query.where("status", 2).and_(
        Query.where("priority", 3).or_(Query.where("priority", 4))
    )
    str(query)         # status:2 AND (priority:3 OR priority:4)
    query.url_safe()   # query=%22status%3A2+AND+...%22
"""

from datetime import date, datetime
from typing import Any

import httpx


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, datetime):
        return f"'{value.date().isoformat()}'"
    if isinstance(value, date):
        return f"'{value.isoformat()}'"
    if isinstance(value, str):
        if "'" in value or '"' in value:
            raise ValueError(f"quotes are not allowed in query values: {value!r}")
        return f"'{value}'"
    return str(value)


class Query:
    """An immutable search expression."""

    def __init__(self, expression: str) -> None:
        if not expression:
            raise ValueError("query expression must not be empty")
        self._expression = expression
        self._compound = False

    @classmethod
    def where(cls, field: str, value: Any) -> "Query":
        """Match ``field`` equal to ``value`` (strings and dates are quoted)."""
        return cls(f"{field}:{_format_value(value)}")

    @classmethod
    def greater_than(cls, field: str, value: Any) -> "Query":
        return cls(f"{field}:>{_format_value(value)}")

    @classmethod
    def less_than(cls, field: str, value: Any) -> "Query":
        return cls(f"{field}:<{_format_value(value)}")

    def and_(self, other: "Query") -> "Query":
        return self._combine("AND", other)

    def or_(self, other: "Query") -> "Query":
        return self._combine("OR", other)

    def _combine(self, operator: str, other: "Query") -> "Query":
        combined = Query(f"{self._grouped()} {operator} {other._grouped()}")
        combined._compound = True
        return combined

    def _grouped(self) -> str:
        return f"({self._expression})" if self._compound else self._expression

    def url_safe(self) -> str:
        """Render as the URL-encoded ``query="..."`` string Freshdesk expects."""
        return str(httpx.QueryParams({"query": f'"{self._expression}"'}))

    def __str__(self) -> str:
        return self._expression

    def __repr__(self) -> str:
        return f"Query({self._expression!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Query) and other._expression == self._expression

    def __hash__(self) -> int:
        return hash(self._expression)
