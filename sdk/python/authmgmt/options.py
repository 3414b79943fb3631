"""Query options for list endpoints.

Each option is a callable that writes into the query-parameter dict. Options
are applied in order, so later options override earlier ones:

    client.connections.list(per_page(10), parameter("strategy", "auth0"))
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

ListOption = Callable[[dict[str, Any]], None]


def parameter(key: str, value: str) -> ListOption:
    """Set an arbitrary query parameter."""

    def option(params: dict[str, Any]) -> None:
        params[key] = value

    return option


def page(number: int) -> ListOption:
    """Request a specific page, starting at 0."""
    return parameter("page", str(number))


def per_page(items: int) -> ListOption:
    """Set the page size."""
    return parameter("per_page", str(items))


def include_totals(include: bool) -> ListOption:
    """Ask for the paginated envelope instead of a bare array."""
    return parameter("include_totals", "true" if include else "false")


def include_fields(*fields: str) -> ListOption:
    """Return only the named fields."""

    def option(params: dict[str, Any]) -> None:
        params["fields"] = ",".join(fields)
        params["include_fields"] = "true"

    return option


def exclude_fields(*fields: str) -> ListOption:
    """Return every field except the named ones."""

    def option(params: dict[str, Any]) -> None:
        params["fields"] = ",".join(fields)
        params["include_fields"] = "false"

    return option


def query(expression: str) -> ListOption:
    """Filter with a search expression."""

    def option(params: dict[str, Any]) -> None:
        params["search_engine"] = "v3"
        params["q"] = expression

    return option


def apply(options: Iterable[ListOption]) -> dict[str, Any]:
    params: dict[str, Any] = {}
    for option in options:
        option(params)
    return params
