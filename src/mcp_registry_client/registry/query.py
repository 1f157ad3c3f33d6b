"""Query-string construction for the registry's ``/servers`` listing."""

from __future__ import annotations

from urllib.parse import urlencode

from mcp_registry_client.models import ListQuery

# (ListQuery attribute, query-string key), in emission order.
_PARAM_KEYS: tuple[tuple[str, str], ...] = (
    ("query", "q"),
    ("limit", "limit"),
    ("search", "search"),
    ("updated_since", "updated_since"),
    ("version", "version"),
)


def query_params(query: ListQuery) -> list[tuple[str, str]]:
    """Return the ``(key, value)`` pairs for every supplied filter.

    Values are forwarded as-is; shape validation is the registry's job.
    """
    params: list[tuple[str, str]] = []
    for attr, key in _PARAM_KEYS:
        value = getattr(query, attr)
        if value:
            params.append((key, str(value)))
    return params


def build_query(query: ListQuery) -> str:
    """Encode the supplied filters as a query string (empty when none are set)."""
    return urlencode(query_params(query))
