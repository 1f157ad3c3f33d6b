"""Reshape raw registry payloads into summary-first results for LLM readers.

Upstream JSON is not schema-checked: every field read here is optional and
falls back to a default, so formatting never fails on a payload the client
already accepted as valid JSON.
"""

from __future__ import annotations

import json
from typing import Any

from mcp_registry_client.models import ListQuery


def _describe_filters(query: ListQuery) -> list[str]:
    """Render supplied filters as ``key: value`` fragments in a fixed order."""
    parts: list[str] = []
    if query.query:
        parts.append(f'query: "{query.query}"')
    if query.search:
        parts.append(f'search: "{query.search}"')
    if query.updated_since:
        parts.append(f"updated since: {query.updated_since}")
    if query.version:
        parts.append(f"version: {query.version}")
    if query.limit:
        parts.append(f"limit: {query.limit}")
    return parts


def format_server_list(data: Any, query: ListQuery) -> dict[str, Any]:
    """Build the listing envelope.

    ``total_count`` is the length of the ``servers`` list actually returned,
    never an upstream-declared total.
    """
    payload = data if isinstance(data, dict) else {}
    servers = payload.get("servers")
    if not isinstance(servers, list):
        servers = []
    count = len(servers)

    filters = _describe_filters(query)
    if filters:
        summary = f"Found {count} MCP servers with filters: {', '.join(filters)}"
    else:
        summary = f"Found {count} MCP servers from the registry"

    return {
        "summary": summary,
        "applied_filters": query.applied_filters(),
        "total_count": count,
        "servers": servers,
        "pagination": payload.get("pagination") or None,
    }


def _server_name(data: Any) -> str | None:
    """Top-level ``name`` of the upstream object, if it has one."""
    if isinstance(data, dict) and data.get("name"):
        return str(data["name"])
    return None


def format_server_detail(data: Any, server_id: str) -> dict[str, Any]:
    """Build the detail envelope, wrapping the upstream object verbatim."""
    return {
        "summary": f"Details for MCP server: {_server_name(data) or server_id}",
        "server": data,
    }


def render(result: dict[str, Any]) -> str:
    """Serialize a formatted result as indented JSON text."""
    return json.dumps(result, indent=2, ensure_ascii=False, allow_nan=False)
