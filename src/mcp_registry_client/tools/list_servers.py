"""ListMCPServers tool -- browse the MCP Registry listing."""

from __future__ import annotations

import logging

from mcp.server.fastmcp import Context

from mcp_registry_client.errors import RegistryClientError
from mcp_registry_client.formatting import format_server_list, render
from mcp_registry_client.models import ListQuery
from mcp_registry_client.tools._helpers import get_context

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error fetching MCP servers from registry: "


async def list_mcp_servers(
    ctx: Context,
    query: str | None = None,
    limit: int | None = None,
    search: str | None = None,
    updated_since: str | None = None,
    version: str | None = None,
) -> str:
    """List MCP servers published in the official MCP Registry.

    Every filter is optional; omit a filter to leave it unapplied.

    Args:
        query: Free-text filter, usually a substring of the server name.
        limit: Maximum number of servers to return.
        search: Search servers by name (substring match). Example: 'filesystem'.
        updated_since: Only servers updated since this RFC3339 timestamp.
            Example: '2025-08-07T13:15:04.280Z'.
        version: 'latest' for the latest version of each server, or an exact
            version like '1.2.3'.

    Returns:
        JSON text with: summary, applied_filters, total_count, servers
        (as returned by the registry) and pagination. On failure, a
        single line starting with "Error fetching MCP servers from registry:".
    """
    list_query = ListQuery(
        query=query,
        limit=limit,
        search=search,
        updated_since=updated_since,
        version=version,
    )
    try:
        app_ctx = get_context(ctx)
        data = await app_ctx.registry.list_servers(list_query)
        return render(format_server_list(data, list_query))
    except RegistryClientError as exc:
        logger.warning("Listing registry servers failed: %s", exc)
        return f"{ERROR_PREFIX}{exc}"
    except Exception as exc:
        logger.exception("Unexpected error in ListMCPServers")
        await ctx.error(f"Unexpected error in ListMCPServers: {exc}")
        return f"{ERROR_PREFIX}{exc}"
