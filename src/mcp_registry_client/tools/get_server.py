"""GetMCPServer tool -- fetch one registry entry."""

from __future__ import annotations

import logging

from mcp.server.fastmcp import Context

from mcp_registry_client.errors import RegistryClientError
from mcp_registry_client.formatting import format_server_detail, render
from mcp_registry_client.tools._helpers import get_context

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error fetching server details: "


async def get_mcp_server(server_id: str, ctx: Context) -> str:
    """Get the full registry entry for a single MCP server.

    Args:
        server_id: The UUID or name of the server to retrieve. When taken from
            ListMCPServers output, the UUID is under
            ``_meta.io.modelcontextprotocol.registry/official.id``.

    Returns:
        JSON text with a summary line and the registry entry under
        ``server``. On failure, a single line starting with
        "Error fetching server details:".
    """
    try:
        app_ctx = get_context(ctx)
        data = await app_ctx.registry.get_server(server_id)
        return render(format_server_detail(data, server_id))
    except RegistryClientError as exc:
        logger.warning("Fetching server '%s' failed: %s", server_id, exc)
        return f"{ERROR_PREFIX}{exc}"
    except Exception as exc:
        logger.exception("Unexpected error in GetMCPServer")
        await ctx.error(f"Unexpected error in GetMCPServer: {exc}")
        return f"{ERROR_PREFIX}{exc}"
