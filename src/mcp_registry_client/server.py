"""MCP server exposing the official MCP Registry as two read-only tools."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx
from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from mcp_registry_client.registry.base import RegistryClientPort
from mcp_registry_client.registry.client import RegistryClient
from mcp_registry_client.tools.get_server import get_mcp_server
from mcp_registry_client.tools.list_servers import list_mcp_servers

SERVER_NAME = "MCP Registry Client"


@dataclass(frozen=True, slots=True)
class AppContext:
    """Shared state across all tool invocations.

    Holds only the pooled HTTP client and the registry adapter built on it;
    nothing here is mutated by a tool call.
    """

    http_client: httpx.AsyncClient
    registry: RegistryClientPort


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[AppContext]:
    """Manage the HTTP client lifecycle -- the composition root.

    Timeouts, redirects and retries stay at httpx defaults.
    """
    async with httpx.AsyncClient() as http_client:
        yield AppContext(
            http_client=http_client,
            registry=RegistryClient(http_client),
        )


mcp = FastMCP(
    SERVER_NAME,
    instructions=(
        "Browse the official MCP Registry (registry.modelcontextprotocol.io).\n\n"
        "- **ListMCPServers** lists published servers. All filters are optional: "
        "'search' for a name substring, 'version' ('latest' or an exact version), "
        "'updated_since' (RFC3339), 'limit' and free-text 'query'.\n"
        "- **GetMCPServer** returns the full entry for one server by UUID or name. "
        "The UUID of a listed server is under "
        "_meta.io.modelcontextprotocol.registry/official.id.\n\n"
        "Both tools return JSON text with a one-line 'summary' first. "
        "Failures come back as a single line starting with 'Error fetching'."
    ),
    lifespan=app_lifespan,
)

# ─── Read-only tools ──────────────────────────────────────────
mcp.tool(name="ListMCPServers", annotations=ToolAnnotations(readOnlyHint=True))(
    list_mcp_servers
)
mcp.tool(name="GetMCPServer", annotations=ToolAnnotations(readOnlyHint=True))(get_mcp_server)
