"""Port: MCP Registry API client."""

from __future__ import annotations

from typing import Any, Protocol

from mcp_registry_client.models import ListQuery


class RegistryClientPort(Protocol):
    """Port for querying the MCP server registry."""

    async def list_servers(self, query: ListQuery) -> Any:
        """Fetch the raw ``/servers`` listing for the given filters."""
        ...

    async def get_server(self, server_id: str) -> Any:
        """Fetch the raw entry for one server by UUID or name."""
        ...
