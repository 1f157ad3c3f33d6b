"""HTTP client for the official MCP Registry API.

API docs: https://registry.modelcontextprotocol.io/openapi.yaml
Base URL: https://registry.modelcontextprotocol.io/v0
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote as urlquote

import httpx

from mcp_registry_client.errors import (
    MalformedResponseError,
    NotFoundError,
    TransportError,
    UpstreamError,
)
from mcp_registry_client.models import ListQuery
from mcp_registry_client.registry.query import build_query

logger = logging.getLogger(__name__)

_BASE_URL = "https://registry.modelcontextprotocol.io/v0"

USER_AGENT = "MCP-Registry-Client/1.0.0"

REQUEST_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "User-Agent": USER_AGENT,
}

# Characters of an unparseable body echoed back in the error message.
_EXCERPT_CHARS = 200

# Sub-delimiters kept literal in the identifier path segment.
_PATH_SAFE = "!'()*"


def _reject_constant(token: str) -> float:
    raise ValueError(f"Unexpected token {token} in JSON")


def build_list_url(query: ListQuery) -> str:
    """Collection URL, with a query string only when a filter is supplied."""
    qs = build_query(query)
    return f"{_BASE_URL}/servers?{qs}" if qs else f"{_BASE_URL}/servers"


def build_server_url(server_id: str) -> str:
    """Detail URL with the identifier percent-encoded as a single path segment."""
    return f"{_BASE_URL}/servers/{urlquote(server_id, safe=_PATH_SAFE)}"


@dataclass
class RegistryClient:
    """Async client for the MCP Registry API."""

    http: httpx.AsyncClient

    async def list_servers(self, query: ListQuery) -> Any:
        """Fetch the server listing.

        Args:
            query: Optional filters; only supplied ones reach the query string.

        Returns:
            The parsed JSON payload, untouched.
        """
        response = await self._get(build_list_url(query))
        if not response.is_success:
            raise UpstreamError(
                f"Failed to fetch servers: {response.status_code} {response.reason_phrase}. "
                f"Response: {response.text}",
                status_code=response.status_code,
                reason=response.reason_phrase,
                body=response.text,
            )
        return self._parse_body(response.text, empty_message="Empty response from registry API")

    async def get_server(self, server_id: str) -> Any:
        """Fetch a single server entry by UUID or registry name.

        The identifier is URL-encoded automatically, so names such as
        ``io.github.user/repo`` stay a single path segment.
        """
        response = await self._get(build_server_url(server_id))
        if not response.is_success:
            if response.status_code == 404:
                raise NotFoundError(
                    server_id, reason=response.reason_phrase, body=response.text
                )
            raise UpstreamError(
                f"Failed to fetch server details: {response.status_code} "
                f"{response.reason_phrase}. Response: {response.text}",
                status_code=response.status_code,
                reason=response.reason_phrase,
                body=response.text,
            )
        return self._parse_body(
            response.text,
            empty_message="Empty response from registry API for server details",
        )

    # ── Transport helpers ────────────────────────────────────────

    async def _get(self, url: str) -> httpx.Response:
        logger.info("GET %s", url)
        try:
            return await self.http.get(url, headers=REQUEST_HEADERS)
        except httpx.HTTPError as exc:
            raise TransportError(f"Failed to reach MCP Registry at {url}: {exc}") from exc

    @staticmethod
    def _parse_body(text: str, *, empty_message: str) -> Any:
        """Decode a response body, rejecting blank or non-JSON payloads."""
        if not text or not text.strip():
            raise MalformedResponseError(empty_message)
        try:
            return json.loads(text, parse_constant=_reject_constant)
        except ValueError as exc:
            excerpt = text[:_EXCERPT_CHARS]
            raise MalformedResponseError(
                f"Invalid JSON response from registry: {exc}. Response text: {excerpt}...",
                excerpt=excerpt,
                detail=str(exc),
            ) from exc
