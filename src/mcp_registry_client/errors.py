"""Exception hierarchy for mcp-registry-client.

All exceptions inherit from RegistryClientError (single catch point).
Messages are written for LLM consumption -- clear, actionable, no stack traces.
"""

from __future__ import annotations


class RegistryClientError(Exception):
    """Base exception for all mcp-registry-client errors."""


class UpstreamError(RegistryClientError):
    """The MCP Registry answered with a non-success HTTP status."""

    def __init__(self, message: str, *, status_code: int, reason: str, body: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.body = body


class NotFoundError(UpstreamError):
    """A server lookup returned 404."""

    def __init__(self, server_id: str, *, reason: str = "Not Found", body: str = "") -> None:
        super().__init__(
            f'Server with ID "{server_id}" not found in the registry',
            status_code=404,
            reason=reason,
            body=body,
        )
        self.server_id = server_id


class MalformedResponseError(RegistryClientError):
    """The registry response body was empty or not valid JSON."""

    def __init__(self, message: str, *, excerpt: str = "", detail: str = "") -> None:
        super().__init__(message)
        self.excerpt = excerpt
        self.detail = detail


class TransportError(RegistryClientError):
    """The request failed before any HTTP response arrived (DNS, connect, timeout)."""
