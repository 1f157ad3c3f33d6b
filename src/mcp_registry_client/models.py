"""Domain models for mcp-registry-client. Frozen dataclasses -- no mutation after creation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ListQuery:
    """Optional filters for listing registry servers.

    Every field is independently optional. ``None`` and empty values mean
    "no filter"; nothing is defaulted into the outbound request.
    """

    query: str | None = None
    limit: int | None = None
    search: str | None = None
    updated_since: str | None = None
    version: str | None = None

    def applied_filters(self) -> dict[str, str | int | None]:
        """All filter keys, with ``None`` for the ones the caller left out."""
        return {
            "query": self.query or None,
            "search": self.search or None,
            "updated_since": self.updated_since or None,
            "version": self.version or None,
            "limit": self.limit or None,
        }
