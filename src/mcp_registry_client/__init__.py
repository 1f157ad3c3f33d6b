"""mcp-registry-client: browse the official MCP Registry from any MCP client."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _distribution_version

_LOCAL_VERSION_FALLBACK = "0.0.0+local"


def _resolve_version() -> str:
    """Resolve package version from installed metadata with deterministic fallback."""
    try:
        return _distribution_version("mcp-registry-client")
    except PackageNotFoundError:
        return _LOCAL_VERSION_FALLBACK


__version__ = _resolve_version()


def main(argv: list[str] | None = None) -> None:
    """Entry point for `mcp-registry-client` CLI."""
    from mcp_registry_client.cli import run

    run(argv)
