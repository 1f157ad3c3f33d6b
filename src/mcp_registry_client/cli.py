"""Command-line entry point: run the server over the chosen MCP transport."""

from __future__ import annotations

import argparse
import logging
import os
import sys

_TRANSPORTS = ("stdio", "sse", "streamable-http")
_ENV_PREFIX = "MCP_REGISTRY_CLIENT_"


def _env(name: str, default: str) -> str:
    return os.environ.get(f"{_ENV_PREFIX}{name}", default)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mcp-registry-client",
        description="MCP server for browsing the official MCP Registry.",
    )
    parser.add_argument(
        "--transport",
        choices=_TRANSPORTS,
        default=_env("TRANSPORT", "stdio"),
        help="MCP transport to serve (default: stdio).",
    )
    parser.add_argument(
        "--host",
        default=_env("HOST", "127.0.0.1"),
        help="Bind address for the sse and streamable-http transports.",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(_env("PORT", "8000")),
        help="Bind port for the sse and streamable-http transports.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        default=_env("LOG_LEVEL", "WARNING").upper(),
        help="Logging level for stderr output (default: WARNING).",
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    """Send log records to stderr; stdout belongs to the stdio transport."""
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    configure_logging(args.log_level)

    from mcp_registry_client.server import mcp

    if args.transport != "stdio":
        mcp.settings.host = args.host
        mcp.settings.port = args.port
    logging.getLogger(__name__).info("Starting MCP Registry Client over %s", args.transport)
    mcp.run(transport=args.transport)
