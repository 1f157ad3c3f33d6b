"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from mcp_registry_client.registry.client import RegistryClient
from mcp_registry_client.server import AppContext

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_registry(requests_seen: list[httpx.Request]):
    """Build a RegistryClient whose HTTP traffic is answered by ``handler``."""
    clients: list[httpx.AsyncClient] = []

    def _factory(handler: Handler) -> RegistryClient:
        def _record(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return handler(request)

        http = httpx.AsyncClient(transport=httpx.MockTransport(_record))
        clients.append(http)
        return RegistryClient(http)

    return _factory


@pytest.fixture
def make_ctx():
    """Build a FastMCP Context stand-in whose lifespan context holds ``registry``."""

    def _factory(registry: object) -> MagicMock:
        ctx = MagicMock()
        ctx.info = AsyncMock()
        ctx.error = AsyncMock()
        ctx.request_context.lifespan_context = AppContext(
            http_client=MagicMock(spec=httpx.AsyncClient),
            registry=registry,
        )
        return ctx

    return _factory
