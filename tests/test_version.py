"""Tests for runtime package version resolution."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as distribution_version
from unittest.mock import patch

import mcp_registry_client


class TestRuntimeVersion:
    """Version resolution should reflect installed package metadata."""

    def test_module_version_matches_installed_distribution(self):
        assert mcp_registry_client.__version__ == distribution_version("mcp-registry-client")

    def test_resolve_version_uses_deterministic_fallback_when_metadata_missing(self, monkeypatch):
        def _raise_package_not_found(_: str) -> str:
            raise PackageNotFoundError

        monkeypatch.setattr(mcp_registry_client, "_distribution_version", _raise_package_not_found)

        assert mcp_registry_client._resolve_version() == mcp_registry_client._LOCAL_VERSION_FALLBACK


class TestMainEntryPoint:
    def test_main_delegates_to_cli_run(self):
        with patch("mcp_registry_client.cli.run") as run:
            mcp_registry_client.main(["--transport", "sse"])

        run.assert_called_once_with(["--transport", "sse"])

    def test_main_without_arguments_reads_process_argv(self):
        with patch("mcp_registry_client.cli.run") as run:
            mcp_registry_client.main()

        run.assert_called_once_with(None)
