"""Tests for the server entry point."""

import logging
import os
from unittest.mock import patch

import pytest

from saveforme_mcp.main import configure_logging, main


@pytest.fixture
def run_server():
    with (
        patch("saveforme_mcp.main.run_server") as mock_run,
        patch("saveforme_mcp.main.load_dotenv"),
        patch("saveforme_mcp.main.configure_logging"),
    ):
        yield mock_run


def test_defaults_to_stdio_with_banner(run_server, monkeypatch):
    monkeypatch.setenv("FASTMCP_TRANSPORT", "http")
    monkeypatch.delenv("FASTMCP_TRANSPORT")
    monkeypatch.delenv("MCP_SKIP_BANNER", raising=False)
    monkeypatch.setattr("sys.argv", ["saveforme-mcp"])

    main()

    run_server.assert_called_once_with(skip_banner=False)
    assert os.environ["FASTMCP_TRANSPORT"] == "stdio"


def test_skip_banner_flag(run_server, monkeypatch):
    monkeypatch.setattr("sys.argv", ["saveforme-mcp", "--skip-banner"])

    main()

    run_server.assert_called_once_with(skip_banner=True)


def test_skip_banner_env(run_server, monkeypatch):
    monkeypatch.setenv("MCP_SKIP_BANNER", "true")
    monkeypatch.setattr("sys.argv", ["saveforme-mcp"])

    main()

    run_server.assert_called_once_with(skip_banner=True)


def test_configure_logging_reads_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    with patch("saveforme_mcp.main.logging.basicConfig") as mock_basic:
        configure_logging()

    assert mock_basic.call_args.kwargs["level"] == logging.DEBUG
