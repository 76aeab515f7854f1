"""Shared utilities for the SaveForMe MCP server."""

from __future__ import annotations

import inspect
import logging
import os
import sys
from typing import Any, Callable, Literal

from fastmcp import FastMCP

logger = logging.getLogger(__name__)

SERVER_NAME = "saveformedearai"

VALID_TRANSPORTS = ("stdio", "http", "sse", "streamable-http")


def create_mcp_server() -> FastMCP:
    """Create the FastMCP server instance."""
    return FastMCP(SERVER_NAME)


def get_tool_modules() -> list[Any]:
    """Get list of tool modules to register."""
    from importlib import import_module

    from saveforme_mcp.tools import _MODULE_PATHS

    return [import_module(module_path) for module_path in _MODULE_PATHS.values()]


def register_tools(mcp: FastMCP, tool_modules: list[Any] | None = None, verbose: bool = True) -> int:
    """Register all public functions from tool modules as MCP tools.

    Args:
        mcp: The FastMCP server instance
        tool_modules: List of modules to register tools from (defaults to all)
        verbose: Whether to log registration messages

    Returns:
        Number of tools registered
    """
    if tool_modules is None:
        tool_modules = get_tool_modules()

    tools_registered = 0

    for module in tool_modules:

        def make_predicate(mod: Any) -> Callable[[Any], bool]:
            return lambda obj: (
                inspect.isfunction(obj)
                and not obj.__name__.startswith("_")
                and obj.__module__ == mod.__name__  # Only functions defined in this module
            )

        for name, func in inspect.getmembers(module, predicate=make_predicate(module)):
            mcp.tool(func)
            tools_registered += 1
            if verbose:
                logger.info(f"Registered tool: {module.__name__}.{name}")

    return tools_registered


def create_configured_server(verbose: bool = False) -> FastMCP:
    """Create a fully configured MCP server with all tools registered."""
    mcp = create_mcp_server()
    tools_count = register_tools(mcp, verbose=verbose)
    if verbose:
        logger.info(f"Successfully registered {tools_count} tools")
    return mcp


def get_transport() -> Literal["stdio", "http", "sse", "streamable-http"]:
    """Transport from FASTMCP_TRANSPORT, falling back to stdio."""
    transport = os.environ.get("FASTMCP_TRANSPORT", "stdio")
    if transport not in VALID_TRANSPORTS:
        logger.warning(f"Invalid transport '{transport}', using 'stdio'")
        return "stdio"
    return transport  # type: ignore[return-value]


def run_server(skip_banner: bool = False) -> None:
    """Run the MCP server with proper error handling.

    Args:
        skip_banner: If True, skip the FastMCP startup banner display.
    """
    try:
        mcp = create_configured_server(verbose=True)
        transport = get_transport()
        logger.info(f"Starting FastMCP server with transport: {transport}")
        mcp.run(transport=transport, show_banner=not skip_banner)

    except (ImportError, ModuleNotFoundError) as e:
        # stderr keeps stdout clean for JSON-RPC
        print(f"Error starting MCP server - Missing dependency: {e}", file=sys.stderr)
        print("Please install with: pip install saveforme-mcp", file=sys.stderr)
        raise

    except Exception as e:
        error_msg = str(e)
        print(f"Error starting MCP server: {error_msg}", file=sys.stderr)

        if "address already in use" in error_msg.lower():
            print("The server port is already in use. Change FASTMCP_PORT or stop the other process.", file=sys.stderr)
        elif "permission denied" in error_msg.lower():
            print("Permission denied. Check file/directory permissions or try a different port.", file=sys.stderr)

        raise
