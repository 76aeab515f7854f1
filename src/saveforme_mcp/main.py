#!/usr/bin/env python3
"""Entry point for the SaveForMe MCP server."""

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from saveforme_mcp.utils import run_server


def configure_logging() -> None:
    """Send logs to stderr at LOG_LEVEL (default INFO)."""
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def main() -> None:
    """Main entry point for the MCP server."""
    parser = argparse.ArgumentParser(
        description="SaveForMe MCP Server - save, list and share files on S3-compatible storage",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--skip-banner",
        action="store_true",
        help="Skip startup banner display (useful for multi-server setups)",
    )
    args = parser.parse_args()

    # .env in the working directory, for development runs
    load_dotenv()
    configure_logging()

    os.environ.setdefault("FASTMCP_TRANSPORT", "stdio")

    # CLI flag > env var > default
    skip_banner = args.skip_banner
    if not skip_banner and "MCP_SKIP_BANNER" in os.environ:
        skip_banner = os.environ.get("MCP_SKIP_BANNER", "false").lower() == "true"

    run_server(skip_banner=skip_banner)


if __name__ == "__main__":
    main()
