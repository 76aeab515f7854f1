#!/usr/bin/env python3
"""Run the server with ``python -m saveforme_mcp``.

Environment variables control behavior:

- FASTMCP_TRANSPORT: 'stdio', 'http', 'sse' or 'streamable-http' (default: stdio)
- LOG_LEVEL: Logging level (default: 'INFO')
- SAVEFORME_CONFIG_DIR: Directory of the global config (default: ~/.saveformedearai)
- SAVEFORME_PROJECT_DIR: Project directory holding .claude/ (default: cwd)
"""

from .main import main

if __name__ == "__main__":
    main()
