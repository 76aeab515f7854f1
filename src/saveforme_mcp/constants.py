"""Constants used throughout the SaveForMe MCP server."""

import os
from pathlib import Path

# ============================================================================
# Configuration document locations
# ============================================================================
# The global document lives in the user's home directory and may be
# relocated with SAVEFORME_CONFIG_DIR (tests and sandboxed runtimes).
# The local document is always relative to the project directory.
# ============================================================================

GLOBAL_CONFIG_DIRNAME = ".saveformedearai"
GLOBAL_CONFIG_FILENAME = "config.json"

LOCAL_CONFIG_DIRNAME = ".claude"
LOCAL_CONFIG_FILENAME = "saveformedearai.json"


def global_config_dir() -> Path:
    base_dir = os.getenv("SAVEFORME_CONFIG_DIR") or f"~/{GLOBAL_CONFIG_DIRNAME}"
    return Path(base_dir).expanduser()


def project_dir() -> Path:
    return Path(os.getenv("SAVEFORME_PROJECT_DIR") or os.getcwd())


# ============================================================================
# Upload / URL defaults
# ============================================================================

DEFAULT_CONTENT_TYPE = "application/octet-stream"
UNKNOWN_CONTENT_TYPE = "unknown"

# Presigned URL lifetime (seconds); bounds apply only at the tool boundary
DEFAULT_URL_EXPIRY = 3600
MIN_URL_EXPIRY = 60
MAX_URL_EXPIRY = 604800  # 7 days

# User metadata keys (S3 lower-cases x-amz-meta-* names on the way back)
META_DESCRIPTION = "description"
META_UPLOAD_DATE = "uploaddate"
META_IS_PUBLIC = "ispublic"

NO_CONFIGURATION_ERROR = "No configuration found. Please run the setup command first."
