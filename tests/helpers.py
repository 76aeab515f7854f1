"""Shared helpers for the test suite."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict
from unittest.mock import MagicMock

LAST_MODIFIED = datetime(2025, 1, 8, 12, 0, tzinfo=timezone.utc)


def write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


def set_listing(client: MagicMock, objects: list[Dict[str, Any]]) -> None:
    """Make ``client``'s list_objects_v2 paginator yield one page of ``objects``."""
    client.get_paginator.return_value.paginate.return_value = [{"Contents": objects}]


def listed(key: str, size: int = 0) -> Dict[str, Any]:
    return {"Key": key, "Size": size, "LastModified": LAST_MODIFIED}


def head(is_public: bool = False, content_type: str = "text/plain", description: str | None = None, size: int = 0):
    metadata = {"ispublic": "true" if is_public else "false", "uploaddate": LAST_MODIFIED.isoformat()}
    if description:
        metadata["description"] = description
    return {
        "ContentType": content_type,
        "ContentLength": size,
        "LastModified": LAST_MODIFIED,
        "Metadata": metadata,
    }
