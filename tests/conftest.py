"""Test configuration for pytest."""

from __future__ import annotations

from pathlib import Path
from typing import Dict
from unittest.mock import MagicMock

import pytest

from saveforme_mcp.config import ConfigStore, StorageConfig


# ============================================================================
# Configuration isolation
# ============================================================================
# Every test gets its own home-level config dir and project dir so nothing
# ever reads or writes ~/.saveformedearai or the repository's .claude/.
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_config_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Dict[str, Path]:
    global_dir = tmp_path / "home" / ".saveformedearai"
    project = tmp_path / "project"
    project.mkdir(parents=True)
    monkeypatch.setenv("SAVEFORME_CONFIG_DIR", str(global_dir))
    monkeypatch.setenv("SAVEFORME_PROJECT_DIR", str(project))
    return {"global_dir": global_dir, "project_dir": project}


@pytest.fixture
def store() -> ConfigStore:
    return ConfigStore.from_environment()


@pytest.fixture
def minio_config() -> StorageConfig:
    return StorageConfig(
        endpoint="http://localhost:9000",
        region="us-east-1",
        access_key_id="minio",
        secret_access_key="minio-secret",
        bucket_name="local-bucket",
    )


@pytest.fixture
def aws_config() -> StorageConfig:
    return StorageConfig(
        endpoint="https://s3.amazonaws.com",
        region="us-west-2",
        access_key_id="AKIAEXAMPLE",
        secret_access_key="aws-secret",
        bucket_name="aws-bucket",
        force_path_style=False,
    )


@pytest.fixture
def do_config() -> StorageConfig:
    return StorageConfig(
        endpoint="https://nyc3.digitaloceanspaces.com",
        region="nyc3",
        access_key_id="DOEXAMPLE",
        secret_access_key="do-secret",
        bucket_name="my-space",
        force_path_style=False,
    )


# ============================================================================
# S3 client doubles
# ============================================================================


@pytest.fixture
def mock_s3() -> MagicMock:
    """boto3-shaped S3 client with an empty bucket."""
    client = MagicMock()
    client.generate_presigned_url.return_value = "https://signed.example/key?X-Amz-Signature=abc"
    client.get_paginator.return_value.paginate.return_value = [{"Contents": []}]
    return client
