"""Fixtures for the file tool tests."""

from unittest.mock import patch

import pytest

from saveforme_mcp.config import GlobalConfig
from saveforme_mcp.storage import StorageClient


@pytest.fixture
def configured(store, do_config):
    """A global default drive named "media"."""
    store.save_global(GlobalConfig(default_drive="media", drives={"media": do_config}))
    return store


@pytest.fixture
def storage(mock_s3):
    """Route the tools' storage client to the mocked S3 client."""
    with patch(
        "saveforme_mcp.tools.files.get_storage_client",
        side_effect=lambda config: StorageClient(config, client=mock_s3),
    ) as factory:
        yield factory


@pytest.fixture
def local_file(tmp_path):
    path = tmp_path / "chart.png"
    path.write_bytes(b"png-bytes")
    return path
