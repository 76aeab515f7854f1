"""Tests for the four file tools with the storage backend mocked out."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from botocore.exceptions import ClientError

from saveforme_mcp.config import ProjectConfig
from saveforme_mcp.models import (
    GetFileUrlSuccess,
    ListFilesSuccess,
    SavePrivateFileSuccess,
    SavePublicFileSuccess,
    ToolError,
)
from saveforme_mcp.tools import files
from tests.helpers import head, listed, set_listing

NO_CONFIG = "No configuration found. Please run the setup command first."


class TestUnconfigured:
    def test_every_tool_reports_missing_configuration(self, storage, local_file):
        results = [
            files.save_public_file(file_path=str(local_file)),
            files.save_private_file(file_path=str(local_file)),
            files.list_files(),
            files.get_file_url(filename="chart.png"),
        ]

        for result in results:
            assert isinstance(result, ToolError)
            assert result.success is False
            assert result.error == NO_CONFIG
        storage.assert_not_called()


class TestSavePublicFile:
    def test_success(self, configured, storage, mock_s3, local_file):
        result = files.save_public_file(file_path=str(local_file), description="Q1 chart")

        assert isinstance(result, SavePublicFileSuccess)
        assert result.url == "https://my-space.nyc3.digitaloceanspaces.com/chart.png"
        assert result.key == "chart.png"
        assert result.drive_name == "media"
        assert result.message == f"File uploaded successfully as public file. URL: {result.url}"
        assert mock_s3.put_object.call_args.kwargs["ACL"] == "public-read"

    def test_payload_uses_camel_case(self, configured, storage, local_file):
        payload = files.save_public_file(file_path=str(local_file)).model_dump(mode="json")

        assert payload["success"] is True
        assert payload["urlType"] == "permanent"
        assert payload["isPublic"] is True
        assert payload["driveName"] == "media"

    def test_custom_filename_becomes_key(self, configured, storage, mock_s3, local_file):
        result = files.save_public_file(file_path=str(local_file), filename="charts/q1.png")

        assert result.key == "charts/q1.png"
        assert mock_s3.put_object.call_args.kwargs["Key"] == "charts/q1.png"

    def test_missing_local_file(self, configured, storage, mock_s3, tmp_path):
        missing = tmp_path / "missing.pdf"

        result = files.save_public_file(file_path=str(missing))

        assert isinstance(result, ToolError)
        assert result.error == f"Failed to upload file: File not found: {missing}"
        mock_s3.put_object.assert_not_called()

    def test_backend_failure(self, configured, storage, mock_s3, local_file):
        mock_s3.put_object.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "Access Denied"}}, "PutObject"
        )

        result = files.save_public_file(file_path=str(local_file))

        assert isinstance(result, ToolError)
        assert result.error.startswith("Failed to upload file: ")
        assert "AccessDenied" in result.error

    def test_empty_path_is_invalid_input(self, configured, storage):
        result = files.save_public_file(file_path="")

        assert isinstance(result, ToolError)
        assert result.error.startswith("Invalid input: filePath")
        storage.assert_not_called()


class TestSavePrivateFile:
    def test_success(self, configured, storage, mock_s3, local_file):
        result = files.save_private_file(file_path=str(local_file))

        assert isinstance(result, SavePrivateFileSuccess)
        assert result.url == result.temporary_url == "https://signed.example/key?X-Amz-Signature=abc"
        assert result.url_type == "temporary"
        assert result.expires_in == 3600
        remaining = datetime.fromisoformat(result.expiration_date) - datetime.now(timezone.utc)
        assert abs(remaining.total_seconds() - 3600) < 5
        assert result.message.endswith("(expires in 1 hour).")
        assert "ACL" not in mock_s3.put_object.call_args.kwargs

    def test_project_drive_takes_precedence(self, configured, storage, minio_config, local_file):
        configured.save_local(ProjectConfig(drive_name="scratch", project_directory="p", s3_config=minio_config))

        result = files.save_private_file(file_path=str(local_file))

        assert result.drive_name == "scratch"
        assert storage.call_args.args[0] == minio_config


class TestListFiles:
    def test_entries_and_summary(self, configured, storage, mock_s3):
        set_listing(mock_s3, [listed("a.txt", 1536), listed("b.txt", 0)])
        mock_s3.head_object.side_effect = [
            head(is_public=True, description="first", content_type="text/plain"),
            head(),
        ]

        result = files.list_files()

        assert isinstance(result, ListFilesSuccess)
        assert result.count == 2
        assert result.message == "Found 2 files in media"
        first, second = result.files
        assert first.description == "first"
        assert first.size_formatted == "1.5 KB"
        assert first.is_public is True
        assert first.upload_date == "2025-01-08T12:00:00+00:00"
        assert second.description == "No description"
        assert second.size_formatted == "0 Bytes"

    def test_file_entries_serialize_camel_case(self, configured, storage, mock_s3):
        set_listing(mock_s3, [listed("a.txt", 10)])
        mock_s3.head_object.return_value = head()

        payload = files.list_files().model_dump(mode="json")

        entry = payload["files"][0]
        assert set(entry) == {
            "filename",
            "description",
            "uploadDate",
            "isPublic",
            "size",
            "contentType",
            "sizeFormatted",
        }

    def test_empty_bucket(self, configured, storage):
        result = files.list_files(prefix="images/")

        assert result.count == 0
        assert result.files == []
        assert result.message == "Found 0 files in media"

    def test_listing_failure(self, configured, storage, mock_s3):
        mock_s3.get_paginator.return_value.paginate.side_effect = ClientError(
            {"Error": {"Code": "NoSuchBucket", "Message": "The specified bucket does not exist"}},
            "ListObjectsV2",
        )

        result = files.list_files()

        assert isinstance(result, ToolError)
        assert result.error.startswith("Failed to list files: ")


class TestGetFileUrl:
    def test_missing_file_is_not_presigned(self, configured, storage, mock_s3):
        mock_s3.head_object.side_effect = ClientError({"Error": {"Code": "404", "Message": "Not Found"}}, "HeadObject")

        result = files.get_file_url(filename="ghost.txt")

        assert isinstance(result, ToolError)
        assert result.error == "File 'ghost.txt' not found"
        mock_s3.generate_presigned_url.assert_not_called()

    def test_public_file_gets_permanent_url(self, configured, storage, mock_s3):
        mock_s3.head_object.return_value = head(is_public=True)

        result = files.get_file_url(filename="img/logo.png")

        assert isinstance(result, GetFileUrlSuccess)
        assert result.url == "https://my-space.nyc3.digitaloceanspaces.com/img/logo.png"
        assert result.url_type == "permanent"
        assert result.is_public is True
        assert result.expires_in is None
        assert result.message == "Public file - permanent URL provided"
        dumped = result.model_dump(mode="json")
        assert "expiresIn" not in dumped
        assert "expirationDate" not in dumped
        mock_s3.generate_presigned_url.assert_not_called()

    def test_private_file_gets_temporary_url(self, configured, storage, mock_s3):
        mock_s3.head_object.return_value = head(is_public=False)

        result = files.get_file_url(filename="contract.pdf", expires_in=600)

        assert result.url_type == "temporary"
        assert result.is_public is False
        assert result.expires_in == 600
        assert result.message == f"Temporary URL generated, expires at {result.expiration_date}"
        assert mock_s3.generate_presigned_url.call_args.kwargs["ExpiresIn"] == 600

    @pytest.mark.parametrize("expires_in", [59, 604801, 0])
    def test_expiry_out_of_range(self, configured, storage, mock_s3, expires_in):
        result = files.get_file_url(filename="contract.pdf", expires_in=expires_in)

        assert isinstance(result, ToolError)
        assert result.error.startswith("Invalid input: expiresIn")
        mock_s3.head_object.assert_not_called()

    @pytest.mark.parametrize("expires_in", [60, 604800])
    def test_expiry_bounds_are_inclusive(self, configured, storage, mock_s3, expires_in):
        mock_s3.head_object.return_value = head()

        result = files.get_file_url(filename="contract.pdf", expires_in=expires_in)

        assert result.expires_in == expires_in

    def test_presign_failure(self, configured, storage, mock_s3):
        mock_s3.head_object.return_value = head()
        mock_s3.generate_presigned_url.side_effect = ValueError("bad credentials")

        result = files.get_file_url(filename="contract.pdf")

        assert isinstance(result, ToolError)
        assert result.error == "Failed to get file URL: bad credentials"
