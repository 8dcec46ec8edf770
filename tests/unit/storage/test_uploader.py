# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for upload_artifacts."""

from unittest.mock import patch

import pytest

from loadtester.campaign.models import ArtifactPaths
from loadtester.common.exceptions import ArtifactIOError, UploadError
from loadtester.storage.protocols import BlobStore
from loadtester.storage.uploader import upload_artifacts


@pytest.fixture
def artifacts(tmp_path) -> ArtifactPaths:
    report = tmp_path / "1-report.html"
    request_log = tmp_path / "1-requests.csv"
    report.write_bytes(b"<html></html>")
    request_log.write_bytes(b"elapsed_ms,method\n")
    return ArtifactPaths(report_path=report, request_log_path=request_log)


class TestUploadArtifacts:
    @pytest.mark.parametrize("bucket", [None, ""])
    def test_no_bucket_is_a_noop(self, bucket, artifacts, recording_store):
        with patch("loadtester.storage.s3.boto3.client") as mock_client:
            assert upload_artifacts(bucket, artifacts, recording_store) is False
            assert upload_artifacts(bucket, artifacts) is False

        assert recording_store.calls == []
        mock_client.assert_not_called()

    def test_no_bucket_does_not_read_missing_files(self, tmp_path, recording_store):
        missing = ArtifactPaths(
            report_path=tmp_path / "nope.html", request_log_path=tmp_path / "nope.csv"
        )

        assert upload_artifacts(None, missing, recording_store) is False

    def test_uploads_report_then_request_log(self, artifacts, recording_store):
        assert upload_artifacts("b", artifacts, recording_store) is True

        assert recording_store.calls == [
            ("b", b"<html></html>", "1-report.html", "text/html"),
            ("b", b"elapsed_ms,method\n", "1-requests.csv", "text/csv"),
        ]

    def test_missing_local_file_raises_artifact_io_error(self, artifacts, recording_store):
        artifacts.request_log_path.unlink()

        with pytest.raises(ArtifactIOError, match="1-requests.csv"):
            upload_artifacts("b", artifacts, recording_store)

        # The report had already been uploaded; nothing is rolled back.
        assert [c[2] for c in recording_store.calls] == ["1-report.html"]

    def test_store_failure_propagates(self, artifacts, store_factory):
        store = store_factory(fail_on_call=1)

        with pytest.raises(UploadError, match="simulated upload failure"):
            upload_artifacts("b", artifacts, store)

        assert len(store.calls) == 1

    def test_recording_store_satisfies_protocol(self, recording_store):
        assert isinstance(recording_store, BlobStore)

    def test_default_store_is_s3(self, artifacts):
        with patch("loadtester.storage.s3.boto3.client") as mock_client:
            mock_client.return_value.put_object.return_value = {"ETag": '"abc"'}

            assert upload_artifacts("b", artifacts) is True

        mock_client.assert_called_once()
        assert mock_client.return_value.put_object.call_count == 2
