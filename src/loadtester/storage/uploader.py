# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Copies one iteration's artifacts to durable storage."""

import logging
from pathlib import Path

from loadtester.campaign.models import ArtifactPaths
from loadtester.common.constants import CSV_CONTENT_TYPE, HTML_CONTENT_TYPE
from loadtester.common.exceptions import ArtifactIOError
from loadtester.storage.protocols import BlobStore

logger = logging.getLogger(__name__)

__all__ = [
    "upload_artifacts",
]


def _read_artifact(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise ArtifactIOError(
            f"Failed to read artifact {path}: {e}", path=path
        ) from e


def upload_artifacts(
    bucket: str | None,
    paths: ArtifactPaths,
    store: BlobStore | None = None,
) -> bool:
    """Upload the report and request log of one iteration.

    Uploading is optional: with no bucket (None or empty) nothing is read,
    no storage client is created, and the call succeeds. Each artifact is
    stored under its local file name.

    Args:
        bucket: Destination bucket, if any
        paths: Artifacts written by the iteration
        store: Storage backend; an S3BlobStore is created when omitted

    Returns:
        True if both artifacts were uploaded, False if uploading is disabled

    Raises:
        ArtifactIOError: If a local artifact is missing or unreadable
        UploadError: If the storage backend rejects a write
    """
    if not bucket:
        logger.debug("No bucket configured, skipping artifact upload")
        return False

    if store is None:
        from loadtester.storage.s3 import S3BlobStore

        store = S3BlobStore()

    uploads = (
        (paths.report_path, HTML_CONTENT_TYPE),
        (paths.request_log_path, CSV_CONTENT_TYPE),
    )
    for path, content_type in uploads:
        data = _read_artifact(path)
        store.put_object(bucket, data, path.name, content_type)

    return True
