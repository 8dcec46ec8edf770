# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Protocol, runtime_checkable


@runtime_checkable
class BlobStore(Protocol):
    """Durable object storage that artifacts are copied to."""

    def put_object(
        self, bucket: str, data: bytes, object_name: str, content_type: str
    ) -> None:
        """Store ``data`` as ``object_name`` in ``bucket``.

        Raises:
            UploadError: If the object could not be written
        """
        ...
