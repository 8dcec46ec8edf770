# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""S3-compatible blob store backed by boto3.

Google Cloud Storage buckets can be targeted through its XML interoperability
endpoint by setting LOADTESTER_STORAGE_ENDPOINT_URL=https://storage.googleapis.com
together with HMAC credentials in the usual AWS_* variables.
"""

import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from loadtester.common.environment import Environment
from loadtester.common.exceptions import UploadError

logger = logging.getLogger(__name__)

__all__ = [
    "S3BlobStore",
]


class S3BlobStore:
    """BlobStore implementation using a boto3 S3 client.

    The client is created lazily on first upload, so constructing the store
    never touches the network or the credential chain.
    """

    def __init__(
        self,
        endpoint_url: str | None = None,
        region_name: str | None = None,
        client=None,
    ) -> None:
        self.endpoint_url = (
            endpoint_url if endpoint_url is not None else Environment.STORAGE_ENDPOINT_URL
        )
        self.region_name = (
            region_name if region_name is not None else Environment.STORAGE_REGION
        )
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = boto3.client(
                "s3",
                endpoint_url=self.endpoint_url,
                region_name=self.region_name,
            )
        return self._client

    def put_object(
        self, bucket: str, data: bytes, object_name: str, content_type: str
    ) -> None:
        try:
            response = self.client.put_object(
                Bucket=bucket,
                Key=object_name,
                Body=data,
                ContentType=content_type,
            )
        except ClientError as e:
            error = e.response.get("Error", {})
            code = error.get("Code", "Unknown")
            message = error.get("Message", str(e))
            raise UploadError(
                f"Upload of '{object_name}' to bucket '{bucket}' failed "
                f"({code}): {message}",
                bucket=bucket,
                object_name=object_name,
            ) from e
        except BotoCoreError as e:
            raise UploadError(
                f"Upload of '{object_name}' to bucket '{bucket}' failed: {e}",
                bucket=bucket,
                object_name=object_name,
            ) from e

        etag = response.get("ETag", "").strip('"')
        logger.info(
            f"Uploaded {object_name} to bucket {bucket} ({len(data)} bytes, etag {etag})"
        )
