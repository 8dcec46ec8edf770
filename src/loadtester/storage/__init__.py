# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Durable storage for campaign artifacts."""

from loadtester.storage.protocols import BlobStore
from loadtester.storage.uploader import upload_artifacts

__all__ = [
    "BlobStore",
    "upload_artifacts",
]
