# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Per-iteration campaign configuration and artifact layout."""

from loadtester.campaign.models import (
    ArtifactPaths,
    CampaignConfig,
    IterationContext,
    IterationResult,
)
from loadtester.campaign.paths import (
    ArtifactKind,
    artifact_suffix,
    ensure_log_directory,
    resolve_artifact_path,
    resolve_artifact_paths,
    resolve_log_directory,
)

__all__ = [
    "ArtifactKind",
    "ArtifactPaths",
    "CampaignConfig",
    "IterationContext",
    "IterationResult",
    "artifact_suffix",
    "ensure_log_directory",
    "resolve_artifact_path",
    "resolve_artifact_paths",
    "resolve_log_directory",
]
