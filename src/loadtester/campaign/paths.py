# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Artifact path resolution and log directory preparation.

Every iteration writes to ``{log_dir}/{report_name}/{iteration}-{suffix}``,
where the suffix depends on the artifact kind and compression mode. Distinct
(iteration, compressed, kind) tuples always map to distinct files, so
iterations never overwrite each other.
"""

import logging
import tempfile
from enum import Enum
from pathlib import Path

from loadtester.campaign.models import ArtifactPaths, IterationContext
from loadtester.common.constants import (
    COMPRESSED_REPORT_SUFFIX,
    COMPRESSED_REQUEST_LOG_SUFFIX,
    REPORT_SUFFIX,
    REQUEST_LOG_SUFFIX,
)
from loadtester.common.exceptions import ArtifactIOError

logger = logging.getLogger(__name__)

__all__ = [
    "ArtifactKind",
    "artifact_suffix",
    "ensure_log_directory",
    "resolve_artifact_path",
    "resolve_artifact_paths",
    "resolve_log_directory",
]


class ArtifactKind(str, Enum):
    REPORT = "report"
    REQUEST_LOG = "request_log"


_SUFFIXES: dict[tuple[ArtifactKind, bool], str] = {
    (ArtifactKind.REPORT, False): REPORT_SUFFIX,
    (ArtifactKind.REPORT, True): COMPRESSED_REPORT_SUFFIX,
    (ArtifactKind.REQUEST_LOG, False): REQUEST_LOG_SUFFIX,
    (ArtifactKind.REQUEST_LOG, True): COMPRESSED_REQUEST_LOG_SUFFIX,
}


def artifact_suffix(kind: ArtifactKind, compressed: bool) -> str:
    return _SUFFIXES[(ArtifactKind(kind), compressed)]


def resolve_log_directory(
    log_dir: str | Path | None = None, report_name: str | None = None
) -> Path:
    """Directory holding a run's artifacts.

    Args:
        log_dir: Base directory; the platform temp directory when None
        report_name: Optional subdirectory appended to the base

    Returns:
        ``log_dir/report_name``, or just ``log_dir`` without a report name
    """
    path = Path(log_dir) if log_dir is not None else Path(tempfile.gettempdir())
    if report_name:
        path = path / report_name
    return path


def resolve_artifact_path(
    log_dir: str | Path | None,
    report_name: str | None,
    iteration: int,
    suffix: str,
) -> Path:
    return resolve_log_directory(log_dir, report_name) / f"{iteration}-{suffix}"


def resolve_artifact_paths(
    log_dir: str | Path | None,
    report_name: str | None,
    context: IterationContext,
) -> ArtifactPaths:
    """Report and request-log paths for one iteration."""
    return ArtifactPaths(
        report_path=resolve_artifact_path(
            log_dir,
            report_name,
            context.iteration,
            artifact_suffix(ArtifactKind.REPORT, context.compressed),
        ),
        request_log_path=resolve_artifact_path(
            log_dir,
            report_name,
            context.iteration,
            artifact_suffix(ArtifactKind.REQUEST_LOG, context.compressed),
        ),
    )


def ensure_log_directory(
    log_dir: str | Path | None = None, report_name: str | None = None
) -> Path:
    """Create the log directory and any missing parents.

    Safe to call when the directory already exists; existing contents are left
    untouched.

    Raises:
        ArtifactIOError: If the directory cannot be created
    """
    path = resolve_log_directory(log_dir, report_name)
    if path.is_dir():
        return path

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ArtifactIOError(
            f"Failed to create log directory {path}: {e}", path=path
        ) from e

    logger.debug(f"Created log directory {path}")
    return path
