# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Exception hierarchy for the load tester.

Every error that can abort a campaign sequence derives from LoadTesterError so
the CLI can map it to a non-zero exit status in one place.
"""


class LoadTesterError(Exception):
    """Base class for all load tester errors."""


class ConfigurationError(LoadTesterError):
    """Invalid or missing run configuration."""


class ArtifactIOError(LoadTesterError):
    """A local filesystem operation on the log directory or an artifact failed."""

    def __init__(self, message: str, path=None) -> None:
        super().__init__(message)
        self.path = path


class EngineError(LoadTesterError):
    """The load-generation engine reported a failed campaign."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class UploadError(LoadTesterError):
    """Copying an artifact to durable storage failed."""

    def __init__(self, message: str, bucket: str | None = None, object_name: str | None = None) -> None:
        super().__init__(message)
        self.bucket = bucket
        self.object_name = object_name


class InvalidStateTransitionError(LoadTesterError):
    """The campaign state machine was asked to make a transition it does not allow."""
