# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Process-level tunables read from LOADTESTER_* environment variables.

Run parameters (host, users, durations, ...) come from the CLI only. These
settings cover pacing and storage transport, and their defaults reproduce the
fixed behavior of the tool.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from loadtester.common.constants import (
    DEFAULT_ITERATION_COOLDOWN_SECONDS,
    DEFAULT_MODE_COOLDOWN_SECONDS,
)


class EnvironmentSettings(BaseSettings):
    """Environment-driven settings for the load tester."""

    model_config = SettingsConfigDict(env_prefix="LOADTESTER_", extra="ignore")

    ITERATION_COOLDOWN_SECONDS: float = Field(
        default=DEFAULT_ITERATION_COOLDOWN_SECONDS,
        ge=0,
        description="Pause between successive iterations of one compression mode",
    )
    MODE_COOLDOWN_SECONDS: float = Field(
        default=DEFAULT_MODE_COOLDOWN_SECONDS,
        ge=0,
        description="Settling delay between the uncompressed and compressed sequences",
    )
    STORAGE_ENDPOINT_URL: str | None = Field(
        default=None,
        description="S3-compatible endpoint for artifact uploads, e.g. https://storage.googleapis.com",
    )
    STORAGE_REGION: str | None = Field(
        default=None,
        description="Region name passed to the storage client",
    )
    ENGINE_STDERR_TAIL_CHARS: int = Field(
        default=2000,
        ge=0,
        description="How much of a failed engine's stderr to keep in the error message",
    )


Environment = EnvironmentSettings()
