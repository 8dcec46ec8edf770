# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Data models for a single campaign iteration."""

from pathlib import Path

from pydantic import Field

from loadtester.common.config import RunRequest, parse_duration
from loadtester.common.constants import REQUEST_LOG_FORMAT
from loadtester.common.models import LoadTesterBaseModel
from loadtester.scenario.models import ScenarioDefinition


class IterationContext(LoadTesterBaseModel):
    """Identifies one iteration of one compression mode.

    Attributes:
        iteration: 1-based iteration index
        compressed: Whether the iteration negotiates content encoding
    """

    iteration: int = Field(ge=1)
    compressed: bool


class ArtifactPaths(LoadTesterBaseModel):
    """Local files produced by one iteration."""

    report_path: Path
    request_log_path: Path


class CampaignConfig(LoadTesterBaseModel):
    """Everything the engine needs to execute one campaign.

    A base config with empty output fields is derived from the RunRequest once;
    each iteration gets its own copy with the output files and scenario filled
    in. The engine receives that copy and nothing else.

    Attributes:
        host: Target base URL
        users: Number of simulated clients
        start_time: Ramp duration over which clients are hatched
        run_time: Steady-state duration after all clients are hatched
        report_file: HTML report destination
        request_log: Per-request log destination
        request_format: Request log format
        scenario: Behaviors attached to every simulated client
    """

    host: str
    users: int = Field(ge=1)
    start_time: str
    run_time: str
    report_file: Path | None = None
    request_log: Path | None = None
    request_format: str = REQUEST_LOG_FORMAT
    scenario: ScenarioDefinition | None = None

    @classmethod
    def from_run_request(cls, request: RunRequest) -> "CampaignConfig":
        return cls(
            host=request.host,
            users=request.users,
            start_time=request.start_time,
            run_time=request.run_time,
        )

    def for_iteration(
        self, paths: ArtifactPaths, scenario: ScenarioDefinition
    ) -> "CampaignConfig":
        """Return a fully materialized copy for one iteration."""
        return self.model_copy(
            update={
                "report_file": paths.report_path,
                "request_log": paths.request_log_path,
                "scenario": scenario,
            },
            deep=True,
        )

    @property
    def is_materialized(self) -> bool:
        return (
            self.report_file is not None
            and self.request_log is not None
            and self.scenario is not None
        )

    @property
    def ramp_seconds(self) -> int:
        return parse_duration(self.start_time)

    @property
    def steady_seconds(self) -> int:
        return parse_duration(self.run_time)

    @property
    def total_seconds(self) -> int:
        return self.ramp_seconds + self.steady_seconds

    @property
    def spawn_rate(self) -> float:
        """Users hatched per second so that all are running when the ramp ends."""
        if self.ramp_seconds <= 0:
            return float(self.users)
        return self.users / self.ramp_seconds


class IterationResult(LoadTesterBaseModel):
    """Outcome of a completed iteration.

    Attributes:
        iteration: 1-based iteration index
        compressed: Compression mode of the iteration
        report_path: HTML report written by the engine
        request_log_path: Request log written by the engine
        uploaded: Whether both artifacts were copied to storage
    """

    iteration: int
    compressed: bool
    report_path: Path
    request_log_path: Path
    uploaded: bool = False
