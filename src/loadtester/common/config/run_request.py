# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path
from typing import Annotated
from urllib.parse import urlparse

from cyclopts import Parameter
from pydantic import Field, field_validator

from loadtester.common.config.durations import parse_duration
from loadtester.common.config.groups import Groups
from loadtester.common.models import LoadTesterBaseModel


class RunRequest(LoadTesterBaseModel):
    """Parameters for one invocation of the load tester.

    Constructed once from the command line and shared, read-only, with every
    component for the rest of the process.
    """

    host: Annotated[
        str,
        Field(description="Host to load test (e.g. http://localhost:8080)."),
        Parameter(name=("--host",), group=Groups.TARGET),
    ]

    users: Annotated[
        int,
        Field(ge=1, description="The number of users to hatch."),
        Parameter(name=("--users",), group=Groups.LOAD),
    ]

    start_time: Annotated[
        str,
        Field(
            description="The start time over which users are hatched (e.g. 10s, 20m)."
        ),
        Parameter(name=("--start_time",), group=Groups.LOAD),
    ]

    run_time: Annotated[
        str,
        Field(
            description="The steady state run time, after all users are hatched (e.g. 10s, 20m)."
        ),
        Parameter(name=("--run_time",), group=Groups.LOAD),
    ]

    iterations: Annotated[
        int,
        Field(ge=1, description="Number of iterations to run per compression mode."),
        Parameter(name=("--iterations",), group=Groups.LOAD),
    ] = 1

    compress: Annotated[
        bool,
        Field(
            description="Accepted for compatibility. Every run executes an uncompressed "
            "sequence followed by a compressed one."
        ),
        Parameter(name=("--compress",), group=Groups.LOAD),
    ] = False

    log_dir: Annotated[
        Path | None,
        Field(
            description="The local directory to write metrics to. Uses the platform temp "
            "directory if unset. A subdirectory may be added via --report_name."
        ),
        Parameter(name=("--log_dir",), group=Groups.OUTPUT),
    ] = None

    report_name: Annotated[
        str | None,
        Field(
            description="An optional subdirectory for metrics within the log_dir, "
            "e.g. {report_name}/1-report.html."
        ),
        Parameter(name=("--report_name",), group=Groups.OUTPUT),
    ] = None

    bucket: Annotated[
        str | None,
        Field(description="The storage bucket to copy reports and request logs to, if any."),
        Parameter(name=("--bucket",), group=Groups.STORAGE),
    ] = None

    @field_validator("host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(
                f"Invalid host: '{v}'. The host must include the scheme, "
                f"e.g. http://localhost:8080"
            )
        return v.rstrip("/")

    @field_validator("start_time", "run_time")
    @classmethod
    def validate_duration(cls, v: str) -> str:
        parse_duration(v)
        return v.strip()
