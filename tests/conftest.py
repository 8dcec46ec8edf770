# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures: a recording campaign runner and a recording blob store."""

from pathlib import Path

import pytest

from loadtester.campaign.models import CampaignConfig
from loadtester.common.config import RunRequest
from loadtester.common.exceptions import EngineError, UploadError


class RecordingRunner:
    """CampaignRunner fake that writes placeholder artifacts instead of load testing."""

    def __init__(self, fail_on_call: int | None = None, write_artifacts: bool = True):
        self.configs: list[CampaignConfig] = []
        self.fail_on_call = fail_on_call
        self.write_artifacts = write_artifacts

    def run(self, config: CampaignConfig) -> None:
        self.configs.append(config)
        if self.fail_on_call is not None and len(self.configs) == self.fail_on_call:
            raise EngineError("simulated engine failure", returncode=1)
        if self.write_artifacts:
            Path(config.report_file).write_text(
                f"<html>{config.scenario.name}</html>", encoding="utf-8"
            )
            Path(config.request_log).write_text(
                "elapsed_ms,method,name\n0,GET,hello\n", encoding="utf-8"
            )


class RecordingStore:
    """BlobStore fake that records every put_object call."""

    def __init__(self, fail_on_call: int | None = None):
        self.calls: list[tuple[str, bytes, str, str]] = []
        self.fail_on_call = fail_on_call

    def put_object(
        self, bucket: str, data: bytes, object_name: str, content_type: str
    ) -> None:
        self.calls.append((bucket, data, object_name, content_type))
        if self.fail_on_call is not None and len(self.calls) == self.fail_on_call:
            raise UploadError(
                "simulated upload failure", bucket=bucket, object_name=object_name
            )


@pytest.fixture
def recording_runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def recording_store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def runner_factory() -> type[RecordingRunner]:
    return RecordingRunner


@pytest.fixture
def store_factory() -> type[RecordingStore]:
    return RecordingStore


@pytest.fixture
def run_request(tmp_path: Path) -> RunRequest:
    return RunRequest(
        host="http://x",
        users=1,
        start_time="1s",
        run_time="2s",
        iterations=2,
        log_dir=tmp_path,
    )


@pytest.fixture
def no_sleep():
    """Sleep replacement that records requested durations."""
    calls: list[float] = []

    def sleep(seconds: float) -> None:
        calls.append(seconds)

    sleep.calls = calls
    return sleep
