# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for campaign data models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from loadtester.campaign.models import ArtifactPaths, CampaignConfig, IterationContext
from loadtester.scenario.builder import build_scenario


@pytest.fixture
def base_config(run_request) -> CampaignConfig:
    return CampaignConfig.from_run_request(run_request)


@pytest.fixture
def paths(tmp_path) -> ArtifactPaths:
    return ArtifactPaths(
        report_path=tmp_path / "1-report.html",
        request_log_path=tmp_path / "1-requests.csv",
    )


class TestCampaignConfig:
    def test_from_run_request_copies_load_parameters(self, run_request, base_config):
        assert base_config.host == run_request.host
        assert base_config.users == run_request.users
        assert base_config.start_time == run_request.start_time
        assert base_config.run_time == run_request.run_time
        assert base_config.request_format == "csv"
        assert base_config.is_materialized is False

    def test_for_iteration_fills_outputs_without_touching_base(self, base_config, paths):
        scenario = build_scenario(compressed=False)

        config = base_config.for_iteration(paths, scenario)

        assert config.report_file == paths.report_path
        assert config.request_log == paths.request_log_path
        assert config.scenario == scenario
        assert config.is_materialized is True
        assert base_config.report_file is None
        assert base_config.scenario is None

    def test_is_frozen(self, base_config):
        with pytest.raises(ValidationError):
            base_config.report_file = Path("/tmp/x.html")

    def test_round_trips_through_json(self, base_config, paths):
        config = base_config.for_iteration(paths, build_scenario(compressed=True))

        restored = CampaignConfig.model_validate_json(config.model_dump_json())

        assert restored == config

    @pytest.mark.parametrize(
        "users,start_time,run_time,spawn_rate,total",
        [
            (10, "10s", "1m", 1.0, 70),
            (5, "0", "30s", 5.0, 30),
            (3, "2s", "0", 1.5, 2),
        ],
    )
    def test_timing(self, users, start_time, run_time, spawn_rate, total):
        config = CampaignConfig(
            host="http://x", users=users, start_time=start_time, run_time=run_time
        )

        assert config.spawn_rate == spawn_rate
        assert config.total_seconds == total


class TestIterationContext:
    def test_iteration_is_one_based(self):
        with pytest.raises(ValidationError):
            IterationContext(iteration=0, compressed=False)
