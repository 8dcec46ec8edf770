# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for the scenario builder."""

import pytest

from loadtester.common.constants import APP_USER_AGENT, REQUEST_TIMEOUT_SECONDS
from loadtester.scenario.builder import build_scenario, build_workload_behaviors


def _request_table(scenario):
    return [
        (behavior.name, [(r.name, r.path) for r in behavior.requests])
        for behavior in scenario.behaviors
    ]


class TestClientSetup:
    def test_compressed_setup_accepts_gzip_and_brotli(self):
        setup = build_scenario(compressed=True).setup

        assert setup.accept_encodings == ("gzip", "br")
        assert setup.compression_enabled is True
        assert setup.accept_encoding_header == "gzip, br"

    def test_uncompressed_setup_rejects_both_encodings(self):
        setup = build_scenario(compressed=False).setup

        assert setup.accept_encodings == ()
        assert setup.compression_enabled is False
        assert setup.accept_encoding_header == "identity"

    @pytest.mark.parametrize("compressed", [True, False])
    def test_transport_settings(self, compressed):
        setup = build_scenario(compressed).setup

        assert setup.user_agent == APP_USER_AGENT
        assert setup.cookie_store is True
        assert setup.timeout_seconds == REQUEST_TIMEOUT_SECONDS == 10.0


class TestWorkloadBehaviors:
    def test_workload_is_identical_across_modes(self):
        assert _request_table(build_scenario(True)) == _request_table(build_scenario(False))

    def test_scenario_names(self):
        assert build_scenario(True).name == "WithCompression"
        assert build_scenario(False).name == "NoCompression"

    def test_behaviors_in_registration_order(self):
        assert build_scenario(False).behavior_names == ["strings", "static", "math"]

    def test_strings_requests(self):
        strings = build_scenario(False).behaviors[0]
        names = [r.name for r in strings.requests]
        paths = {r.name: r.path for r in strings.requests}

        assert names == ["hello", "hello-param", "hello-compressed", "async-hello", "lines"]
        assert paths["hello"] == "/strings/hello"
        assert paths["hello-param"] == "/strings/hello?name=cool%20gal"
        assert paths["async-hello"] == "/strings/async-hello"
        assert paths["lines"] == "/strings/lines?n=10000"

    def test_long_name_request_is_near_a_thousand_characters(self):
        strings = build_scenario(False).behaviors[0]
        long_request = strings.requests[2]

        assert long_request.path.startswith("/strings/hello?name=")
        assert 950 <= len(long_request.path.split("=", 1)[1]) < 1000

    def test_static_requests(self):
        static = build_scenario(False).behaviors[1]

        assert [(r.name, r.path) for r in static.requests] == [
            ("basic-html", "/static/basic.html"),
            ("scout-img", "/static/scout.webp"),
        ]

    def test_math_requests_share_an_endpoint(self):
        math = build_scenario(False).behaviors[2]

        assert [(r.name, r.path) for r in math.requests] == [
            ("power-sum-easy", "/math/power-reciprocals-alt?n=1000"),
            ("power-sum-hard", "/math/power-reciprocals-alt?n=10000000"),
        ]

    def test_request_names_are_unique(self):
        names = [r.name for b in build_scenario(False).behaviors for r in b.requests]

        assert len(names) == len(set(names)) == 9

    def test_parameters_can_be_overridden(self):
        strings, _, math = build_workload_behaviors(line_count=5, hard_n=42)

        assert strings.requests[4].path == "/strings/lines?n=5"
        assert math.requests[1].path == "/math/power-reciprocals-alt?n=42"
