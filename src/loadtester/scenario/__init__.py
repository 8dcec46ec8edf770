# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Scenario definitions for load-test campaigns."""

from loadtester.scenario.builder import (
    build_client_setup,
    build_scenario,
    build_workload_behaviors,
)
from loadtester.scenario.models import (
    ClientSetup,
    NamedRequest,
    ScenarioDefinition,
    WorkloadBehavior,
)

__all__ = [
    "ClientSetup",
    "NamedRequest",
    "ScenarioDefinition",
    "WorkloadBehavior",
    "build_client_setup",
    "build_scenario",
    "build_workload_behaviors",
]
