# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Sequencing of load-test campaigns."""

from loadtester.orchestrator.driver import RunDriver, compression_modes
from loadtester.orchestrator.orchestrator import CampaignOrchestrator
from loadtester.orchestrator.state import (
    ALLOWED_TRANSITIONS,
    CampaignState,
    validate_transition,
)

__all__ = [
    "ALLOWED_TRANSITIONS",
    "CampaignOrchestrator",
    "CampaignState",
    "RunDriver",
    "compression_modes",
    "validate_transition",
]
