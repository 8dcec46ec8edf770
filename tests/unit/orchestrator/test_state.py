# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for the campaign state machine transitions."""

import pytest

from loadtester.common.exceptions import InvalidStateTransitionError
from loadtester.orchestrator.state import (
    ALLOWED_TRANSITIONS,
    CampaignState,
    validate_transition,
)


class TestCampaignState:
    @pytest.mark.parametrize(
        "state,expected",
        [
            (CampaignState.IDLE, False),
            (CampaignState.PREPARING, False),
            (CampaignState.RUNNING, False),
            (CampaignState.UPLOADING, False),
            (CampaignState.PAUSING, False),
            (CampaignState.DONE, True),
            (CampaignState.FAILED, True),
        ],
    )
    def test_is_terminal(self, state, expected):
        assert state.is_terminal is expected

    def test_every_state_has_transitions(self):
        assert set(ALLOWED_TRANSITIONS) == set(CampaignState)


class TestValidateTransition:
    @pytest.mark.parametrize(
        "current,target",
        [
            (CampaignState.IDLE, CampaignState.PREPARING),
            (CampaignState.PREPARING, CampaignState.RUNNING),
            (CampaignState.RUNNING, CampaignState.UPLOADING),
            (CampaignState.UPLOADING, CampaignState.PAUSING),
            (CampaignState.UPLOADING, CampaignState.DONE),
            (CampaignState.PAUSING, CampaignState.RUNNING),
            (CampaignState.DONE, CampaignState.IDLE),
            (CampaignState.FAILED, CampaignState.IDLE),
        ],
    )
    def test_allowed(self, current, target):
        validate_transition(current, target)

    @pytest.mark.parametrize(
        "source",
        [CampaignState.PREPARING, CampaignState.RUNNING, CampaignState.UPLOADING],
    )
    def test_failed_reachable_from_active_phases(self, source):
        validate_transition(source, CampaignState.FAILED)

    @pytest.mark.parametrize(
        "current,target",
        [
            (CampaignState.IDLE, CampaignState.RUNNING),
            (CampaignState.RUNNING, CampaignState.RUNNING),
            (CampaignState.RUNNING, CampaignState.PAUSING),
            (CampaignState.PAUSING, CampaignState.FAILED),
            (CampaignState.PAUSING, CampaignState.DONE),
            (CampaignState.FAILED, CampaignState.RUNNING),
            (CampaignState.DONE, CampaignState.RUNNING),
            (CampaignState.IDLE, CampaignState.FAILED),
        ],
    )
    def test_rejected(self, current, target):
        with pytest.raises(InvalidStateTransitionError, match="Invalid campaign state transition"):
            validate_transition(current, target)
