# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""States of a campaign sequence and the transitions allowed between them."""

from enum import Enum

from loadtester.common.exceptions import InvalidStateTransitionError

__all__ = [
    "ALLOWED_TRANSITIONS",
    "CampaignState",
    "validate_transition",
]


class CampaignState(str, Enum):
    IDLE = "idle"
    PREPARING = "preparing"
    RUNNING = "running"
    UPLOADING = "uploading"
    PAUSING = "pausing"
    DONE = "done"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (CampaignState.DONE, CampaignState.FAILED)


# There is no edge back into RUNNING from FAILED: a failed campaign is never retried.
ALLOWED_TRANSITIONS: dict[CampaignState, frozenset[CampaignState]] = {
    CampaignState.IDLE: frozenset({CampaignState.PREPARING}),
    CampaignState.PREPARING: frozenset({CampaignState.RUNNING, CampaignState.FAILED}),
    CampaignState.RUNNING: frozenset({CampaignState.UPLOADING, CampaignState.FAILED}),
    CampaignState.UPLOADING: frozenset(
        {CampaignState.PAUSING, CampaignState.DONE, CampaignState.FAILED}
    ),
    CampaignState.PAUSING: frozenset({CampaignState.RUNNING}),
    CampaignState.DONE: frozenset({CampaignState.IDLE}),
    CampaignState.FAILED: frozenset({CampaignState.IDLE}),
}


def validate_transition(current: CampaignState, target: CampaignState) -> None:
    """Raise if moving from ``current`` to ``target`` is not allowed."""
    if target not in ALLOWED_TRANSITIONS[current]:
        raise InvalidStateTransitionError(
            f"Invalid campaign state transition: {current.value} -> {target.value}"
        )
