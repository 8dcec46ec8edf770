# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Top-level sequencing of the uncompressed and compressed campaign runs."""

import logging
import time
from collections.abc import Callable

from loadtester.campaign.models import IterationResult
from loadtester.common.config import RunRequest
from loadtester.common.environment import Environment
from loadtester.engine.protocols import CampaignRunner
from loadtester.orchestrator.orchestrator import CampaignOrchestrator
from loadtester.storage.protocols import BlobStore

logger = logging.getLogger(__name__)

__all__ = [
    "RunDriver",
    "compression_modes",
]


def compression_modes(request: RunRequest) -> tuple[bool, ...]:
    """Modes to run, in order. --compress does not narrow the set."""
    return (False, True)


class RunDriver:
    """Runs a full orchestration per compression mode with a settling delay between.

    A failure in one mode propagates immediately; later modes are not attempted.
    """

    def __init__(
        self,
        request: RunRequest,
        runner: CampaignRunner,
        store: BlobStore | None = None,
        sleep: Callable[[float], None] = time.sleep,
        mode_cooldown: float | None = None,
        iteration_cooldown: float | None = None,
    ) -> None:
        self.request = request
        self.runner = runner
        self.store = store
        self._sleep = sleep
        self.mode_cooldown = (
            Environment.MODE_COOLDOWN_SECONDS if mode_cooldown is None else mode_cooldown
        )
        self.iteration_cooldown = iteration_cooldown

    def run(self) -> dict[bool, list[IterationResult]]:
        """Execute every compression mode.

        Returns:
            Iteration results keyed by compression mode
        """
        results: dict[bool, list[IterationResult]] = {}
        modes = compression_modes(self.request)

        for index, compressed in enumerate(modes):
            if index > 0 and self.mode_cooldown > 0:
                logger.info(
                    f"Waiting {self.mode_cooldown}s before the next compression mode"
                )
                self._sleep(self.mode_cooldown)

            orchestrator = CampaignOrchestrator(
                self.request,
                self.runner,
                store=self.store,
                sleep=self._sleep,
                iteration_cooldown=self.iteration_cooldown,
            )
            results[compressed] = orchestrator.execute(compressed)

        return results
