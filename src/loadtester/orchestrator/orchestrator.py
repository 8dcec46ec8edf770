# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Campaign orchestrator: repeated load-test iterations for one compression mode."""

import logging
import time
from collections.abc import Callable

from loadtester.campaign.models import (
    ArtifactPaths,
    CampaignConfig,
    IterationContext,
    IterationResult,
)
from loadtester.campaign.paths import ensure_log_directory, resolve_artifact_paths
from loadtester.common.config import RunRequest
from loadtester.common.environment import Environment
from loadtester.common.exceptions import ArtifactIOError, EngineError, UploadError
from loadtester.engine.protocols import CampaignRunner
from loadtester.orchestrator.state import CampaignState, validate_transition
from loadtester.scenario.builder import build_scenario
from loadtester.storage.protocols import BlobStore
from loadtester.storage.uploader import upload_artifacts

logger = logging.getLogger(__name__)

__all__ = [
    "CampaignOrchestrator",
]


class CampaignOrchestrator:
    """Runs ``request.iterations`` campaigns back to back for one compression mode.

    The sequence is an explicit state machine::

        IDLE -> PREPARING -> RUNNING(1) -> UPLOADING(1) -> PAUSING(1)
             -> RUNNING(2) -> ... -> UPLOADING(n) -> DONE

    FAILED is entered from PREPARING, RUNNING or UPLOADING, after which the
    error is re-raised and no further iteration starts. Nothing is retried.

    Each iteration gets a fresh CampaignConfig derived from the RunRequest, so
    no state is carried from one iteration to the next.
    """

    def __init__(
        self,
        request: RunRequest,
        runner: CampaignRunner,
        store: BlobStore | None = None,
        sleep: Callable[[float], None] = time.sleep,
        iteration_cooldown: float | None = None,
    ) -> None:
        """Initialize CampaignOrchestrator.

        Args:
            request: Parameters shared by every iteration
            runner: Engine that executes a single campaign
            store: Storage backend for uploads; created on demand when a bucket is set
            sleep: Blocking sleep used for the pause between iterations
            iteration_cooldown: Seconds to pause between iterations. Defaults to
                LOADTESTER_ITERATION_COOLDOWN_SECONDS (10s).
        """
        self.request = request
        self.runner = runner
        self.store = store
        self._sleep = sleep
        self.iteration_cooldown = (
            Environment.ITERATION_COOLDOWN_SECONDS
            if iteration_cooldown is None
            else iteration_cooldown
        )
        self.state = CampaignState.IDLE
        self.iteration: int | None = None
        self._base_config = CampaignConfig.from_run_request(request)

    def execute(self, compressed: bool) -> list[IterationResult]:
        """Run every iteration for the given compression mode.

        Returns:
            One IterationResult per iteration, in order

        Raises:
            ArtifactIOError: If the log directory cannot be created or an
                artifact cannot be read for upload
            EngineError: If a campaign fails
            UploadError: If copying an artifact to storage fails
        """
        if self.state.is_terminal:
            self._transition(CampaignState.IDLE)
        self.iteration = None

        mode = "compressed" if compressed else "uncompressed"
        total = self.request.iterations
        results: list[IterationResult] = []

        self._transition(CampaignState.PREPARING)
        try:
            log_dir = ensure_log_directory(
                self.request.log_dir, self.request.report_name
            )
        except ArtifactIOError as e:
            self._fail(f"Could not prepare log directory: {e}")
            raise
        logger.info(f"Starting {total} {mode} iteration(s), writing to {log_dir}")

        for i in range(1, total + 1):
            context = IterationContext(iteration=i, compressed=compressed)

            self._transition(CampaignState.RUNNING, iteration=i)
            logger.info(f"Commencing iteration {i}")
            paths = self._run(context)

            self._transition(CampaignState.UPLOADING, iteration=i)
            uploaded = self._upload(paths)

            results.append(
                IterationResult(
                    iteration=i,
                    compressed=compressed,
                    report_path=paths.report_path,
                    request_log_path=paths.request_log_path,
                    uploaded=uploaded,
                )
            )
            logger.info(f"Completed iteration {i}")

            if i < total:
                self._transition(CampaignState.PAUSING, iteration=i)
                if self.iteration_cooldown > 0:
                    logger.info(f"Applying cooldown: {self.iteration_cooldown}s")
                    self._sleep(self.iteration_cooldown)

        self._transition(CampaignState.DONE)
        logger.info(f"All {total} {mode} iteration(s) complete")
        return results

    def _run(self, context: IterationContext) -> ArtifactPaths:
        paths = resolve_artifact_paths(
            self.request.log_dir, self.request.report_name, context
        )
        config = self._base_config.for_iteration(
            paths, build_scenario(context.compressed)
        )
        try:
            self.runner.run(config)
        except EngineError as e:
            self._fail(f"Campaign failed: {e}")
            raise
        except Exception as e:
            self._fail(f"Campaign failed: {e}")
            raise EngineError(
                f"Campaign runner raised an unexpected error in iteration "
                f"{context.iteration}: {e}"
            ) from e
        return paths

    def _upload(self, paths: ArtifactPaths) -> bool:
        try:
            return upload_artifacts(self.request.bucket, paths, self.store)
        except (ArtifactIOError, UploadError) as e:
            self._fail(f"Artifact upload failed: {e}")
            raise

    def _transition(self, target: CampaignState, iteration: int | None = None) -> None:
        validate_transition(self.state, target)
        logger.debug(
            f"Campaign state {self.state.value} -> {target.value}"
            + (f" (iteration {iteration})" if iteration is not None else "")
        )
        self.state = target
        if iteration is not None:
            self.iteration = iteration

    def _fail(self, reason: str) -> None:
        where = f" in iteration {self.iteration}" if self.iteration else ""
        logger.error(f"{reason}{where}")
        self._transition(CampaignState.FAILED)
