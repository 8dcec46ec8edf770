# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Runs a campaign with Locust in an isolated child process."""

import logging
import subprocess
import sys
import tempfile
from pathlib import Path

import orjson

from loadtester.campaign.models import CampaignConfig
from loadtester.common.environment import Environment
from loadtester.common.exceptions import EngineError

logger = logging.getLogger(__name__)

__all__ = [
    "LocustCampaignRunner",
]

WORKER_MODULE = "loadtester.engine.locust_worker"
CONFIG_FILE_NAME = "campaign_config.json"


class LocustCampaignRunner:
    """CampaignRunner that executes each campaign in a fresh Python process.

    Locust monkey-patches the standard library with gevent on import, so it is
    never imported into the orchestrating process. Each campaign gets its own
    interpreter, which also guarantees that no engine state survives from one
    iteration to the next.
    """

    def __init__(self, python_executable: str | None = None) -> None:
        self.python_executable = python_executable or sys.executable

    def run(self, config: CampaignConfig) -> None:
        """Execute the campaign and block until the worker exits.

        Raises:
            EngineError: If the config is incomplete, the worker exits non-zero,
                or the worker exits cleanly without writing the report.
        """
        if not config.is_materialized:
            raise EngineError(
                "Campaign config is missing output files or a scenario; "
                "it must be materialized before it is run"
            )

        with tempfile.TemporaryDirectory(prefix="loadtester-") as tmp_dir:
            config_file = Path(tmp_dir) / CONFIG_FILE_NAME
            config_file.write_bytes(
                orjson.dumps(config.model_dump(mode="json"), option=orjson.OPT_INDENT_2)
            )

            # No timeout: the worker stops itself after ramp + steady time.
            # stdout is inherited so Locust's periodic stats stay visible.
            result = subprocess.run(
                [
                    self.python_executable,
                    "-u",
                    "-m",
                    WORKER_MODULE,
                    str(config_file),
                ],
                stderr=subprocess.PIPE,
                text=True,
            )

        if result.returncode != 0:
            error_msg = f"Load campaign failed with exit code {result.returncode}"
            if result.stderr:
                tail = Environment.ENGINE_STDERR_TAIL_CHARS
                error_msg += f"\nStderr: {result.stderr[-tail:] if tail else ''}"
            raise EngineError(error_msg, returncode=result.returncode)

        if result.stderr:
            logger.debug(f"Engine output:\n{result.stderr}")

        if not Path(config.report_file).is_file():
            raise EngineError(
                f"Load campaign exited successfully but wrote no report to {config.report_file}",
                returncode=result.returncode,
            )
