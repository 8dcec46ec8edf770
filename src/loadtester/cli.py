# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Command line entry point."""

import logging
import sys
from typing import Annotated

from cyclopts import App, Parameter
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel

from loadtester import __version__
from loadtester.campaign.models import IterationResult
from loadtester.common.config import RunRequest
from loadtester.common.exceptions import ConfigurationError, LoadTesterError
from loadtester.common.logging import setup_rich_logging
from loadtester.engine.locust_runner import LocustCampaignRunner
from loadtester.engine.protocols import CampaignRunner
from loadtester.orchestrator.driver import RunDriver, compression_modes
from loadtester.storage.protocols import BlobStore

logger = logging.getLogger(__name__)

app = App(
    name="http-load-tester",
    help="Run repeated HTTP load-test campaigns and archive their reports.",
    version=__version__,
)


def exit_with_error(message: str, title: str = "Error") -> None:
    """Print a diagnostic panel to stderr and exit with status 1."""
    console = Console(stderr=True)
    console.print(Panel(message, title=title, border_style="red", title_align="left"))
    sys.exit(1)


def run_load_test(
    request: RunRequest,
    runner: CampaignRunner | None = None,
    store: BlobStore | None = None,
) -> dict[bool, list[IterationResult]]:
    """Run every requested campaign for ``request``.

    Raises:
        LoadTesterError: On the first failure; nothing after it is attempted.
    """
    modes = ", ".join(
        "compressed" if compressed else "uncompressed"
        for compressed in compression_modes(request)
    )
    logger.info("=" * 80)
    logger.info(f"Load testing {request.host}")
    logger.info(f"  Users: {request.users}")
    logger.info(f"  Ramp / steady: {request.start_time} / {request.run_time}")
    logger.info(f"  Iterations per mode: {request.iterations}")
    logger.info(f"  Modes: {modes}")
    if request.bucket:
        logger.info(f"  Uploading to bucket: {request.bucket}")
    logger.info("=" * 80)

    driver = RunDriver(request, runner or LocustCampaignRunner(), store=store)
    return driver.run()


@app.default
def run(
    request: Annotated[RunRequest, Parameter(name="*")],
    *,
    verbose: Annotated[
        bool, Parameter(name=("--verbose", "-v"), help="Enable debug logging.")
    ] = False,
) -> None:
    """Load test a host without and then with HTTP compression.

    Each mode runs --iterations campaigns, writing {i}-report.html and
    {i}-requests.csv (prefixed "compressed-" for the compressed mode) to the
    log directory and, if --bucket is given, copying them to storage.
    """
    setup_rich_logging(logging.DEBUG if verbose else logging.INFO)
    try:
        run_load_test(request)
    except LoadTesterError as e:
        logger.debug("Load test aborted", exc_info=True)
        exit_with_error(str(e), title=type(e).__name__)


def main(tokens: list[str] | None = None) -> None:
    try:
        app(tokens)
    except ValidationError as e:
        error = ConfigurationError(f"Invalid arguments:\n{e}")
        exit_with_error(str(error), title=type(error).__name__)


if __name__ == "__main__":
    main()
