# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging

from rich.console import Console
from rich.logging import RichHandler

_LOG_FORMAT = "%(message)s"


def setup_rich_logging(level: int = logging.INFO, console: Console | None = None) -> None:
    """Route root logging through a rich handler.

    Any handlers installed by an earlier call are replaced, so calling this
    twice does not duplicate output.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_path=level <= logging.DEBUG,
        log_time_format="[%X]",
    )
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)

    # boto's wire-level debug output drowns the campaign log
    for noisy in ("botocore", "boto3", "urllib3", "s3transfer"):
        logging.getLogger(noisy).setLevel(max(level, logging.WARNING))
