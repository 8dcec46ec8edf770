# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""CSV request log fed by the engine's per-request event."""

import csv
import time
from pathlib import Path

from loadtester.common.constants import MILLIS_PER_SECOND

REQUEST_LOG_FIELDS = (
    "elapsed_ms",
    "method",
    "name",
    "url",
    "status_code",
    "response_time_ms",
    "response_length",
    "success",
    "error",
)


class RequestLogWriter:
    """Appends one CSV row per completed request.

    Register ``on_request`` as a listener on the engine's request event. The
    file is opened on construction and the header written immediately, so a
    campaign that issues no requests still leaves a valid (header-only) log.
    """

    def __init__(self, path: Path, clock=time.monotonic) -> None:
        self.path = Path(path)
        self._clock = clock
        self._started = clock()
        self._file = open(self.path, "w", newline="", encoding="utf-8")
        self._writer = csv.writer(self._file)
        self._writer.writerow(REQUEST_LOG_FIELDS)
        self.rows_written = 0

    def on_request(
        self,
        request_type,
        name,
        response_time,
        response_length,
        exception=None,
        response=None,
        url=None,
        **kwargs,
    ) -> None:
        status_code = getattr(response, "status_code", None)
        self._writer.writerow(
            (
                round((self._clock() - self._started) * MILLIS_PER_SECOND),
                request_type,
                name,
                url or "",
                status_code if status_code is not None else "",
                round(response_time or 0, 3),
                response_length or 0,
                exception is None,
                "" if exception is None else repr(exception),
            )
        )
        self.rows_written += 1

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> "RequestLogWriter":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
