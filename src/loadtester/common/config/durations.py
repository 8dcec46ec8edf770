# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Parsing of human-readable duration strings such as ``10s``, ``20m`` or ``1h30m``."""

import re

from loadtester.common.constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE

_TIMESPAN_RE = re.compile(
    r"^(?:(?P<hours>\d+)h)?(?:(?P<minutes>\d+)m)?(?:(?P<seconds>\d+)s)?$"
)


def parse_duration(value: str | int) -> int:
    """Convert a duration string into whole seconds.

    Accepts a bare integer (seconds) or any ordered combination of hour, minute
    and second components: ``"30"``, ``"30s"``, ``"5m"``, ``"1h30m10s"``.

    Raises:
        ValueError: If the value is empty, negative or not in a recognised format.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid duration: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Invalid duration: {value}. Durations must be >= 0.")
        return value

    text = value.strip()
    if text.isdigit():
        return int(text)

    match = _TIMESPAN_RE.match(text)
    if not text or match is None or not any(match.groupdict().values()):
        raise ValueError(
            f"Invalid duration: '{value}'. "
            f"Valid formats: 20, 20s, 3m, 2h, 1h20m, 3h30m10s."
        )

    parts = {name: int(part) for name, part in match.groupdict().items() if part}
    return (
        parts.get("hours", 0) * SECONDS_PER_HOUR
        + parts.get("minutes", 0) * SECONDS_PER_MINUTE
        + parts.get("seconds", 0)
    )
