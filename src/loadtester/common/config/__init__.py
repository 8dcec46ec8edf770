# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from loadtester.common.config.durations import parse_duration
from loadtester.common.config.groups import Groups
from loadtester.common.config.run_request import RunRequest

__all__ = [
    "Groups",
    "RunRequest",
    "parse_duration",
]
