# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""http-load-tester - repeated HTTP load-test campaigns."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("http-load-tester")
except PackageNotFoundError:
    __version__ = "unknown"
