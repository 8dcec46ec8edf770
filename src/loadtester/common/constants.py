# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Fixed values shared across the load tester."""

APP_USER_AGENT = "http-load-tester/0.0.1"
REQUEST_TIMEOUT_SECONDS = 10.0

DEFAULT_ITERATION_COOLDOWN_SECONDS = 10.0
DEFAULT_MODE_COOLDOWN_SECONDS = 10.0

REQUEST_LOG_FORMAT = "csv"

REPORT_SUFFIX = "report.html"
COMPRESSED_REPORT_SUFFIX = "compressed-report.html"
REQUEST_LOG_SUFFIX = "requests.csv"
COMPRESSED_REQUEST_LOG_SUFFIX = "compressed-requests.csv"

HTML_CONTENT_TYPE = "text/html"
CSV_CONTENT_TYPE = "text/csv"

COMPRESSED_ENCODINGS = ("gzip", "br")
IDENTITY_ENCODING = "identity"

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
MILLIS_PER_SECOND = 1000
