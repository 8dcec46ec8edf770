# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Load-generation engine adapters.

The Locust worker module is deliberately not imported here: importing Locust
patches the standard library with gevent.
"""

from loadtester.engine.locust_runner import LocustCampaignRunner
from loadtester.engine.protocols import CampaignRunner
from loadtester.engine.request_log import REQUEST_LOG_FIELDS, RequestLogWriter

__all__ = [
    "CampaignRunner",
    "LocustCampaignRunner",
    "REQUEST_LOG_FIELDS",
    "RequestLogWriter",
]
