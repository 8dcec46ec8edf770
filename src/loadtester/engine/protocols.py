# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from loadtester.campaign.models import CampaignConfig


@runtime_checkable
class CampaignRunner(Protocol):
    """Executes one fully materialized campaign and blocks until it completes.

    Implementations write the HTML report to ``config.report_file`` and the
    request log to ``config.request_log``, and raise EngineError if the
    campaign could not be carried out.
    """

    def run(self, config: CampaignConfig) -> None: ...
