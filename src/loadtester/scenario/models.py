# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Declarative description of what each simulated client does."""

from pydantic import Field

from loadtester.common.constants import IDENTITY_ENCODING
from loadtester.common.models import LoadTesterBaseModel


class ClientSetup(LoadTesterBaseModel):
    """One-time configuration of a simulated client's HTTP transport."""

    user_agent: str = Field(description="User-Agent header sent with every request")
    cookie_store: bool = Field(
        default=True, description="Keep cookies across requests of the same client"
    )
    timeout_seconds: float = Field(gt=0, description="Per-request timeout")
    accept_encodings: tuple[str, ...] = Field(
        default=(),
        description="Content encodings the client negotiates. Empty means identity only.",
    )

    @property
    def compression_enabled(self) -> bool:
        return bool(self.accept_encodings)

    @property
    def accept_encoding_header(self) -> str:
        """Value for the Accept-Encoding header."""
        if not self.accept_encodings:
            return IDENTITY_ENCODING
        return ", ".join(self.accept_encodings)


class NamedRequest(LoadTesterBaseModel):
    """A GET request, reported in metrics under ``name`` rather than its URL."""

    path: str
    name: str


class WorkloadBehavior(LoadTesterBaseModel):
    """A named group of requests issued sequentially, repeated by the engine."""

    name: str
    requests: tuple[NamedRequest, ...]


class ScenarioDefinition(LoadTesterBaseModel):
    """Setup behavior plus the ordered workload behaviors for one campaign."""

    name: str
    setup: ClientSetup
    behaviors: tuple[WorkloadBehavior, ...]

    @property
    def behavior_names(self) -> list[str]:
        return [behavior.name for behavior in self.behaviors]
