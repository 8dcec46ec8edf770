# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import BaseModel, ConfigDict


class LoadTesterBaseModel(BaseModel):
    """Base model for all load tester data objects.

    Instances are frozen: a value handed from one component to the next can
    never be changed behind the receiver's back.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
