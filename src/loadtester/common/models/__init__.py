# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from loadtester.common.models.base_models import LoadTesterBaseModel

__all__ = ["LoadTesterBaseModel"]
