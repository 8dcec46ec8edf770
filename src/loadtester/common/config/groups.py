# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from cyclopts import Group


class Groups:
    """Help-screen groups for the CLI parameters."""

    TARGET = Group.create_ordered("Target")
    LOAD = Group.create_ordered("Load")
    OUTPUT = Group.create_ordered("Output")
    STORAGE = Group.create_ordered("Storage")
