# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Builds the fixed load-test scenario for a compression mode."""

from urllib.parse import quote

from loadtester.common.constants import (
    APP_USER_AGENT,
    COMPRESSED_ENCODINGS,
    REQUEST_TIMEOUT_SECONDS,
)
from loadtester.scenario.models import (
    ClientSetup,
    NamedRequest,
    ScenarioDefinition,
    WorkloadBehavior,
)

__all__ = [
    "COMPRESSED_SCENARIO_NAME",
    "UNCOMPRESSED_SCENARIO_NAME",
    "build_client_setup",
    "build_scenario",
    "build_workload_behaviors",
]

COMPRESSED_SCENARIO_NAME = "WithCompression"
UNCOMPRESSED_SCENARIO_NAME = "NoCompression"

SHORT_NAME = "cool gal"
# Long enough that the response body benefits from compression.
LONG_NAME = "a" * 999
LINE_COUNT = 10_000
EASY_POWER_SUM_N = 1_000
HARD_POWER_SUM_N = 10_000_000


def build_client_setup(compressed: bool) -> ClientSetup:
    """Transport settings applied once per simulated client.

    With compression both gzip and brotli are offered; without it the client
    asks for the identity encoding only.
    """
    return ClientSetup(
        user_agent=APP_USER_AGENT,
        cookie_store=True,
        timeout_seconds=REQUEST_TIMEOUT_SECONDS,
        accept_encodings=COMPRESSED_ENCODINGS if compressed else (),
    )


def build_workload_behaviors(
    *,
    short_name: str = SHORT_NAME,
    long_name: str = LONG_NAME,
    line_count: int = LINE_COUNT,
    easy_n: int = EASY_POWER_SUM_N,
    hard_n: int = HARD_POWER_SUM_N,
) -> tuple[WorkloadBehavior, ...]:
    """The strings, static and math workloads, in registration order."""
    strings = WorkloadBehavior(
        name="strings",
        requests=(
            NamedRequest(path="/strings/hello", name="hello"),
            NamedRequest(
                path=f"/strings/hello?name={quote(short_name)}", name="hello-param"
            ),
            NamedRequest(
                path=f"/strings/hello?name={quote(long_name)}",
                name="hello-compressed",
            ),
            NamedRequest(path="/strings/async-hello", name="async-hello"),
            NamedRequest(path=f"/strings/lines?n={line_count}", name="lines"),
        ),
    )
    static = WorkloadBehavior(
        name="static",
        requests=(
            NamedRequest(path="/static/basic.html", name="basic-html"),
            NamedRequest(path="/static/scout.webp", name="scout-img"),
        ),
    )
    math = WorkloadBehavior(
        name="math",
        requests=(
            NamedRequest(
                path=f"/math/power-reciprocals-alt?n={easy_n}", name="power-sum-easy"
            ),
            NamedRequest(
                path=f"/math/power-reciprocals-alt?n={hard_n}", name="power-sum-hard"
            ),
        ),
    )
    return (strings, static, math)


def build_scenario(compressed: bool) -> ScenarioDefinition:
    """Return the scenario for the given compression mode.

    Only the setup behavior differs between modes; the workload is identical.
    """
    return ScenarioDefinition(
        name=COMPRESSED_SCENARIO_NAME if compressed else UNCOMPRESSED_SCENARIO_NAME,
        setup=build_client_setup(compressed),
        behaviors=build_workload_behaviors(),
    )
