# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Child-process entry point that runs one campaign with Locust.

Usage:
    python -m loadtester.engine.locust_worker <campaign_config.json>

Exits 0 once the report and request log are written, 1 on any failure.
"""

import logging
import sys
from http.cookiejar import DefaultCookiePolicy
from pathlib import Path

import gevent
from locust import HttpUser, SequentialTaskSet, constant
from locust.env import Environment
from locust.html import get_html_report
from locust.log import setup_logging
from locust.stats import stats_history, stats_printer

from loadtester.campaign.models import CampaignConfig
from loadtester.engine.request_log import RequestLogWriter
from loadtester.scenario.models import ClientSetup, ScenarioDefinition, WorkloadBehavior

logger = logging.getLogger(__name__)


def _behavior_task(behavior: WorkloadBehavior, timeout: float):
    def run_behavior(taskset) -> None:
        for request in behavior.requests:
            taskset.client.get(request.path, name=request.name, timeout=timeout)

    run_behavior.__name__ = behavior.name
    return run_behavior


def _configure_client(setup: ClientSetup):
    def on_start(user) -> None:
        user.client.headers["User-Agent"] = setup.user_agent
        user.client.headers["Accept-Encoding"] = setup.accept_encoding_header
        if not setup.cookie_store:
            user.client.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))

    return on_start


def build_user_class(scenario: ScenarioDefinition, host: str) -> type[HttpUser]:
    """Materialize a scenario as a Locust user class.

    The setup behavior becomes ``on_start``; the workload behaviors run in
    registration order, back to back, for as long as the campaign lasts.
    """
    timeout = scenario.setup.timeout_seconds
    workload = type(
        f"{scenario.name}Workload",
        (SequentialTaskSet,),
        {"tasks": [_behavior_task(b, timeout) for b in scenario.behaviors]},
    )
    return type(
        scenario.name,
        (HttpUser,),
        {
            "host": host,
            "wait_time": constant(0),
            "tasks": [workload],
            "on_start": _configure_client(scenario.setup),
        },
    )


def run_campaign(config: CampaignConfig) -> None:
    """Ramp up, hold steady, stop, then write the HTML report."""
    user_class = build_user_class(config.scenario, config.host)
    # Statistics restart once every user is hatched; the request log keeps the ramp.
    env = Environment(user_classes=[user_class], host=config.host, reset_stats=True)

    with RequestLogWriter(config.request_log) as request_log:
        env.events.request.add_listener(request_log.on_request)
        runner = env.create_local_runner()
        gevent.spawn(stats_printer(env.stats))
        gevent.spawn(stats_history, runner)

        logger.info(
            f"Hatching {config.users} users at {config.spawn_rate:.2f}/s against "
            f"{config.host} for {config.ramp_seconds}s + {config.steady_seconds}s"
        )
        runner.start(config.users, spawn_rate=config.spawn_rate)
        gevent.spawn_later(config.total_seconds, runner.quit)
        runner.greenlet.join()

        logger.info(f"Logged {request_log.rows_written} requests to {config.request_log}")

    Path(config.report_file).write_text(
        get_html_report(env, show_download_link=False), encoding="utf-8"
    )
    logger.info(f"Wrote report to {config.report_file}")


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("usage: python -m loadtester.engine.locust_worker <campaign_config.json>", file=sys.stderr)
        return 2

    setup_logging("INFO")
    try:
        config = CampaignConfig.model_validate_json(Path(args[0]).read_bytes())
        run_campaign(config)
    except Exception:
        logger.exception("Load campaign failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
