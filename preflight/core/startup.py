"""Preflight pipeline runner and bootstrap helpers."""

from __future__ import annotations

import logging
from collections.abc import Callable

from preflight.checks.env import check_required_env
from preflight.checks.rpc import check_rpc_endpoints
from preflight.checks.schema import check_schema
from preflight.core import console
from preflight.core.config import Config, get_config
from preflight.core.exceptions import ExitCode, PreflightError
from preflight.core.logging_config import configure_logging
from preflight.database.db import check_database

logger = logging.getLogger(__name__)

Step = Callable[[Config], str]


def pipeline() -> list[tuple[str, Step]]:
    """Stages in the order they gate each other."""
    return [
        ("environment", check_required_env),
        ("database", check_database),
        ("schema", check_schema),
        ("rpc", check_rpc_endpoints),
    ]


def run_preflight(config: Config) -> int:
    """Run every stage in order and stop at the first failure."""
    for stage, step in pipeline():
        try:
            detail = step(config)
        except PreflightError as exc:
            logger.error(
                "preflight.failed",
                extra={"event": "preflight.failed", "stage": stage, "exit_code": int(exc.exit_code)},
            )
            console.error(exc)
            return int(exc.exit_code)
        logger.info(
            "preflight.stage.ok",
            extra={"event": "preflight.stage.ok", "stage": stage},
        )
        console.ok(detail)

    console.success()
    return int(ExitCode.OK)


def bootstrap(env_file: str | None = None) -> int:
    """Load configuration, initialize logging and run the checks."""
    try:
        config = get_config(env_file)
        configure_logging(config)
    except PreflightError as exc:
        console.error(exc)
        return int(exc.exit_code)
    return run_preflight(config)
