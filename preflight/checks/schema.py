"""Prisma schema presence and client generation."""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path

from preflight.core.config import DEFAULT_SCHEMA_PATH, Config
from preflight.core.exceptions import SchemaFileMissing, SchemaGenerationFailed

logger = logging.getLogger(__name__)


def resolve_schema_path(config: Config) -> Path:
    return Path(config.PRISMA_SCHEMA_PATH or DEFAULT_SCHEMA_PATH)


def ensure_schema_file(path: Path) -> None:
    if not path.is_file():
        logger.debug(
            "schema.file_missing",
            extra={"event": "schema.file_missing", "schema_path": str(path)},
        )
        raise SchemaFileMissing(str(path))


def generate_schema_client(command: str) -> None:
    """Run the generator to completion with its output discarded."""
    try:
        completed = subprocess.run(
            shlex.split(command),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as exc:
        logger.debug(
            "schema.generate_not_started",
            extra={"event": "schema.generate_not_started", "command": command, "error": str(exc)},
        )
        raise SchemaGenerationFailed(command) from exc

    if completed.returncode != 0:
        logger.debug(
            "schema.generate_failed",
            extra={
                "event": "schema.generate_failed",
                "command": command,
                "returncode": completed.returncode,
            },
        )
        raise SchemaGenerationFailed(command)


def check_schema(config: Config) -> str:
    """Pipeline step: the schema must exist before the generator is invoked."""
    ensure_schema_file(resolve_schema_path(config))
    generate_schema_client(config.PRISMA_GENERATE_COMMAND)
    return "Prisma schema is valid and client generated."
