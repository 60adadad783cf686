"""Configuration module for the preflight checker."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from preflight.core.exceptions import ConfigurationError

DEFAULT_SCHEMA_PATH = "./prisma/schema.prisma"
DEFAULT_GENERATE_COMMAND = "npx prisma generate"

REQUIRED_KEYS: tuple[str, ...] = (
    "DATABASE_URL",
    "NEXT_PUBLIC_SOLANA_RPC_MAINNET",
)

RPC_CANDIDATE_KEYS: tuple[str, ...] = (
    "NEXT_PUBLIC_SOLANA_RPC_MAINNET",
    "NEXT_PUBLIC_SOLANA_RPC_MAINNET_FALLBACK_1",
    "NEXT_PUBLIC_SOLANA_RPC_MAINNET_FALLBACK_2",
)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class Config:
    """Read-only snapshot of the environment the checks run against."""

    DATABASE_URL: str | None
    NEXT_PUBLIC_SOLANA_RPC_MAINNET: str | None
    NEXT_PUBLIC_SOLANA_RPC_MAINNET_FALLBACK_1: str | None
    NEXT_PUBLIC_SOLANA_RPC_MAINNET_FALLBACK_2: str | None
    PRISMA_SCHEMA_PATH: str | None
    PRISMA_GENERATE_COMMAND: str
    DATABASE_CONNECT_TIMEOUT_SECONDS: int
    LOG_LEVEL: str
    LOG_FILE: str | None

    def value(self, name: str) -> str | None:
        """Return the snapshot value for an environment variable name."""
        if name not in {item.name for item in fields(self)}:
            raise KeyError(name)
        value = getattr(self, name)
        return None if value is None else str(value)


def build_config(environ: Mapping[str, str]) -> Config:
    """Build and validate a configuration snapshot from an environment mapping."""
    timeout_raw = _clean(environ.get("DATABASE_CONNECT_TIMEOUT_SECONDS")) or "10"
    try:
        connect_timeout = int(timeout_raw)
    except ValueError as exc:
        raise ConfigurationError(
            "DATABASE_CONNECT_TIMEOUT_SECONDS must be an integer.",
            "Set DATABASE_CONNECT_TIMEOUT_SECONDS to a whole number of seconds.",
        ) from exc

    config = Config(
        DATABASE_URL=_clean(environ.get("DATABASE_URL")),
        NEXT_PUBLIC_SOLANA_RPC_MAINNET=_clean(environ.get("NEXT_PUBLIC_SOLANA_RPC_MAINNET")),
        NEXT_PUBLIC_SOLANA_RPC_MAINNET_FALLBACK_1=_clean(
            environ.get("NEXT_PUBLIC_SOLANA_RPC_MAINNET_FALLBACK_1")
        ),
        NEXT_PUBLIC_SOLANA_RPC_MAINNET_FALLBACK_2=_clean(
            environ.get("NEXT_PUBLIC_SOLANA_RPC_MAINNET_FALLBACK_2")
        ),
        PRISMA_SCHEMA_PATH=_clean(environ.get("PRISMA_SCHEMA_PATH")),
        PRISMA_GENERATE_COMMAND=_clean(environ.get("PRISMA_GENERATE_COMMAND")) or DEFAULT_GENERATE_COMMAND,
        DATABASE_CONNECT_TIMEOUT_SECONDS=connect_timeout,
        LOG_LEVEL=(_clean(environ.get("LOG_LEVEL")) or "ERROR").upper(),
        LOG_FILE=_clean(environ.get("LOG_FILE")),
    )
    _validate_config(config)
    return config


def _validate_config(config: Config) -> None:
    if config.DATABASE_CONNECT_TIMEOUT_SECONDS < 1:
        raise ConfigurationError(
            "DATABASE_CONNECT_TIMEOUT_SECONDS must be >= 1.",
            "Set DATABASE_CONNECT_TIMEOUT_SECONDS to a positive number of seconds.",
        )
    if config.LOG_LEVEL not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        raise ConfigurationError(
            "LOG_LEVEL must be one of DEBUG/INFO/WARNING/ERROR/CRITICAL.",
            "Fix or remove LOG_LEVEL in your .env file.",
        )
    if config.LOG_FILE and not Path(config.LOG_FILE).resolve().parent.is_dir():
        raise ConfigurationError(
            f"LOG_FILE directory does not exist: {Path(config.LOG_FILE).parent}",
            "Create the directory or point LOG_FILE at an existing location.",
        )


@lru_cache(maxsize=8)
def get_config(env_file: str | None = None) -> Config:
    """Load the env file into the process environment and snapshot it once.

    Variables already present in the process environment take precedence
    over the file.
    """
    load_dotenv(env_file or ".env", override=False)
    return build_config(dict(os.environ))
