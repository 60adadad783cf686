"""Custom exceptions for the preflight checker."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit status, one per failure class."""

    OK = 0
    MISSING_CONFIG = 1
    DATABASE_UNREACHABLE = 2
    SCHEMA_FILE_MISSING = 3
    SCHEMA_GENERATION_FAILED = 4
    NO_HEALTHY_ENDPOINT = 5


class PreflightError(Exception):
    """Base exception for a failed preflight stage."""

    exit_code: ExitCode

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion


class ConfigurationError(PreflightError):
    """Raised when configuration is invalid."""

    exit_code = ExitCode.MISSING_CONFIG


class MissingConfig(ConfigurationError):
    """Raised when a required environment variable is absent or blank."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Missing environment variable: {name}",
            f"Define {name} in your .env file (see .env.example)",
        )
        self.name = name


class DatabaseUnreachable(PreflightError):
    """Raised when the database cannot be connected to."""

    exit_code = ExitCode.DATABASE_UNREACHABLE

    def __init__(self) -> None:
        super().__init__(
            "Could not connect to PostgreSQL (DATABASE_URL).",
            "Check your DATABASE_URL or if your database is running and accessible.",
        )


class SchemaFileMissing(PreflightError):
    """Raised when the Prisma schema file does not exist."""

    exit_code = ExitCode.SCHEMA_FILE_MISSING

    def __init__(self, path: str) -> None:
        super().__init__(
            f"Prisma schema file not found at {path}.",
            "Make sure your Prisma schema exists and PRISMA_SCHEMA_PATH is correct.",
        )
        self.path = path


class SchemaGenerationFailed(PreflightError):
    """Raised when the schema generation command does not succeed."""

    exit_code = ExitCode.SCHEMA_GENERATION_FAILED

    def __init__(self, command: str) -> None:
        super().__init__(
            "Prisma generation failed.",
            f"Check your schema for errors and run `{command}` manually for details.",
        )
        self.command = command


class NoHealthyEndpoint(PreflightError):
    """Raised when every RPC candidate failed its health check."""

    exit_code = ExitCode.NO_HEALTHY_ENDPOINT

    def __init__(self, candidates: list[str] | None = None) -> None:
        super().__init__(
            "Could not connect to any Solana mainnet RPC endpoint.",
            "Check your RPC URLs, firewall/internet connection, and try alternatives.",
        )
        self.candidates = list(candidates or [])
