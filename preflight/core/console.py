"""Human-readable report lines printed while the checks run."""

from __future__ import annotations

import sys

from preflight.core.exceptions import PreflightError


def ok(detail: str) -> None:
    print(f"[OK] {detail}")


def warn(detail: str) -> None:
    print(f"[WARN] {detail}", file=sys.stderr)


def error(exc: PreflightError) -> None:
    print(f"\n[ERROR {int(exc.exit_code)}] {exc.message}", file=sys.stderr)
    if exc.suggestion:
        print(f"Suggestion: {exc.suggestion}", file=sys.stderr)


def success() -> None:
    print("\n[PRECHECK SUCCESS] Your environment is ready!")
