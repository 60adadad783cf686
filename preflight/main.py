"""Command-line entrypoint for the preflight checker."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from preflight.core.startup import bootstrap


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="preflight",
        description="Check that the deployment environment is ready before starting the app.",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Path to the env file merged under the process environment (default: .env).",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return bootstrap(args.env_file)


if __name__ == "__main__":
    sys.exit(main())
