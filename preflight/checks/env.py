"""Required environment variable check."""

from __future__ import annotations

from collections.abc import Sequence

from preflight.core.config import REQUIRED_KEYS, Config
from preflight.core.exceptions import MissingConfig


def check_required_env(config: Config, required_keys: Sequence[str] = REQUIRED_KEYS) -> str:
    """Raise MissingConfig for the first required key without a value."""
    for name in required_keys:
        if not config.value(name):
            raise MissingConfig(name)
    return "Required environment variables are set."
