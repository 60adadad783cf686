"""Solana RPC health probing with fallback rotation."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

import requests

from preflight.core import console
from preflight.core.config import RPC_CANDIDATE_KEYS, Config
from preflight.core.exceptions import NoHealthyEndpoint

logger = logging.getLogger(__name__)

HEALTH_PAYLOAD = {"jsonrpc": "2.0", "id": 1, "method": "getHealth"}
PROBE_TIMEOUT_SECONDS = 7


def build_rpc_candidates(config: Config) -> list[str]:
    """Primary first, then fallbacks, skipping unset slots."""
    candidates = []
    for name in RPC_CANDIDATE_KEYS:
        url = config.value(name)
        if url:
            candidates.append(url)
    return candidates


def probe_endpoint(url: str) -> bool:
    response = requests.post(
        url,
        json=HEALTH_PAYLOAD,
        headers={"Content-Type": "application/json"},
        timeout=PROBE_TIMEOUT_SECONDS,
    )
    if not 200 <= response.status_code < 300:
        return False
    body = response.json()
    return isinstance(body, dict) and body.get("result") == "ok"


def _attempt(probe: Callable[[str], bool], url: str) -> bool:
    try:
        return probe(url)
    except (requests.exceptions.RequestException, ValueError) as exc:
        logger.debug(
            "rpc.probe.error",
            extra={"event": "rpc.probe.error", "candidate": url, "error": str(exc)},
        )
        return False


def first_healthy(candidates: Iterable[str], probe: Callable[[str], bool] = probe_endpoint) -> str:
    """Probe candidates one at a time and return the first healthy one.

    A failing candidate never aborts the rotation; it is reported and skipped.
    """
    tried = []
    for url in candidates:
        tried.append(url)
        if _attempt(probe, url):
            logger.info(
                "rpc.probe.healthy",
                extra={"event": "rpc.probe.healthy", "candidate": url},
            )
            return url
        logger.warning(
            "rpc.probe.unhealthy",
            extra={"event": "rpc.probe.unhealthy", "candidate": url},
        )
        console.warn(f"Could not connect to Solana RPC: {url}")
    raise NoHealthyEndpoint(tried)


def check_rpc_endpoints(config: Config) -> str:
    """Pipeline step: at least one configured RPC endpoint must be healthy."""
    url = first_healthy(build_rpc_candidates(config))
    return f"Connected to Solana RPC: {url}"
