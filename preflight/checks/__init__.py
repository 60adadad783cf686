"""Individual preflight checks, one module per stage."""

from preflight.checks.env import check_required_env
from preflight.checks.rpc import check_rpc_endpoints
from preflight.checks.schema import check_schema

__all__ = ["check_required_env", "check_rpc_endpoints", "check_schema"]
