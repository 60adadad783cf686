"""Deployment preflight checks: config, database, Prisma schema and Solana RPC."""

__version__ = "1.0.0"
