"""Allowlist configuration for an airdrop round."""

from .config import AllowlistConfig

__all__ = ["AllowlistConfig"]
