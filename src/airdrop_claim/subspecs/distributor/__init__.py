"""Allowlist host: builds the tree, hands out proofs and verifies claims."""

from .service import Distributor

__all__ = ["Distributor"]
