"""Claim derivation: nullifiers and the top-level verification entry point."""

from .containers import ClaimOutput, PrivateInput, PublicInput
from .nullifier import compute_nullifier
from .verification import verify_claim

__all__ = [
    "ClaimOutput",
    "PrivateInput",
    "PublicInput",
    "compute_nullifier",
    "verify_claim",
]
