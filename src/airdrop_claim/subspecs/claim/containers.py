"""
Claim inputs and outputs.

A claim crosses two trust boundaries:

- The claimant's private input: who they are, where they sit in the tree
  and the path proving it. Never published.
- The public input: the committed root and the current epoch. Agreed by
  everyone ahead of time.

Verification turns both into a claim output, the only record that is
published. Downstream ledgers treat it as append-only evidence.
"""

from __future__ import annotations

from pydantic import Field

from airdrop_claim.types import Bytes20, Bytes32, FixedRecord, StrictBaseModel, Uint32, Uint64


class PrivateInput(StrictBaseModel):
    """What the claimant knows and keeps to themselves."""

    identity: Bytes20 = Field(..., description="The claimant's account address.")

    proof: list[Bytes32] = Field(..., description="Authentication path, leaf level first.")

    leaf_index: Uint32 = Field(..., description="Position of the claimant's leaf in the tree.")

    epoch: Uint64 = Field(..., description="Distribution round being claimed.")


class PublicInput(FixedRecord):
    """
    The published commitment a claim is checked against.

    Encodes to 40 bytes: root, then the epoch as little-endian uint64.
    """

    root: Bytes32
    """Root of the allowlist tree."""

    epoch: Uint64
    """Current distribution round."""


class ClaimOutput(FixedRecord):
    """
    The verified claim record.

    Encodes to 72 bytes: root, nullifier, then the epoch as little-endian uint64.
    """

    root: Bytes32
    """Root the membership proof was checked against."""

    nullifier: Bytes32
    """Per-(identity, epoch) tag for double-claim detection."""

    epoch: Uint64
    """Distribution round the claim belongs to."""
