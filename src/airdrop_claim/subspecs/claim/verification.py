"""Claim verification."""

from __future__ import annotations

from airdrop_claim.subspecs.merkle import leaf_hash, verify
from airdrop_claim.types import EpochMismatchError, InvalidProofError, Uint64

from .containers import ClaimOutput, PrivateInput, PublicInput
from .nullifier import compute_nullifier


def verify_claim(private_input: PrivateInput, public_input: PublicInput) -> ClaimOutput:
    """
    Checks a claim and produces the record to publish.

    Steps, in order:

    1. Hash the claimant's identity into its leaf.
    2. Check the leaf's path against the committed root.
    3. Check that the claim targets the published epoch.
    4. Derive the nullifier for (identity, epoch).

    The function reads nothing but its arguments and writes nothing.
    Whether the nullifier was already spent is for the ledger to decide.

    Raises:
        InvalidProofError: If the path does not lead to `public_input.root`.
        EpochMismatchError: If the claimed epoch is not the published one.
    """
    leaf = leaf_hash(private_input.identity)

    if not verify(leaf, private_input.proof, private_input.leaf_index, public_input.root):
        raise InvalidProofError()

    if int(private_input.epoch) != int(public_input.epoch):
        raise EpochMismatchError(int(private_input.epoch), int(public_input.epoch))

    nullifier = compute_nullifier(private_input.identity, private_input.epoch)

    return ClaimOutput(
        root=public_input.root,
        nullifier=nullifier,
        epoch=Uint64(public_input.epoch),
    )
