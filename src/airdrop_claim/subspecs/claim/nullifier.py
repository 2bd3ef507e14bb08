"""Nullifier derivation."""

import hashlib

from airdrop_claim.types import Bytes20, Bytes32, Uint64


def compute_nullifier(identity: Bytes20, epoch: Uint64) -> Bytes32:
    """
    Derives the nullifier binding `identity` to `epoch`.

    The digest covers the identity followed by the epoch as an 8-byte
    little-endian integer. The same pair always yields the same nullifier,
    so a ledger keyed on it sees a repeat claim as a collision.
    """
    return Bytes32(hashlib.sha256(identity + Uint64(epoch).encode_bytes()).digest())
