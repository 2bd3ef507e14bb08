"""Hash primitives for allowlist trees."""

import hashlib

from airdrop_claim.types import Bytes20, Bytes32


def leaf_hash(identity: Bytes20) -> Bytes32:
    """Hashes a claimant identity into a tree leaf using SHA-256."""
    return Bytes32(hashlib.sha256(identity).digest())


def pair_hash(left: Bytes32, right: Bytes32) -> Bytes32:
    """
    Hashes two 32-byte nodes together using SHA-256.

    The order of the arguments matters: `pair_hash(a, b)` and `pair_hash(b, a)`
    are different nodes.
    """
    return Bytes32(hashlib.sha256(left + right).digest())
