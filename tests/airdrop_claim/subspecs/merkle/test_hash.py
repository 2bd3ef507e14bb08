"""Tests for the leaf and pair hash primitives."""

import hashlib

from airdrop_claim.subspecs.merkle import leaf_hash, pair_hash
from airdrop_claim.types import Bytes20, Bytes32


def test_leaf_hash_is_sha256_of_identity() -> None:
    """A leaf is SHA-256 over the 20 identity bytes."""
    identity = Bytes20(b"\x11" * 20)
    assert leaf_hash(identity) == hashlib.sha256(b"\x11" * 20).digest()
    assert isinstance(leaf_hash(identity), Bytes32)


def test_pair_hash_is_sha256_of_concatenation() -> None:
    """A parent is SHA-256 over left then right."""
    left, right = Bytes32(b"\x01" * 32), Bytes32(b"\x02" * 32)
    assert pair_hash(left, right) == hashlib.sha256(b"\x01" * 32 + b"\x02" * 32).digest()


def test_pair_hash_is_order_sensitive() -> None:
    """Swapping children changes the parent."""
    left, right = Bytes32(b"\x01" * 32), Bytes32(b"\x02" * 32)
    assert pair_hash(left, right) != pair_hash(right, left)


def test_distinct_identities_give_distinct_leaves() -> None:
    """Different identities hash to different leaves."""
    assert leaf_hash(Bytes20(b"\x01" * 20)) != leaf_hash(Bytes20(b"\x02" * 20))
