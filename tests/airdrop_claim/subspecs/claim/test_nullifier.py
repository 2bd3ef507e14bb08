"""Tests for nullifier derivation."""

import hashlib

from hypothesis import given
from hypothesis import strategies as st

from airdrop_claim.subspecs.claim import compute_nullifier
from airdrop_claim.types import Bytes20, Bytes32, Uint64

IDENTITY = Bytes20(b"\x33" * 20)


def test_matches_sha256_of_identity_and_epoch() -> None:
    """The nullifier is SHA-256 over identity then the little-endian epoch."""
    expected = hashlib.sha256(b"\x33" * 20 + b"\x07\x00\x00\x00\x00\x00\x00\x00").digest()
    nullifier = compute_nullifier(IDENTITY, Uint64(7))
    assert nullifier == expected
    assert isinstance(nullifier, Bytes32)


def test_deterministic() -> None:
    """The same pair always yields the same nullifier."""
    assert compute_nullifier(IDENTITY, Uint64(7)) == compute_nullifier(IDENTITY, Uint64(7))


def test_epoch_changes_nullifier() -> None:
    """A new round gives the same member a fresh nullifier."""
    assert compute_nullifier(IDENTITY, Uint64(7)) != compute_nullifier(IDENTITY, Uint64(8))


def test_identity_changes_nullifier() -> None:
    """Different members never share a nullifier for the same round."""
    other = Bytes20(b"\x44" * 20)
    assert compute_nullifier(IDENTITY, Uint64(7)) != compute_nullifier(other, Uint64(7))


def test_max_epoch() -> None:
    """The full uint64 range is accepted."""
    expected = hashlib.sha256(b"\x33" * 20 + b"\xff" * 8).digest()
    assert compute_nullifier(IDENTITY, Uint64(2**64 - 1)) == expected


@given(
    identity=st.binary(min_size=20, max_size=20),
    epoch=st.integers(min_value=0, max_value=2**64 - 1),
)
def test_covers_identity_and_epoch_bytes(identity: bytes, epoch: int) -> None:
    """The preimage is exactly the 28 bytes of identity and epoch."""
    preimage = identity + epoch.to_bytes(8, "little")
    assert compute_nullifier(Bytes20(identity), Uint64(epoch)) == hashlib.sha256(preimage).digest()
