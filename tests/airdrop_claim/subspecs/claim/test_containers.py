"""Tests for claim inputs and outputs."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from airdrop_claim.subspecs.claim import ClaimOutput, PrivateInput, PublicInput
from airdrop_claim.types import ZERO_HASH, Bytes20, Bytes32, RecordDecodeError, Uint32, Uint64


def make_private_input() -> PrivateInput:
    return PrivateInput(
        identity=Bytes20(b"\x33" * 20),
        proof=[Bytes32(b"\x01" * 32), Bytes32(b"\x02" * 32)],
        leaf_index=Uint32(2),
        epoch=Uint64(7),
    )


class TestPrivateInput:
    """Tests for the claimant's private input."""

    def test_json_uses_camel_case(self) -> None:
        """Wire field names are camelCase with hex bytes."""
        data = make_private_input().model_dump(mode="json", by_alias=True)
        assert data == {
            "identity": "0x" + "33" * 20,
            "proof": ["0x" + "01" * 32, "0x" + "02" * 32],
            "leafIndex": 2,
            "epoch": 7,
        }

    def test_json_round_trip(self) -> None:
        """Private inputs survive JSON transport."""
        private_input = make_private_input()
        restored = PrivateInput.model_validate_json(private_input.model_dump_json(by_alias=True))
        assert restored == private_input

    def test_extra_fields_rejected(self) -> None:
        """Unknown fields fail validation."""
        with pytest.raises(ValidationError):
            PrivateInput.model_validate(
                {**make_private_input().model_dump(), "nullifier": ZERO_HASH}
            )

    def test_short_identity_rejected(self) -> None:
        """Identities must be 20 bytes."""
        with pytest.raises(ValidationError):
            PrivateInput(
                identity=b"\x33" * 19,
                proof=[],
                leaf_index=Uint32(0),
                epoch=Uint64(7),
            )

    def test_immutable(self) -> None:
        """Inputs cannot be modified after creation."""
        private_input = make_private_input()
        with pytest.raises(ValidationError):
            private_input.epoch = Uint64(8)  # type: ignore[misc]


class TestPublicInput:
    """Tests for the published commitment."""

    def test_encoding(self) -> None:
        """The commitment encodes as root then little-endian epoch."""
        public_input = PublicInput(root=Bytes32(b"\xaa" * 32), epoch=Uint64(7))
        data = public_input.encode_bytes()
        assert len(data) == 40
        assert data == b"\xaa" * 32 + b"\x07" + b"\x00" * 7
        assert PublicInput.decode_bytes(data) == public_input


class TestClaimOutput:
    """Tests for the published claim record."""

    def test_encoding(self) -> None:
        """The record encodes as root, nullifier, then little-endian epoch."""
        output = ClaimOutput(
            root=Bytes32(b"\xaa" * 32),
            nullifier=Bytes32(b"\xbb" * 32),
            epoch=Uint64(258),
        )
        data = output.encode_bytes()
        assert ClaimOutput.get_byte_length() == 72
        assert data == b"\xaa" * 32 + b"\xbb" * 32 + b"\x02\x01" + b"\x00" * 6
        assert ClaimOutput.decode_bytes(data) == output

    def test_decode_truncated(self) -> None:
        """Records of the wrong width are rejected."""
        with pytest.raises(RecordDecodeError, match="ClaimOutput"):
            ClaimOutput.decode_bytes(b"\x00" * 71)

    def test_json(self) -> None:
        """The record serializes to hex and a plain epoch number."""
        output = ClaimOutput(root=ZERO_HASH, nullifier=ZERO_HASH, epoch=Uint64(7))
        assert output.model_dump(mode="json", by_alias=True) == {
            "root": "0x" + "00" * 32,
            "nullifier": "0x" + "00" * 32,
            "epoch": 7,
        }
