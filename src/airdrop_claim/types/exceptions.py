"""Exception hierarchy for allowlist trees and claim verification."""

from __future__ import annotations


class ClaimError(Exception):
    """
    Base exception for all claim-related errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class EmptyInputError(ClaimError):
    """Raised when a tree is built from an empty member list."""

    def __init__(self, message: str = "Cannot build a Merkle tree from an empty list") -> None:
        super().__init__(message)


class IndexOutOfRangeError(ClaimError):
    """
    Raised when a proof is requested for a position the tree does not hold.

    Attributes:
        index: The requested leaf position.
        leaf_count: Number of leaves in the tree.
    """

    def __init__(self, index: int, leaf_count: int) -> None:
        self.index = index
        self.leaf_count = leaf_count
        super().__init__(f"Leaf index {index} is out of range for a tree of {leaf_count} leaves")


class ClaimRejectedError(ClaimError):
    """
    Raised when a claim does not pass verification.

    Boundaries that must not reveal why a claim failed raise this class
    directly; the subclasses below carry the specific reason.
    """

    def __init__(self, message: str = "claim rejected") -> None:
        super().__init__(message)


class InvalidProofError(ClaimRejectedError):
    """Raised when a membership proof does not recompute the committed root."""

    def __init__(self, message: str = "Invalid Merkle proof") -> None:
        super().__init__(message)


class EpochMismatchError(ClaimRejectedError):
    """
    Raised when the claimed epoch differs from the published one.

    Attributes:
        private_epoch: Epoch supplied by the claimant.
        public_epoch: Epoch agreed in the public input.
    """

    def __init__(self, private_epoch: int, public_epoch: int) -> None:
        self.private_epoch = private_epoch
        self.public_epoch = public_epoch
        super().__init__(f"Epoch mismatch: claimed {private_epoch}, expected {public_epoch}")


class RecordDecodeError(ClaimError):
    """
    Raised when a fixed-size record cannot be decoded from bytes.

    Attributes:
        type_name: The record type being decoded.
        expected: Number of bytes the record occupies.
        actual: Number of bytes received.
    """

    def __init__(self, type_name: str, *, expected: int, actual: int) -> None:
        self.type_name = type_name
        self.expected = expected
        self.actual = actual
        super().__init__(f"Failed to decode {type_name}: expected {expected} bytes, got {actual}")
