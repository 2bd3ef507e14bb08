"""Merkle proof verification."""

from __future__ import annotations

import operator
from typing import Any, Sequence

from pydantic import Field

from airdrop_claim.types import Bytes32, StrictBaseModel, Uint32

from .hash import pair_hash
from .tree import MerkleTree

Root = Bytes32
"""The type of a Merkle tree root."""
Proof = Sequence[Bytes32]
"""The type of a Merkle proof: sibling nodes, leaf level first."""


def calculate_root(leaf: Bytes32, proof: Proof, index: int) -> Root:
    """
    Recomputes the root implied by a leaf, its authentication path and its position.

    At each level the low bit of the position tells on which side the current
    node sits: even means left (the sibling is hashed on the right), odd means
    right.

    Raises:
        TypeError: If `index` is not an integer.
        ValueError: If a node is not 32 bytes or `index` is negative.
    """
    current_index = int(operator.index(index))
    if current_index < 0:
        raise ValueError("Leaf index must not be negative.")

    computed = Bytes32(leaf)
    for element in proof:
        sibling = Bytes32(element)
        if current_index % 2 == 0:
            computed = pair_hash(computed, sibling)
        else:
            computed = pair_hash(sibling, computed)
        current_index //= 2
    return computed


def verify(leaf: Bytes32, proof: Proof, index: int, root: Root) -> bool:
    """
    Checks that `leaf` sits at `index` in the tree committed to by `root`.

    Never raises: malformed input is reported as an invalid proof.
    """
    try:
        return calculate_root(leaf, proof, index) == root
    except (TypeError, ValueError):
        return False


class MerkleProof(StrictBaseModel):
    """
    A single-leaf membership proof, detached from the tree that produced it.

    This object is immutable; once created, its contents cannot be changed.
    """

    leaf: Bytes32 = Field(..., description="The leaf being proven.")

    index: Uint32 = Field(..., description="The leaf position in the tree.")

    branch: list[Bytes32] = Field(..., description="Sibling nodes, leaf level first.")

    @classmethod
    def from_tree(cls, tree: MerkleTree, index: int) -> MerkleProof:
        """
        Extracts the proof for the leaf at `index`.

        Raises:
            IndexOutOfRangeError: If `index` is not a leaf position.
        """
        branch = tree.get_proof(index)
        return cls(leaf=tree.leaves[int(index)], index=Uint32(index), branch=branch)

    def calculate_root(self) -> Root:
        """Recomputes the root from the proof's leaf and branch."""
        return calculate_root(self.leaf, self.branch, self.index)

    def verify(self, root: Any) -> bool:
        """Verifies the proof against a known root."""
        return verify(self.leaf, self.branch, self.index, root)
