"""Merkle tree building and proof extraction."""

from __future__ import annotations

from typing import Sequence

from pydantic import Field, model_validator

from airdrop_claim.types import (
    Bytes20,
    Bytes32,
    EmptyInputError,
    IndexOutOfRangeError,
    StrictBaseModel,
)

from .hash import leaf_hash, pair_hash

Level = tuple[Bytes32, ...]
"""One layer of the tree, ordered left to right."""


def _reduce_level(level: Sequence[Bytes32]) -> Level:
    """
    Hashes adjacent pairs of a level into its parent level.

    A trailing unpaired node is hashed with itself.
    """
    parents: list[Bytes32] = []
    for i in range(0, len(level), 2):
        left = level[i]
        # Odd count: the last node is its own sibling.
        right = level[i + 1] if i + 1 < len(level) else left
        parents.append(pair_hash(left, right))
    return tuple(parents)


class MerkleTree(StrictBaseModel):
    """
    A binary hash tree over an ordered list of claimant identities.

    Every reduced level is kept, from the leaves (level 0) up to the single
    root node, so proofs can be read off without rehashing.

    This object is immutable; once built, its contents cannot be changed.
    """

    levels: tuple[Level, ...] = Field(..., description="Tree levels, leaves first, root last.")

    @model_validator(mode="after")
    def check_level_shape(self) -> MerkleTree:
        """Ensures every level is half (rounded up) of the one below, ending at one node."""
        if not self.levels or not self.levels[0]:
            raise ValueError("A Merkle tree needs at least one leaf.")
        for lower, upper in zip(self.levels, self.levels[1:]):
            if len(upper) != (len(lower) + 1) // 2:
                raise ValueError("Each level must hold half (rounded up) of the nodes below it.")
        if len(self.levels[-1]) != 1:
            raise ValueError("The top level must hold exactly one node.")
        return self

    @classmethod
    def from_leaves(cls, leaves: Sequence[Bytes32]) -> MerkleTree:
        """
        Builds a tree from already-hashed leaves.

        Raises:
            EmptyInputError: If `leaves` is empty.
        """
        if not leaves:
            raise EmptyInputError()

        levels: list[Level] = [tuple(leaves)]
        while len(levels[-1]) > 1:
            levels.append(_reduce_level(levels[-1]))
        return cls(levels=tuple(levels))

    @classmethod
    def build(cls, identities: Sequence[Bytes20]) -> MerkleTree:
        """
        Builds a tree from an ordered list of identities.

        Leaf `i` is the hash of `identities[i]`.

        Raises:
            EmptyInputError: If `identities` is empty.
            ValueError: If an identity is not exactly 20 bytes.
        """
        if not identities:
            raise EmptyInputError()
        return cls.from_leaves([leaf_hash(Bytes20(identity)) for identity in identities])

    @property
    def leaves(self) -> Level:
        """The ordered leaf hashes."""
        return self.levels[0]

    @property
    def root(self) -> Bytes32:
        """The single node summarizing the whole membership set."""
        return self.levels[-1][0]

    @property
    def depth(self) -> int:
        """Number of levels above the leaves, which is also the proof length."""
        return len(self.levels) - 1

    def __len__(self) -> int:
        """Number of leaves."""
        return len(self.leaves)

    def index_of(self, identity: Bytes20) -> int | None:
        """Returns the first leaf position holding `identity`, or None if it is not a member."""
        try:
            return self.leaves.index(leaf_hash(identity))
        except ValueError:
            return None

    def get_proof(self, index: int) -> list[Bytes32]:
        """
        Returns the authentication path for the leaf at `index`.

        The path lists one sibling per level, leaf level first. An even
        position takes its right neighbour (itself when it has none), an odd
        position takes its left neighbour.

        Raises:
            IndexOutOfRangeError: If `index` is not a leaf position.
        """
        current_index = int(index)
        if not 0 <= current_index < len(self):
            raise IndexOutOfRangeError(current_index, len(self))

        proof: list[Bytes32] = []
        for level in self.levels[:-1]:
            if current_index % 2 == 0:
                sibling_index = min(current_index + 1, len(level) - 1)
            else:
                sibling_index = current_index - 1
            proof.append(level[sibling_index])
            current_index //= 2
        return proof


def build_merkle_tree(identities: Sequence[Bytes20]) -> MerkleTree:
    """Builds a `MerkleTree` over `identities`, preserving their order."""
    return MerkleTree.build(identities)


def get_proof(tree: MerkleTree, index: int) -> list[Bytes32]:
    """Returns the authentication path for the leaf at `index` in `tree`."""
    return tree.get_proof(index)
