"""
Distributor service that hosts an allowlist round.

The Host Problem
----------------
The claim verifier only ever sees a root, an epoch and one claimant's path.
Someone has to hold the full member list, build the tree, publish its root
and hand each member the path proving their membership.

Distributor is that host. It owns the tree for one round and wraps claim
verification with logging and metrics.

Rejections
----------
A rejected claim is reported to callers as a bare `ClaimRejectedError`.
Whether the proof was wrong or the epoch was stale is not disclosed: telling a
prober which check failed leaks information about the allowlist.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from airdrop_claim.subspecs.allowlist import AllowlistConfig
from airdrop_claim.subspecs.claim import ClaimOutput, PrivateInput, PublicInput, verify_claim
from airdrop_claim.subspecs.merkle import MerkleTree, leaf_hash
from airdrop_claim.subspecs.metrics import (
    allowlist_members,
    claims_rejected,
    claims_verified,
    proofs_generated,
    tree_build_time,
)
from airdrop_claim.types import Bytes20, Bytes32, ClaimRejectedError, Uint32, Uint64

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Distributor:
    """
    Holds the allowlist tree for one distribution round.

    Instances are immutable and may be shared between threads.
    """

    tree: MerkleTree
    """Tree over the round's members, in allowlist order."""

    epoch: Uint64
    """Distribution round the tree is published for."""

    positions: dict[Bytes32, int] = field(init=False, repr=False, compare=False)
    """Leaf hash to its first position in the tree, built once per round."""

    def __post_init__(self) -> None:
        positions: dict[Bytes32, int] = {}
        for index, leaf in enumerate(self.tree.leaves):
            positions.setdefault(leaf, index)
        object.__setattr__(self, "positions", positions)

    @classmethod
    def from_config(cls, config: AllowlistConfig) -> Distributor:
        """Build the tree for an allowlist and record its size and build time."""
        start = time.perf_counter()
        tree = MerkleTree.build(config.members)
        tree_build_time.observe(time.perf_counter() - start)
        allowlist_members.set(len(tree))

        logger.info(
            "Allowlist tree built: epoch=%d, members=%d, depth=%d, root=0x%s",
            config.epoch,
            len(tree),
            tree.depth,
            tree.root.hex(),
        )
        return cls(tree=tree, epoch=config.epoch)

    @property
    def root(self) -> Bytes32:
        """Root to publish as the round's commitment."""
        return self.tree.root

    def public_input(self) -> PublicInput:
        """The commitment claims for this round are checked against."""
        return PublicInput(root=self.tree.root, epoch=self.epoch)

    def prepare_claim(self, identity: Bytes20, epoch: Uint64 | None = None) -> PrivateInput:
        """
        Assemble the private input a member needs to claim.

        Args:
            identity: The member's address.
            epoch: Round to claim for. Defaults to the distributor's epoch.

        Raises:
            ClaimRejectedError: If `identity` is not on the allowlist.
        """
        identity = Bytes20(identity)
        index = self.positions.get(leaf_hash(identity))
        if index is None:
            logger.debug("Proof requested for non-member 0x%s", identity.hex())
            raise ClaimRejectedError()

        proof = self.tree.get_proof(index)
        proofs_generated.inc()
        logger.debug("Proof generated for leaf %d (%d siblings)", index, len(proof))

        return PrivateInput(
            identity=identity,
            proof=proof,
            leaf_index=Uint32(index),
            epoch=self.epoch if epoch is None else Uint64(epoch),
        )

    def submit(
        self, private_input: PrivateInput, public_input: PublicInput | None = None
    ) -> ClaimOutput:
        """
        Verify a claim against this round's commitment.

        Args:
            private_input: The claimant's identity, position, path and epoch.
            public_input: Commitment to check against. Defaults to this
                distributor's own public input.

        Returns:
            The claim record to publish.

        Raises:
            ClaimRejectedError: If the claim fails verification for any reason.
        """
        if public_input is None:
            public_input = self.public_input()

        try:
            output = verify_claim(private_input, public_input)
        except ClaimRejectedError:
            claims_rejected.inc()
            logger.info("Claim rejected for epoch %d", public_input.epoch)
            raise ClaimRejectedError() from None

        claims_verified.inc()
        logger.info(
            "Claim verified: epoch=%d, nullifier=0x%s",
            output.epoch,
            output.nullifier.hex(),
        )
        return output
