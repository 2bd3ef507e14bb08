"""
Binary Merkle trees over allowlist identities.

Leaves are SHA-256 hashes of 20-byte identities. Levels are reduced pairwise,
left to right; a lone node at the end of an odd level is paired with itself.
"""

from .hash import leaf_hash, pair_hash
from .proof import MerkleProof, Proof, Root, calculate_root, verify
from .tree import MerkleTree, build_merkle_tree, get_proof

__all__ = [
    "MerkleProof",
    "MerkleTree",
    "Proof",
    "Root",
    "build_merkle_tree",
    "calculate_root",
    "get_proof",
    "leaf_hash",
    "pair_hash",
    "verify",
]
