"""
Merkle Tree Operations

This package provides the keccak-256 merkle tree used for address whitelists.

The module is organized into four components:
- hashing: Leaf and pair hashing
- layout: Index arithmetic over the flat node array
- tree: Tree building and read access
- proof: Proof generation and verification
"""

# Hashing
from .hashing import (
    keccak256,
    hash_leaf,
    hash_pair,
)

# Layout utilities
from .layout import (
    next_power_of_two,
    internal_node_count,
    parent_index,
    sibling_index,
    is_left_child,
    get_proof_indices,
)

# Tree building
from .tree import (
    MerkleTree,
    build_upper_level,
    build_internal_nodes,
)

# Proof generation and verification
from .proof import (
    MerkleProof,
    find_leaf_index,
    get_proof,
    compute_root_from_proof,
    verify_merkle_proof,
    batch_verify_proofs,
)

__all__ = [
    # Hashing
    "keccak256",
    "hash_leaf",
    "hash_pair",
    # Layout
    "next_power_of_two",
    "internal_node_count",
    "parent_index",
    "sibling_index",
    "is_left_child",
    "get_proof_indices",
    # Tree
    "MerkleTree",
    "build_upper_level",
    "build_internal_nodes",
    # Proofs
    "MerkleProof",
    "find_leaf_index",
    "get_proof",
    "compute_root_from_proof",
    "verify_merkle_proof",
    "batch_verify_proofs",
]
