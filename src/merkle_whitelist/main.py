"""
Merkle Whitelist - Main proof generation module

Convenience functions that build a tree from a list of values and return a
root or a membership proof in one call.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from .exceptions import InvalidInputError
from .merkle import MerkleTree, get_proof, hash_leaf

logger = logging.getLogger(__name__)


@dataclass
class ProofResult:
    """Container for proof generation results."""
    proof: List[bytes]
    root: bytes
    metadata: Dict[str, Any]


def build_tree(values: Sequence[str], sort: bool = True) -> MerkleTree:
    """Build a merkle tree over hex-encoded values."""
    return MerkleTree.build(values, sort)


def generate_root(values: Sequence[str], sort: bool = True) -> str:
    """Build a tree and return its root as hex without prefix."""
    return build_tree(values, sort).root_hex()


def generate_proof(values: Sequence[str], leaf_value: str, sort: bool = True,
                   known_index: Optional[int] = None) -> ProofResult:
    """
    Generate a membership proof for ``leaf_value``.

    Args:
        values: All leaf values of the tree
        leaf_value: The value to prove
        sort: Build with sorted leaves and pairs
        known_index: Absolute node index of the leaf, skipping the lookup

    Returns:
        ProofResult with the sibling hashes, the root and proof metadata

    Raises:
        LeafNotFoundError: If ``leaf_value`` is not in the tree
        InvalidInputError: If a value is malformed, fewer than two values are
            given, or ``known_index`` is outside the leaf region
    """
    tree = build_tree(values, sort)

    if known_index is None:
        leaf_index = tree.locate(leaf_value)
    else:
        if not tree.internal_count <= known_index < len(tree):
            raise InvalidInputError(
                f"Leaf index {known_index} out of range "
                f"({tree.internal_count}-{len(tree) - 1})"
            )
        leaf_index = known_index

    proof = get_proof(tree.nodes, leaf_index)

    metadata = {
        "leaf": hash_leaf(leaf_value).hex(),
        "leaf_index": leaf_index,
        "leaf_count": tree.leaf_count,
        "internal_count": tree.internal_count,
        "node_count": len(tree),
        "proof_length": len(proof),
        "sort": sort,
    }

    logger.info(f"Generated proof of length {len(proof)} for leaf index {leaf_index}")
    return ProofResult(proof=proof, root=tree.root(), metadata=metadata)
