"""
Merkle Proof Generation and Verification

This module walks the flat node array from a leaf to the root to collect the
sibling hashes that make up an inclusion proof, and replays such a proof to
recompute the root.

A proof is just the ordered list of siblings that exist. Levels at which the
node was carried up without a partner contribute nothing, so a verifier
needs the leaf's absolute index and the size of the node array to know
which levels those were and which side each sibling sits on.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .hashing import hash_pair
from .layout import is_left_child, parent_index, sibling_index

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MerkleProof:
    """Inclusion proof for one leaf, with what is needed to check it."""
    leaf: bytes
    index: int
    siblings: List[bytes]
    root: bytes
    node_count: int
    sort: bool

    def verify(self) -> bool:
        return verify_merkle_proof(
            self.leaf, self.siblings, self.index, self.root, self.node_count, self.sort
        )


def find_leaf_index(
    nodes: Sequence[bytes], internal_count: int, leaf_hash: bytes
) -> Optional[int]:
    """
    Find the absolute index of the first leaf equal to ``leaf_hash``.

    Only the leaf region ``nodes[internal_count:]`` is searched, so an
    internal node that happens to equal a leaf (a carried-up leaf, for
    instance) is never returned.

    Returns:
        Absolute node index, or None when the leaf is absent
    """
    for index in range(internal_count, len(nodes)):
        if nodes[index] == leaf_hash:
            return index
    return None


def get_proof(nodes: Sequence[bytes], index: int) -> List[bytes]:
    """
    Collect the sibling hashes on the path from ``index`` to the root.

    Args:
        nodes: Flat node array with the root at index 0
        index: Absolute index of the starting node

    Returns:
        Sibling hashes ordered from the leaf level toward the root. Empty for
        the root itself and for indices outside the array.

    Example:
        >>> tree = MerkleTree.build([a, b, c], sort=False)
        >>> get_proof(tree.nodes, 3)  # [hash(b), hash(c)]
    """
    if index < 0 or index >= len(nodes):
        return []

    proof = []
    while index != 0:
        sibling = sibling_index(index)
        if sibling < len(nodes):
            proof.append(nodes[sibling])
        index = parent_index(index)

    return proof


def compute_root_from_proof(
    leaf: bytes, index: int, proof: Sequence[bytes], node_count: int, sort: bool
) -> Optional[bytes]:
    """
    Rebuild the root from a leaf hash and its proof.

    Args:
        leaf: 32-byte hash of the target leaf
        index: Absolute index of the leaf in the node array
        proof: Sibling hashes as returned by ``get_proof``
        node_count: Size of the node array the proof was taken from
        sort: Whether the tree was built with sorted pairs

    Returns:
        The reconstructed root, or None if the proof has the wrong number
        of siblings for this index
    """
    if index < 0 or index >= node_count:
        return None

    siblings = iter(proof)
    current = leaf
    while index != 0:
        sibling_at = sibling_index(index)
        if sibling_at < node_count:
            sibling = next(siblings, None)
            if sibling is None:
                return None
            if is_left_child(index):
                current = hash_pair(current, sibling, sort)
            else:
                current = hash_pair(sibling, current, sort)
        else:
            current = hash_pair(current, None, sort)
        index = parent_index(index)

    if next(siblings, None) is not None:
        return None
    return current


def verify_merkle_proof(
    leaf: bytes,
    proof: Sequence[bytes],
    index: int,
    root: bytes,
    node_count: int,
    sort: bool,
) -> bool:
    """
    Verify a merkle proof against a known root.

    Examples:
        >>> is_valid = verify_merkle_proof(leaf, proof, 4, tree.root(), len(tree.nodes), True)
    """
    computed = compute_root_from_proof(leaf, index, proof, node_count, sort)
    if computed is None:
        logger.debug(f"Proof for index {index} has the wrong number of siblings")
        return False
    return computed == root


def batch_verify_proofs(
    leaves: List[bytes],
    proofs: List[List[bytes]],
    indices: List[int],
    root: bytes,
    node_count: int,
    sort: bool,
) -> List[bool]:
    """
    Verify multiple merkle proofs against the same root.

    Returns:
        List of boolean results for each proof
    """
    results = []
    for leaf, proof, index in zip(leaves, proofs, indices):
        results.append(verify_merkle_proof(leaf, proof, index, root, node_count, sort))
    return results
