"""
Merkle Tree Building

This module builds the merkle tree over a list of hex-encoded values and
exposes read access to the result.

Layout:
- ``internal_count = next_power_of_two(leaf_count) - 1`` slots are reserved
  for internal nodes, followed by the ``leaf_count`` leaves (not padded)
- each level is built from the level below it and written into the region
  directly in front of it, so the root ends up at index 0
- an unpaired node at the end of a level is carried up unchanged
- a freshly built level of odd length greater than one has its last node
  duplicated so that the next level pairs evenly

Slots the build never reaches keep ``ZERO_HASH``. The tree is immutable once
built; changing the leaf set means building a new one.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from ..constants import MIN_LEAVES, ROOT_INDEX, ZERO_HASH
from ..exceptions import InvalidInputError, LeafNotFoundError
from .hashing import hash_leaf, hash_pair
from .layout import internal_node_count
from .proof import MerkleProof, find_leaf_index, get_proof, verify_merkle_proof

logger = logging.getLogger(__name__)


def build_upper_level(nodes: Sequence[bytes], sort: bool) -> List[bytes]:
    """
    Hash one level of nodes into the level above it.

    Args:
        nodes: Hashes of the current level, left to right
        sort: Sort each pair before hashing

    Returns:
        Parent hashes, with the last one duplicated when the row has odd
        length greater than one
    """
    row = []
    for i in range(0, len(nodes), 2):
        right = nodes[i + 1] if i + 1 < len(nodes) else None
        row.append(hash_pair(nodes[i], right, sort))

    if len(row) > 1 and len(row) % 2 != 0:
        row.append(row[-1])

    return row


def build_internal_nodes(nodes: List[bytes], internal_count: int, sort: bool) -> None:
    """
    Fill the internal region of ``nodes`` in place, level by level.

    ``nodes[internal_count:]`` must already hold the leaves.
    """
    parents = build_upper_level(nodes[internal_count:], sort)

    start = internal_count - len(parents)
    nodes[start:start + len(parents)] = parents

    while len(parents) > 1:
        parents = build_upper_level(parents, sort)
        start -= len(parents)
        nodes[start:start + len(parents)] = parents

    nodes[ROOT_INDEX] = parents[0]


class MerkleTree:
    """
    Binary merkle tree stored as a flat array of 32-byte hashes.

    Use ``MerkleTree.build`` to construct one.

    Attributes:
        nodes: Internal nodes followed by leaves; root at index 0
        internal_count: Number of slots reserved for internal nodes
        leaf_count: Number of leaves
        sort: Whether pairs were sorted before hashing
    """

    __slots__ = ("_nodes", "_internal_count", "_leaf_count", "_sort")

    def __init__(self, nodes: Sequence[bytes], internal_count: int, leaf_count: int, sort: bool):
        if len(nodes) != internal_count + leaf_count:
            raise InvalidInputError(
                f"Expected {internal_count + leaf_count} nodes, got {len(nodes)}"
            )
        self._nodes: Tuple[bytes, ...] = tuple(nodes)
        self._internal_count = internal_count
        self._leaf_count = leaf_count
        self._sort = sort

    @classmethod
    def build(cls, values: Sequence[str], sort: bool) -> "MerkleTree":
        """
        Build a tree from hex-encoded leaf values.

        Args:
            values: Hex strings without '0x' prefix
            sort: Sort the leaf hashes, and every pair before hashing

        Returns:
            The built tree

        Raises:
            InvalidInputError: If fewer than two values are given or a value
                is not valid hex

        Examples:
            >>> tree = MerkleTree.build(["f17f...b732", "C5fd...8Fef"], sort=True)
            >>> tree.root_hex()
        """
        leaf_count = len(values)
        if leaf_count < MIN_LEAVES:
            raise InvalidInputError(
                f"Expected at least {MIN_LEAVES} values, received {leaf_count}"
            )

        leaves = [hash_leaf(value) for value in values]
        if sort:
            leaves.sort()
        return cls.from_leaves(leaves, sort)

    @classmethod
    def from_leaves(cls, leaves: Sequence[bytes], sort: bool) -> "MerkleTree":
        """Build a tree from leaf hashes that are already in their final order."""
        leaf_count = len(leaves)
        if leaf_count < MIN_LEAVES:
            raise InvalidInputError(
                f"Expected at least {MIN_LEAVES} leaves, received {leaf_count}"
            )

        internal_count = internal_node_count(leaf_count)
        nodes = [ZERO_HASH] * internal_count + list(leaves)
        build_internal_nodes(nodes, internal_count, sort)

        logger.debug(
            f"Built merkle tree: {leaf_count} leaves, {internal_count} internal slots, "
            f"sort={sort}, root={nodes[ROOT_INDEX].hex()}"
        )
        return cls(nodes, internal_count, leaf_count, sort)

    @property
    def nodes(self) -> Tuple[bytes, ...]:
        return self._nodes

    @property
    def internal_count(self) -> int:
        return self._internal_count

    @property
    def leaf_count(self) -> int:
        return self._leaf_count

    @property
    def sort(self) -> bool:
        return self._sort

    def root(self) -> bytes:
        return self._nodes[ROOT_INDEX]

    def root_hex(self) -> str:
        """Root hash as lowercase hex without '0x' prefix."""
        return self.root().hex()

    def leaves(self) -> Tuple[bytes, ...]:
        return self._nodes[self._internal_count:]

    def index_of(self, leaf_value: str) -> Optional[int]:
        """Absolute index of the first leaf matching ``leaf_value``, or None."""
        return find_leaf_index(self._nodes, self._internal_count, hash_leaf(leaf_value))

    def locate(self, leaf_value: str) -> int:
        """
        Absolute index of the first leaf matching ``leaf_value``.

        Raises:
            LeafNotFoundError: If no leaf matches
            InvalidInputError: If ``leaf_value`` is not valid hex
        """
        index = self.index_of(leaf_value)
        if index is None:
            raise LeafNotFoundError(f"Leaf {leaf_value!r} is not in the tree")
        return index

    def proof(self, leaf_value: str, known_index: Optional[int] = None) -> List[bytes]:
        """
        Inclusion proof for a leaf.

        Args:
            leaf_value: Hex-encoded leaf value, used when ``known_index`` is None
            known_index: Absolute node index to start from instead of searching

        Returns:
            Sibling hashes from the leaf level toward the root. Empty when the
            leaf is not found or the index is negative or out of range; use
            ``prove`` to get an error instead.
        """
        if known_index is None:
            index = self.index_of(leaf_value)
            if index is None:
                logger.debug(f"Leaf {leaf_value!r} not found, returning empty proof")
                return []
        else:
            index = known_index

        return get_proof(self._nodes, index)

    def prove(self, leaf_value: str) -> MerkleProof:
        """
        Inclusion proof for a leaf, bundled with its index and the root.

        Raises:
            LeafNotFoundError: If the leaf is not in the tree
        """
        index = self.locate(leaf_value)
        return MerkleProof(
            leaf=self._nodes[index],
            index=index,
            siblings=get_proof(self._nodes, index),
            root=self.root(),
            node_count=len(self._nodes),
            sort=self._sort,
        )

    def verify(self, leaf_value: str, proof: Sequence[bytes], index: int) -> bool:
        """Check ``proof`` for ``leaf_value`` at ``index`` against this tree's root."""
        return verify_merkle_proof(
            hash_leaf(leaf_value), proof, index, self.root(), len(self._nodes), self._sort
        )

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return (
            f"MerkleTree(leaf_count={self._leaf_count}, internal_count={self._internal_count}, "
            f"sort={self._sort}, root={self.root_hex()})"
        )
