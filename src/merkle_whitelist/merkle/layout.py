"""
Flat Node Array Layout

Index arithmetic for the merkle tree arena. Nodes live in a single list:
internal slots first (root at index 0) followed by the leaves. A node at
index ``i`` has its parent at ``(i - 1) // 2``; left children sit at odd
positions and right children at even positions.
"""

from typing import List


def next_power_of_two(n: int) -> int:
    """
    Return the smallest power of two that is >= n.

    Examples:
        >>> next_power_of_two(3)
        4
        >>> next_power_of_two(8)
        8
    """
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def internal_node_count(leaf_count: int) -> int:
    """Number of slots reserved for internal nodes ahead of the leaves."""
    return next_power_of_two(leaf_count) - 1


def parent_index(index: int) -> int:
    return (index - 1) // 2


def sibling_index(index: int) -> int:
    """
    Index of the node paired with ``index`` at its level.

    Odd positions are left children, so their sibling is to the right.
    """
    if index % 2 == 0:
        return index - 1
    return index + 1


def is_left_child(index: int) -> bool:
    return index % 2 == 1


def get_proof_indices(index: int, node_count: int) -> List[int]:
    """
    Calculate the sibling indices visited on the way from ``index`` to the root.

    Siblings outside the node array (levels where the node is carried up
    unpaired) are skipped, so the result lines up one-to-one with the
    hashes returned by ``get_proof``.

    Args:
        index: Absolute index of the starting node
        node_count: Total number of nodes in the array

    Returns:
        List of in-bounds sibling indices from the leaf level upward

    Examples:
        >>> get_proof_indices(5, 6)  # third leaf of a 3-leaf tree
        [1]
    """
    indices = []
    current = index
    while current > 0:
        sibling = sibling_index(current)
        if sibling < node_count:
            indices.append(sibling)
        current = parent_index(current)
    return indices
