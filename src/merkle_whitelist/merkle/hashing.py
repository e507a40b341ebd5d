"""
Leaf and Node Hashing

keccak-256 hashing for the two kinds of tree node:

- leaves: the hash of a hex-decoded input value
- internal nodes: the hash of two concatenated child hashes, optionally
  ordered byte-wise first so that the result does not depend on which child
  sat on the left

A node without a sibling is carried to the next level as-is rather than
being hashed alone or paired with a copy of itself.
"""

from typing import Optional

from web3 import Web3

from ..utils.hex_helpers import hex_to_bytes


def keccak256(data: bytes) -> bytes:
    """Return the 32-byte keccak-256 digest of ``data``."""
    return bytes(Web3.keccak(data))


def hash_leaf(value: str) -> bytes:
    """
    Hash a hex-encoded leaf value.

    Args:
        value: Bare hex string (no '0x' prefix); case-insensitive

    Returns:
        32-byte keccak-256 digest of the decoded bytes

    Raises:
        InvalidInputError: If ``value`` is not valid hexadecimal

    Examples:
        >>> hash_leaf("f17f52151EbEF6C7334FAD080c5704D77216b732").hex()
        'e52111628d5433237c36e91f159620decfa7747d736dee9676f3afc40471618a'
    """
    return keccak256(hex_to_bytes(value))


def hash_pair(left: bytes, right: Optional[bytes], sort: bool) -> bytes:
    """
    Hash two child nodes into their parent.

    Args:
        left: Hash of the left child
        right: Hash of the right child, or None when the left child is unpaired
        sort: Order the pair byte-wise before concatenation

    Returns:
        keccak-256 of the concatenated pair, or ``left`` unchanged when
        ``right`` is None
    """
    if right is None:
        return left

    if sort and right < left:
        left, right = right, left
    return keccak256(left + right)
