"""
Merkle Tree Constants

Fixed sizes and sentinel values shared by the hashing, tree and proof modules.
"""

# ====================
# Hashing
# ====================

# keccak-256 digest size in bytes
HASH_SIZE = 32

# Value held by internal slots that the build pass never writes
ZERO_HASH = b"\x00" * HASH_SIZE

# ====================
# Tree Limits
# ====================

# A tree needs at least one pair of leaves
MIN_LEAVES = 2

# Index of the root in the flat node array
ROOT_INDEX = 0
