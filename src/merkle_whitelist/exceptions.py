"""
Merkle Whitelist Exceptions

Every fallible operation in the package raises one of these instead of
terminating the process. Each error carries a short ``code`` string so that
boundary layers can report it without inspecting the message.
"""


class MerkleTreeError(Exception):
    """Base exception for merkle tree operations."""

    code = "merkle_error"


class InvalidInputError(MerkleTreeError, ValueError):
    """Raised for malformed hex values or too few leaves."""

    code = "invalid_input"


class LeafNotFoundError(MerkleTreeError, LookupError):
    """Raised when a leaf value is not present in the tree."""

    code = "leaf_not_found"
