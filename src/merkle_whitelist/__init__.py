"""
Merkle Whitelist

keccak-256 merkle trees for address whitelists: build a tree over
hex-encoded values, publish its root, and generate inclusion proofs.

Usage:
    from merkle_whitelist import MerkleTree

    tree = MerkleTree.build(addresses, sort=True)
    root = tree.root_hex()
    proof = tree.proof(addresses[0])
"""

from .exceptions import InvalidInputError, LeafNotFoundError, MerkleTreeError
from .merkle import MerkleProof, MerkleTree, hash_leaf, hash_pair, verify_merkle_proof
from .main import ProofResult, build_tree, generate_proof, generate_root
from .whitelist import WhitelistManager

__version__ = "0.1.0"

__all__ = [
    'MerkleTree',
    'MerkleProof',
    'hash_leaf',
    'hash_pair',
    'verify_merkle_proof',
    'ProofResult',
    'build_tree',
    'generate_root',
    'generate_proof',
    'WhitelistManager',
    'MerkleTreeError',
    'InvalidInputError',
    'LeafNotFoundError',
]
