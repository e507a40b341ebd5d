"""
Whitelist Manager

Keeps a list of whitelisted addresses and the merkle tree over them. Every
add rebuilds the tree from the full list and hands the new root to a
publisher callable (for example a function that submits it to a contract).
Membership proofs are served from the current tree.

Adding, rebuilding and publishing happen under one lock, so concurrent adds
never produce a tree that misses one of them.
"""

import logging
import threading
from typing import Callable, Iterable, List, Optional

from .config import Settings
from .exceptions import InvalidInputError, LeafNotFoundError
from .merkle import MerkleTree
from .models import ProofResponse, TreeSummary
from .utils.hex_helpers import bytes_to_hex, is_hex_string, strip_hex_prefix

logger = logging.getLogger(__name__)

RootPublisher = Callable[[str], object]


def normalize_address(address: str) -> str:
    """
    Strip the '0x' prefix from an address and check it is valid hex.

    Raises:
        InvalidInputError: If the address is not hex
    """
    if not isinstance(address, str):
        raise InvalidInputError(f"Address must be a string, got {type(address).__name__}")
    bare = strip_hex_prefix(address.strip())
    if not bare or not is_hex_string(bare):
        raise InvalidInputError(f"Invalid address: {address!r}")
    return bare


class WhitelistManager:
    """
    Whitelist of addresses backed by a merkle tree.

    Args:
        publisher: Called with the '0x'-prefixed root after every rebuild
        sort: Sort leaves and pairs; defaults to MERKLE_SORT_PAIRS
    """

    def __init__(self, publisher: Optional[RootPublisher] = None, sort: Optional[bool] = None):
        if sort is None:
            sort = Settings.from_env().sort_pairs
        self.publisher = publisher
        self.sort = sort
        self._addresses: List[str] = []
        self._tree: Optional[MerkleTree] = None
        self._lock = threading.Lock()

    @property
    def addresses(self) -> List[str]:
        return list(self._addresses)

    @property
    def tree(self) -> Optional[MerkleTree]:
        return self._tree

    @property
    def root_hex(self) -> Optional[str]:
        tree = self._tree
        return tree.root_hex() if tree is not None else None

    def add_address(self, address: str) -> Optional[str]:
        """
        Add an address, rebuild the tree and publish the new root.

        Returns:
            The new root as hex without prefix, or None while the whitelist
            holds fewer than two addresses
        """
        return self.add_addresses([address])

    def add_addresses(self, addresses: Iterable[str]) -> Optional[str]:
        """
        Add several addresses with a single rebuild and publish.

        Nothing changes if any address is invalid or the publisher raises.
        """
        new = [normalize_address(a) for a in addresses]

        with self._lock:
            candidate = self._addresses + new
            if len(candidate) < 2:
                self._addresses = candidate
                logger.info(
                    f"Whitelist has {len(candidate)} address(es); waiting for a second before building"
                )
                return None

            tree = MerkleTree.build(candidate, self.sort)
            root = tree.root_hex()
            if self.publisher is not None:
                logger.debug(f"Publishing root 0x{root}")
                self.publisher(bytes_to_hex(tree.root()))

            self._addresses = candidate
            self._tree = tree
            logger.info(f"Whitelist rebuilt with {len(candidate)} addresses, root 0x{root}")
            return root

    def contains(self, address: str) -> bool:
        tree = self._tree
        if tree is None:
            return False
        return tree.index_of(normalize_address(address)) is not None

    def proof_for(self, address: str) -> ProofResponse:
        """
        Membership proof for ``address`` against the current root.

        Raises:
            LeafNotFoundError: If the address is not whitelisted or no tree
                has been built yet
            InvalidInputError: If the address is not hex
        """
        bare = normalize_address(address)
        tree = self._tree
        if tree is None:
            raise LeafNotFoundError("Whitelist tree has not been built yet")

        proof = tree.prove(bare)
        return ProofResponse(
            address=f"0x{bare.lower()}",
            leaf=bytes_to_hex(proof.leaf),
            index=proof.index,
            proof=[bytes_to_hex(step) for step in proof.siblings],
            root=bytes_to_hex(proof.root),
            sort=proof.sort,
        )

    def summary(self) -> Optional[TreeSummary]:
        tree = self._tree
        if tree is None:
            return None
        return TreeSummary(
            root=bytes_to_hex(tree.root()),
            leaf_count=tree.leaf_count,
            internal_count=tree.internal_count,
            node_count=len(tree),
            sort=tree.sort,
        )
