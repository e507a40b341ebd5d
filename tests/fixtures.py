"""
Shared test data for the merkle whitelist test suites.

Digests were produced independently with a reference keccak-256
implementation.
"""

ADDRESS_1 = "821aEa9a577a9b44299B9c15c88cf3087F3b5544"
ADDRESS_2 = "f17f52151EbEF6C7334FAD080c5704D77216b732"
ADDRESS_3 = "C5fdf4076b8F3A5357c5E395ab970B5B54098Fef"

# keccak256(bytes.fromhex(address))
LEAF_1 = "dbb8f590bb1455090266c2ac6ad5dc4ab173d096b570e63e11107e2f5cd25004"
LEAF_2 = "e52111628d5433237c36e91f159620decfa7747d736dee9676f3afc40471618a"
LEAF_3 = "665a9f517373f10d5db8348954fd99a027f23da32c32340102b3956f6ac57eec"

EMPTY_KECCAK = "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"

# build([ADDRESS_2, ADDRESS_3, ADDRESS_1], sort=True)
SORTED_ROOT_3 = "4bc499384a270746f40e2bb610517d2e9edb8cc61605c3754f194472f772e821"
# hash of the first sorted pair (LEAF_3, LEAF_1) in that tree
SORTED_PAIR_3_1 = "17ed6e63261d3fa64a0e64b6b22a19aa4308843255bea0d5a85ba0d78c6bd6a0"

# build([ADDRESS_2, ADDRESS_3], sort=True)
SORTED_ROOT_2 = "fe1e31239bf810e6ac7dd7c54a9ed47fa8be6c0997d7e81266e3fa2d5d9d988f"

# build([ADDRESS_2, ADDRESS_3, ADDRESS_1], sort=False)
UNSORTED_PAIR_2_3 = "5552f279fe0b2280af05743f2d66bca59ab5b3c2ec138ea4e15eda8e8d8a27a5"
UNSORTED_ROOT_3 = "f3710dab64d324e512390db229521f980c131a06f7cd8af24844b61dbfe075cf"


def make_values(count: int, offset: int = 0):
    """Distinct 20-byte hex values."""
    return [f"{i + offset + 1:040x}" for i in range(count)]
