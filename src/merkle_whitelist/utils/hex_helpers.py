"""
Hex String Utilities

This module provides strict helpers for moving between hex strings and raw
bytes. Leaf values enter the tree as hex text and hashes leave it as hex text,
so every conversion at the boundary goes through here.
"""

import re

from ..exceptions import InvalidInputError

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def strip_hex_prefix(hex_str: str) -> str:
    """
    Remove a leading '0x' or '0X' from a hex string.

    Args:
        hex_str: Hex string with or without prefix

    Returns:
        The string without its prefix

    Examples:
        >>> strip_hex_prefix("0xf17f")
        "f17f"
        >>> strip_hex_prefix("f17f")
        "f17f"
    """
    if hex_str[:2] in ("0x", "0X"):
        return hex_str[2:]
    return hex_str


def is_hex_string(hex_str: str) -> bool:
    """
    Check whether a string is bare, even-length hexadecimal.

    No prefix and no whitespace are accepted. The empty string is valid
    and decodes to zero bytes.
    """
    if not isinstance(hex_str, str):
        return False
    return len(hex_str) % 2 == 0 and _HEX_RE.fullmatch(hex_str) is not None


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Decode a bare hex string to bytes.

    Args:
        hex_str: Even-length hex string without '0x' prefix

    Returns:
        Decoded bytes

    Raises:
        InvalidInputError: If the string is not valid hexadecimal

    Examples:
        >>> hex_to_bytes("1234")
        b'\\x12\\x34'
    """
    if not is_hex_string(hex_str):
        raise InvalidInputError(f"Invalid hex string: {hex_str!r}")
    return bytes.fromhex(hex_str)


def bytes_to_hex(data: bytes, prefix: bool = True) -> str:
    """
    Convert bytes to a lowercase hex string.

    Args:
        data: Bytes to convert
        prefix: Whether to include '0x' prefix

    Returns:
        Hex string representation

    Examples:
        >>> bytes_to_hex(b'\\x12\\x34')
        "0x1234"
        >>> bytes_to_hex(b'\\x12\\x34', prefix=False)
        "1234"
    """
    hex_str = bytes(data).hex()
    return f"0x{hex_str}" if prefix else hex_str


def validate_hex_length(hex_str: str, expected_bytes: int) -> bool:
    """
    Validate that a '0x'-prefixed hex string represents the expected number of bytes.

    Args:
        hex_str: The hex string to validate
        expected_bytes: Expected number of bytes

    Returns:
        True if the hex string has the correct length
    """
    if not hex_str.startswith("0x"):
        return False

    hex_part = hex_str[2:]
    return is_hex_string(hex_part) and len(hex_part) // 2 == expected_bytes
