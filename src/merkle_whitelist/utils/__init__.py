"""
Utility Functions

Hex string handling used at the edges of the merkle tree.
"""

from .hex_helpers import (
    strip_hex_prefix,
    is_hex_string,
    hex_to_bytes,
    bytes_to_hex,
    validate_hex_length,
)

__all__ = [
    'strip_hex_prefix',
    'is_hex_string',
    'hex_to_bytes',
    'bytes_to_hex',
    'validate_hex_length',
]
