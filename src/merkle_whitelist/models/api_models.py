"""
Boundary Models

This module defines Pydantic models for handing tree data to the outside
world. Hashes cross the boundary as '0x'-prefixed lowercase hex strings.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import MerkleTreeError
from ..utils.hex_helpers import validate_hex_length
from ..constants import HASH_SIZE


def _check_hash(v: str) -> str:
    if not validate_hex_length(v, HASH_SIZE):
        raise ValueError("Must be a 32-byte hex string starting with '0x'")
    return v


class ErrorResponse(BaseModel):
    """
    Error report for a failed tree operation.

    Attributes:
        error: Error message
        code: Error code (string identifier)
        details: Additional error details
    """
    error: str = Field(..., description="Error message")
    code: str = Field(..., description="Error code")
    details: Optional[dict] = Field(default=None, description="Additional error details")

    @classmethod
    def from_exception(cls, exc: MerkleTreeError, details: Optional[dict] = None) -> "ErrorResponse":
        return cls(error=str(exc), code=exc.code, details=details)


class TreeSummary(BaseModel):
    """
    Shape and root of a built tree.

    Attributes:
        root: Root hash as hex string
        leaf_count: Number of leaves
        internal_count: Number of internal node slots
        node_count: Total size of the node array
        sort: Whether pairs are sorted before hashing
    """
    root: str = Field(..., description="Root hash as hex string")
    leaf_count: int = Field(..., ge=2, description="Number of leaves")
    internal_count: int = Field(..., ge=1, description="Number of internal node slots")
    node_count: int = Field(..., description="Total number of nodes")
    sort: bool = Field(..., description="Whether pairs are sorted before hashing")

    @field_validator('root')
    @classmethod
    def validate_root(cls, v):
        """Validate root is a 32-byte hex string."""
        return _check_hash(v)


class ProofResponse(BaseModel):
    """
    Membership proof for a whitelisted address.

    Attributes:
        address: The address the proof is for, with '0x' prefix
        leaf: Leaf hash of the address
        index: Absolute node index of the leaf
        proof: Sibling hashes from the leaf level toward the root
        root: Root the proof verifies against
        sort: Whether pairs are sorted before hashing
    """
    address: str = Field(..., description="Address with 0x prefix")
    leaf: str = Field(..., description="Leaf hash as hex string")
    index: int = Field(..., ge=0, description="Absolute node index of the leaf")
    proof: List[str] = Field(..., description="Sibling hashes as hex strings")
    root: str = Field(..., description="Root hash as hex string")
    sort: bool = Field(default=True, description="Whether pairs are sorted before hashing")

    @field_validator('proof')
    @classmethod
    def validate_proof_format(cls, v):
        """Validate proof steps are 32-byte hex strings."""
        for step in v:
            _check_hash(step)
        return v

    @field_validator('leaf', 'root')
    @classmethod
    def validate_hex_format(cls, v):
        """Validate hash fields are 32-byte hex strings."""
        return _check_hash(v)

    @field_validator('address')
    @classmethod
    def validate_address(cls, v):
        if not v.startswith('0x'):
            raise ValueError("Address must start with '0x'")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "address": "0xf17f52151ebef6c7334fad080c5704d77216b732",
                "leaf": "0xe52111628d5433237c36e91f159620decfa7747d736dee9676f3afc40471618a",
                "index": 5,
                "proof": [
                    "0x17ed6e63261d3fa64a0e64b6b22a19aa4308843255bea0d5a85ba0d78c6bd6a0"
                ],
                "root": "0x4bc499384a270746f40e2bb610517d2e9edb8cc61605c3754f194472f772e821",
                "sort": True,
            }
        }
    )
