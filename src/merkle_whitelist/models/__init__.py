"""
Boundary Models Package

Pydantic models used to hand roots and proofs to the contract-facing caller:

- ProofResponse: membership proof for one address
- TreeSummary: root and shape of the current tree
- ErrorResponse: failed operation report

Usage:
    from merkle_whitelist.models import ProofResponse

    response = manager.proof_for("0xf17f52151EbEF6C7334FAD080c5704D77216b732")
"""

from .api_models import (
    ErrorResponse,
    ProofResponse,
    TreeSummary,
)

__all__ = [
    'ErrorResponse',
    'ProofResponse',
    'TreeSummary',
]
