"""
Ledger Runtime Core Data Structures
"""

from ledger_runtime.core.types import (
    UnsignedInt,
    U32,
    U64,
    U128,
    Hash,
)
from ledger_runtime.core.hashing import sha3_256, merkle_root

__all__ = [
    # Types
    "UnsignedInt",
    "U32",
    "U64",
    "U128",
    "Hash",
    # Hashing
    "sha3_256",
    "merkle_root",
]
