"""
Ledger Runtime Constants

Numeric widths and defaults shared by the pallets and the runtime.
"""

from typing import Final

# ==============================================================================
# NUMERIC WIDTHS
# ==============================================================================

BALANCE_BITS: Final[int] = 128          # Balance is a u128
BLOCK_NUMBER_BITS: Final[int] = 64      # BlockNumber is a u64
NONCE_BITS: Final[int] = 32             # Nonce is a u32

MAX_BALANCE: Final[int] = (1 << BALANCE_BITS) - 1

# ==============================================================================
# HASHING
# ==============================================================================

HASH_SIZE: Final[int] = 32              # SHA3-256 output

# Domain separation tags for state root leaves
TAG_BALANCE: Final[bytes] = b"\x01"
TAG_NONCE: Final[bytes] = b"\x02"
TAG_BLOCK_NUMBER: Final[bytes] = b"\x03"

# ==============================================================================
# ERROR STRINGS
# ==============================================================================

MSG_INSUFFICIENT_BALANCE: Final[str] = "Insufficient balance"
MSG_OVERFLOW: Final[str] = "Overflow"

# ==============================================================================
# DEFAULTS
# ==============================================================================

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_COUNTER_POLICY: Final[str] = "error"
