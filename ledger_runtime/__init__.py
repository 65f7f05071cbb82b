"""
Ledger Runtime

A minimal deterministic ledger: a balances pallet and a system pallet
composed into one runtime through shared associated types.
"""

__version__ = "0.1.0"

from ledger_runtime.runtime import Runtime
from ledger_runtime.config import RuntimeConfig, CounterOverflowPolicy
from ledger_runtime.errors import (
    RuntimeStateError,
    InsufficientBalanceError,
    BalanceOverflowError,
    CounterOverflowError,
)

__all__ = [
    "Runtime",
    "RuntimeConfig",
    "CounterOverflowPolicy",
    "RuntimeStateError",
    "InsufficientBalanceError",
    "BalanceOverflowError",
    "CounterOverflowError",
    "__version__",
]
