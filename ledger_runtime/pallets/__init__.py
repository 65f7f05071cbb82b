"""
Ledger Runtime Pallets

Independent state modules composed by the runtime.
"""

from ledger_runtime.pallets import system
from ledger_runtime.pallets import balances

__all__ = [
    "system",
    "balances",
]
