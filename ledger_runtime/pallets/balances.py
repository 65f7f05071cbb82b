"""
Ledger Runtime Balances Pallet

Account balances and the atomic transfer primitive.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Generic, List, Protocol, Tuple, Type, TypeVar

from ledger_runtime.core.types import UnsignedInt
from ledger_runtime.errors import BalanceOverflowError, InsufficientBalanceError
from ledger_runtime.pallets import system

logger = logging.getLogger(__name__)


class Config(system.Config, Protocol):
    """Associated types the balances pallet needs on top of system.Config."""
    Balance: Type[UnsignedInt]


T = TypeVar("T", bound=Config)

REQUIRED_TYPES = system.REQUIRED_TYPES + ("Balance",)


class Pallet(Generic[T]):
    """
    Authoritative store of account balances.

    Accounts that were never written have a balance of zero.
    """

    def __init__(self, config: Type[T]):
        system.check_config(config, REQUIRED_TYPES)
        self.config = config
        self._balances: Dict[Any, UnsignedInt] = {}

    def set_balance(self, account, amount: int) -> None:
        """Overwrite the balance of account."""
        self._balances[account] = self.config.Balance(amount)

    def balance(self, account) -> UnsignedInt:
        """Balance of account, zero if absent."""
        return self._balances.get(account, self.config.Balance.zero())

    def transfer(self, caller, to, amount: int) -> None:
        """
        Transfer `amount` from `caller` to `to`.

        Both balances are captured and both checks run before anything is
        written, so a failed transfer leaves the ledger untouched.

        Args:
            caller: Sending account
            to: Receiving account
            amount: Amount to move

        Raises:
            InsufficientBalanceError: caller balance is less than amount
            BalanceOverflowError: to balance plus amount exceeds Balance.max_value()
        """
        amount = self.config.Balance(amount)
        caller_balance = self.balance(caller)
        to_balance = self.balance(to)

        new_caller_balance = caller_balance.checked_sub(amount)
        if new_caller_balance is None:
            raise InsufficientBalanceError(caller_balance, amount)

        new_to_balance = to_balance.checked_add(amount)
        if new_to_balance is None:
            raise BalanceOverflowError(to_balance, amount)

        if caller == to or amount == 0:
            # No-op: nothing written, no entries created
            return

        self._balances[caller] = new_caller_balance
        self._balances[to] = new_to_balance

        logger.debug(f"Transfer {caller} -> {to}, amount={int(amount)}")

    def accounts(self) -> List[Tuple[Any, UnsignedInt]]:
        """All (account, balance) entries sorted by account."""
        return sorted(self._balances.items(), key=lambda x: x[0])

    def total_balance(self) -> int:
        """Sum of all stored balances."""
        return sum(int(b) for b in self._balances.values())

    def copy(self) -> "Pallet[T]":
        """Independent copy of this pallet's state."""
        new_pallet = Pallet(self.config)
        new_pallet._balances = dict(self._balances)
        return new_pallet

    def to_dict(self) -> dict:
        return {
            "balances": {str(account): int(b) for account, b in self.accounts()},
        }

    def __repr__(self) -> str:
        return f"balances.Pallet(balances={dict((a, int(b)) for a, b in self.accounts())})"
