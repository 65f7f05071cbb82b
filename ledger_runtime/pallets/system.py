"""
Ledger Runtime System Pallet

Global block number and per-account nonces.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Generic, Hashable, List, Protocol, Tuple, Type, TypeVar

from ledger_runtime.config import CounterOverflowPolicy
from ledger_runtime.core.types import UnsignedInt
from ledger_runtime.errors import CounterOverflowError

logger = logging.getLogger(__name__)


class Config(Protocol):
    """Associated types the system pallet needs from its runtime."""
    AccountId: Type[Hashable]
    BlockNumber: Type[UnsignedInt]
    Nonce: Type[UnsignedInt]


T = TypeVar("T", bound=Config)

REQUIRED_TYPES = ("AccountId", "BlockNumber", "Nonce")


def check_config(config: Any, required: Tuple[str, ...]) -> None:
    """Raise TypeError if config does not bind every required associated type."""
    missing = [name for name in required if not hasattr(config, name)]
    if missing:
        raise TypeError(
            f"{getattr(config, '__name__', config)!s} does not bind: {', '.join(missing)}"
        )


class Pallet(Generic[T]):
    """
    System state: block counter and nonces.

    Counter overflow at the type's maximum is handled according to
    overflow_policy; the default raises CounterOverflowError and leaves
    the counter unchanged.
    """

    def __init__(
        self,
        config: Type[T],
        overflow_policy: CounterOverflowPolicy = CounterOverflowPolicy.ERROR
    ):
        check_config(config, REQUIRED_TYPES)
        self.config = config
        self.overflow_policy = CounterOverflowPolicy(overflow_policy)
        self._block_number = config.BlockNumber.zero()
        self._nonce: Dict[Any, UnsignedInt] = {}

    def block_number(self) -> UnsignedInt:
        return self._block_number

    def increment_block_number(self) -> UnsignedInt:
        """Advance the block counter by one and return the new value."""
        self._block_number = self._increment(self._block_number, "block_number")
        logger.debug(f"Block number now {self._block_number}")
        return self._block_number

    def nonce(self, account) -> UnsignedInt:
        """Nonce for account, zero if it never acted."""
        return self._nonce.get(account, self.config.Nonce.zero())

    def inc_nonce(self, account) -> UnsignedInt:
        """Bump account nonce by one and return the new value."""
        nonce = self._increment(self.nonce(account), f"nonce[{account}]")
        self._nonce[account] = nonce
        logger.debug(f"Nonce for {account} now {nonce}")
        return nonce

    def _increment(self, value: UnsignedInt, counter: str) -> UnsignedInt:
        result = value.checked_add(1)
        if result is not None:
            return result

        if self.overflow_policy is CounterOverflowPolicy.SATURATE:
            return value.saturating_add(1)

        if self.overflow_policy is CounterOverflowPolicy.WRAP:
            logger.warning(f"Counter {counter} wrapped at {value}")
            return value.wrapping_add(1)

        raise CounterOverflowError(counter, value)

    def nonces(self) -> List[Tuple[Any, UnsignedInt]]:
        """All (account, nonce) entries sorted by account."""
        return sorted(self._nonce.items(), key=lambda x: x[0])

    def copy(self) -> "Pallet[T]":
        """Independent copy of this pallet's state."""
        new_pallet = Pallet(self.config, self.overflow_policy)
        new_pallet._block_number = self._block_number
        new_pallet._nonce = dict(self._nonce)
        return new_pallet

    def to_dict(self) -> dict:
        return {
            "block_number": int(self._block_number),
            "nonce": {str(account): int(nonce) for account, nonce in self.nonces()},
        }

    def __repr__(self) -> str:
        return (
            f"system.Pallet(block_number={int(self._block_number)}, "
            f"nonce={dict((a, int(n)) for a, n in self.nonces())})"
        )
