"""
Ledger Runtime Composition

The Runtime binds the associated types every pallet needs and owns one
instance of each pallet. Pallets never call each other; callers mutate
state through the pallets directly.
"""

from __future__ import annotations
import logging
from typing import List, Optional

from ledger_runtime.config import RuntimeConfig
from ledger_runtime.constants import TAG_BALANCE, TAG_BLOCK_NUMBER, TAG_NONCE
from ledger_runtime.core import types
from ledger_runtime.core.hashing import merkle_root, sha3_256
from ledger_runtime.core.types import Hash
from ledger_runtime.errors import InvalidConfigError
from ledger_runtime.pallets import balances, system

logger = logging.getLogger(__name__)


def encode_account(account) -> bytes:
    """Length-prefixed UTF-8 encoding of an account id."""
    data = str(account).encode("utf-8")
    return len(data).to_bytes(4, "big") + data


class Runtime:
    """
    Runtime root.

    Implements system.Config and balances.Config through class attributes.
    Subclasses may rebind any of them; both pallets are built against
    type(self), so they always agree on AccountId.
    """
    AccountId = types.AccountId
    Balance = types.Balance
    BlockNumber = types.BlockNumber
    Nonce = types.Nonce

    def __init__(self, config: Optional[RuntimeConfig] = None):
        self.config = config if config is not None else RuntimeConfig()

        errors = self.config.validate()
        if errors:
            raise InvalidConfigError(errors)

        runtime_type = type(self)
        self.system: system.Pallet[Runtime] = system.Pallet(
            runtime_type,
            self.config.counters.policy,
        )
        self.balances: balances.Pallet[Runtime] = balances.Pallet(runtime_type)

        logger.info(
            f"Runtime {self.config.name} created: "
            f"Balance={self.Balance.__name__}, BlockNumber={self.BlockNumber.__name__}, "
            f"Nonce={self.Nonce.__name__}, overflow_policy={self.system.overflow_policy.value}"
        )

    def state_root(self) -> Hash:
        """
        Merkle root over the whole runtime state.

        Leaves are sorted balance entries, then sorted nonce entries, then
        the block number, so the root does not depend on insertion order.
        """
        leaves: List[Hash] = []

        for account, balance in self.balances.accounts():
            leaves.append(sha3_256(TAG_BALANCE + encode_account(account) + balance.to_bytes_be()))

        for account, nonce in self.system.nonces():
            leaves.append(sha3_256(TAG_NONCE + encode_account(account) + nonce.to_bytes_be()))

        leaves.append(sha3_256(TAG_BLOCK_NUMBER + self.system.block_number().to_bytes_be()))

        return merkle_root(leaves)

    def to_dict(self) -> dict:
        """Debug dump of both pallets."""
        return {
            "balances": self.balances.to_dict(),
            "system": self.system.to_dict(),
        }

    def __repr__(self) -> str:
        return f"Runtime(balances={self.balances!r}, system={self.system!r})"
