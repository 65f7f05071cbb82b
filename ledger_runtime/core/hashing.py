"""
Ledger Runtime Hashing

SHA3-256 (pycryptodome) and the binary Merkle tree behind
Runtime.state_root().

State root leaves, in order:
    sha3(TAG_BALANCE || len(account) || account || balance_be)   per account, sorted
    sha3(TAG_NONCE || len(account) || account || nonce_be)       per account, sorted
    sha3(TAG_BLOCK_NUMBER || block_number_be)                     always last
"""

from __future__ import annotations
from typing import List

from Crypto.Hash import SHA3_256

from ledger_runtime.core.types import Hash


def sha3_256(data: bytes) -> Hash:
    """SHA3-256 of data wrapped in Hash."""
    return Hash(SHA3_256.new(data).digest())


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def merkle_root(leaves: List[Hash]) -> Hash:
    """
    Fold leaves pairwise into a single root.

    No leaves commit to the zero hash and a lone leaf is its own root.
    A runtime always has its block number leaf, so state roots take the
    pairwise path as soon as any balance or nonce is stored. Levels are
    padded to a power of two with copies of the last leaf, so
    [a, b, c] and [a, b, c, c] share a root.
    """
    if not leaves:
        return Hash.zero()

    level = list(leaves)
    while not is_power_of_two(len(level)):
        level.append(level[-1])

    while len(level) > 1:
        pairs = zip(level[0::2], level[1::2])
        level = [sha3_256(left.data + right.data) for left, right in pairs]

    return level[0]
