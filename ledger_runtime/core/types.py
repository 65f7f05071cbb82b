"""
Ledger Runtime Core Types

Bounded unsigned integers used as Balance, BlockNumber and Nonce, and the
fixed-size Hash produced by the state root.

All multi-byte integers are BIG-ENDIAN when serialized.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Type, TypeVar

from ledger_runtime.constants import (
    BALANCE_BITS,
    BLOCK_NUMBER_BITS,
    NONCE_BITS,
    HASH_SIZE,
)

U = TypeVar("U", bound="UnsignedInt")


class UnsignedInt(int):
    """
    Unsigned integer bounded to BITS bits.

    Plain arithmetic falls back to ``int``. The checked_* methods are the
    ones state code must use: they return None instead of leaving the
    representable range.
    """
    BITS: ClassVar[int] = 0

    def __new__(cls: Type[U], value: int = 0) -> U:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{cls.__name__} requires an int, got {type(value).__name__}")
        if value < 0 or value > (1 << cls.BITS) - 1:
            raise ValueError(f"{cls.__name__} out of range: {value}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    @classmethod
    def zero(cls: Type[U]) -> U:
        return cls(0)

    @classmethod
    def one(cls: Type[U]) -> U:
        return cls(1)

    @classmethod
    def max_value(cls: Type[U]) -> U:
        return cls((1 << cls.BITS) - 1)

    def checked_add(self: U, other: int) -> Optional[U]:
        """Add, or None if the result exceeds max_value()."""
        result = int(self) + int(type(self)(other))
        if result > (1 << self.BITS) - 1:
            return None
        return type(self)(result)

    def checked_sub(self: U, other: int) -> Optional[U]:
        """Subtract, or None if the result would be negative."""
        result = int(self) - int(type(self)(other))
        if result < 0:
            return None
        return type(self)(result)

    def saturating_add(self: U, other: int) -> U:
        result = self.checked_add(other)
        return self.max_value() if result is None else result

    def wrapping_add(self: U, other: int) -> U:
        return type(self)((int(self) + int(type(self)(other))) & ((1 << self.BITS) - 1))

    def to_bytes_be(self) -> bytes:
        """Fixed-width big-endian encoding."""
        return int(self).to_bytes(self.BITS // 8, "big")


class U32(UnsignedInt):
    BITS = NONCE_BITS


class U64(UnsignedInt):
    BITS = BLOCK_NUMBER_BITS


class U128(UnsignedInt):
    BITS = BALANCE_BITS


# Default bindings for the associated types
Balance = U128
BlockNumber = U64
Nonce = U32
AccountId = str


@dataclass(frozen=True, slots=True)
class Hash:
    """
    SHA3-256 hash output.

    SIZE: 32 bytes
    SERIALIZATION: raw bytes
    """
    data: bytes = field(default_factory=lambda: bytes(HASH_SIZE))

    def __post_init__(self):
        if len(self.data) != HASH_SIZE:
            raise ValueError(f"Hash must be {HASH_SIZE} bytes, got {len(self.data)}")

    def __bytes__(self) -> bytes:
        return self.data

    def __repr__(self) -> str:
        return f"Hash({self.data.hex()[:16]}...)"

    def hex(self) -> str:
        return self.data.hex()

    @classmethod
    def zero(cls) -> Hash:
        return cls(bytes(HASH_SIZE))
