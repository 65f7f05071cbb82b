"""
Ledger Runtime Error Handling

All error codes and exception classes.
"""

from enum import IntEnum
from typing import Optional, Any

from ledger_runtime.constants import MSG_INSUFFICIENT_BALANCE, MSG_OVERFLOW


class ErrorCode(IntEnum):
    """Runtime error codes."""

    # 1xxx - General errors
    INVALID_CONFIG = 1001

    # 2xxx - Balances pallet errors
    INSUFFICIENT_BALANCE = 2001
    BALANCE_OVERFLOW = 2002

    # 3xxx - System pallet errors
    COUNTER_OVERFLOW = 3001


class RuntimeStateError(Exception):
    """Base exception for all runtime state errors.

    ``str(error)`` is the bare message so callers can surface it as-is.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: Optional[Any] = None
    ):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}([{self.code.value}] {self.message})"

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        result = {
            "code": self.code.value,
            "name": self.code.name,
            "message": self.message,
        }
        if self.details is not None:
            result["details"] = self.details
        return result


# ==============================================================================
# General Errors (1xxx)
# ==============================================================================

class InvalidConfigError(RuntimeStateError):
    def __init__(self, errors: list):
        super().__init__(
            ErrorCode.INVALID_CONFIG,
            "Invalid configuration: " + "; ".join(errors),
            {"errors": list(errors)}
        )


# ==============================================================================
# Balances Errors (2xxx)
# ==============================================================================

class InsufficientBalanceError(RuntimeStateError):
    def __init__(self, balance: int, amount: int):
        super().__init__(
            ErrorCode.INSUFFICIENT_BALANCE,
            MSG_INSUFFICIENT_BALANCE,
            {"balance": int(balance), "amount": int(amount)}
        )


class BalanceOverflowError(RuntimeStateError):
    def __init__(self, balance: int, amount: int):
        super().__init__(
            ErrorCode.BALANCE_OVERFLOW,
            MSG_OVERFLOW,
            {"balance": int(balance), "amount": int(amount)}
        )


# ==============================================================================
# System Errors (3xxx)
# ==============================================================================

class CounterOverflowError(RuntimeStateError):
    def __init__(self, counter: str, value: int):
        super().__init__(
            ErrorCode.COUNTER_OVERFLOW,
            f"Counter overflow: {counter} at {value}",
            {"counter": counter, "value": int(value)}
        )
