"""
Ledger Runtime Configuration
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Dict, List, Optional

from ledger_runtime.constants import (
    DEFAULT_COUNTER_POLICY,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    MAX_BALANCE,
)
from ledger_runtime.errors import InvalidConfigError

logger = logging.getLogger(__name__)


class CounterOverflowPolicy(str, Enum):
    """What the system pallet does when a counter is at its maximum."""
    ERROR = "error"
    SATURATE = "saturate"
    WRAP = "wrap"


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = DEFAULT_LOG_LEVEL
    file: Optional[str] = None
    format: str = DEFAULT_LOG_FORMAT
    max_size_mb: int = 10
    backup_count: int = 3


@dataclass
class CounterConfig:
    """Block number and nonce configuration."""
    overflow_policy: str = DEFAULT_COUNTER_POLICY

    @property
    def policy(self) -> CounterOverflowPolicy:
        return CounterOverflowPolicy(self.overflow_policy)


@dataclass
class GenesisConfig:
    """Balances seeded into a fresh runtime by the driver."""
    balances: Dict[str, int] = field(default_factory=dict)


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Only runtime behaviour lives here. The associated types (AccountId,
    Balance, BlockNumber, Nonce) are bound on the Runtime class itself.
    """
    name: str = "ledger-runtime"

    counters: CounterConfig = field(default_factory=CounterConfig)
    genesis: GenesisConfig = field(default_factory=GenesisConfig)
    log: LogConfig = field(default_factory=LogConfig)

    def validate(self) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        valid_policies = [p.value for p in CounterOverflowPolicy]
        if self.counters.overflow_policy not in valid_policies:
            errors.append(
                f"Invalid overflow_policy: {self.counters.overflow_policy} "
                f"(expected one of {', '.join(valid_policies)})"
            )

        for account, amount in self.genesis.balances.items():
            if not account:
                errors.append("Genesis account id cannot be empty")
            if isinstance(amount, bool) or not isinstance(amount, int) \
                    or amount < 0 or amount > MAX_BALANCE:
                errors.append(f"Invalid genesis balance for {account}: {amount}")

        if not isinstance(getattr(logging, self.log.level.upper(), None), int):
            errors.append(f"Invalid log level: {self.log.level}")

        return errors

    def to_dict(self) -> dict:
        """Export configuration as dictionary."""
        return {
            "name": self.name,
            "counters": asdict(self.counters),
            "genesis": asdict(self.genesis),
            "log": asdict(self.log),
        }

    def save(self, path: str) -> None:
        """Save configuration to file."""
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

        logger.info(f"Configuration saved to {path}")

    @classmethod
    def load(cls, path: str) -> "RuntimeConfig":
        """
        Load configuration from file.

        Raises:
            InvalidConfigError: a section holds keys its dataclass does not know
        """
        with open(path, 'r') as f:
            data = json.load(f)

        config = cls(name=data.get("name", "ledger-runtime"))

        errors = []
        for section, section_type in SECTIONS.items():
            if section not in data:
                continue
            try:
                setattr(config, section, section_type(**data[section]))
            except TypeError as e:
                errors.append(f"Section {section}: {e}")

        if errors:
            raise InvalidConfigError(errors)

        logger.info(f"Configuration loaded from {path}")
        return config

    @classmethod
    def default(cls) -> "RuntimeConfig":
        """Configuration used by the demo driver."""
        config = cls()
        config.genesis.balances = {"alice": 100}
        return config


SECTIONS = {
    "counters": CounterConfig,
    "genesis": GenesisConfig,
    "log": LogConfig,
}


def build_log_handlers(config: LogConfig) -> List[logging.Handler]:
    """Console handler, plus a size-rotated file handler when log.file is set."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]

    if config.file:
        from logging.handlers import RotatingFileHandler
        handlers.append(RotatingFileHandler(
            config.file,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        ))

    return handlers


def setup_logging(config: LogConfig) -> None:
    """
    Configure root logging for the demo driver.

    Unknown level names fall back to INFO here; RuntimeConfig.validate
    reports them separately.
    """
    logging.basicConfig(
        level=getattr(logging, config.level.upper(), logging.INFO),
        format=config.format,
        handlers=build_log_handlers(config),
    )
