"""
Ledger Runtime Test Fixtures
"""

import pytest

from ledger_runtime.config import CounterOverflowPolicy, RuntimeConfig
from ledger_runtime.core.types import U32, U64, U128
from ledger_runtime.pallets import balances, system
from ledger_runtime.runtime import Runtime


class PalletConfig:
    """Associated types for pallets under test, independent of Runtime."""
    AccountId = str
    Balance = U128
    BlockNumber = U64
    Nonce = U32


class TinyConfig:
    """Narrow counters so overflow paths are reachable."""
    AccountId = str
    Balance = U32
    BlockNumber = U32
    Nonce = U32


@pytest.fixture
def balances_pallet() -> balances.Pallet:
    """Empty balances pallet."""
    return balances.Pallet(PalletConfig)


@pytest.fixture
def system_pallet() -> system.Pallet:
    """Fresh system pallet."""
    return system.Pallet(PalletConfig)


@pytest.fixture
def tiny_system():
    """Factory for a system pallet with u32 counters and a given policy."""
    def factory(policy: CounterOverflowPolicy = CounterOverflowPolicy.ERROR) -> system.Pallet:
        return system.Pallet(TinyConfig, policy)
    return factory


@pytest.fixture
def runtime() -> Runtime:
    """Fresh runtime with default configuration."""
    return Runtime()


@pytest.fixture
def funded_runtime(runtime) -> Runtime:
    """Runtime with alice seeded at 100."""
    runtime.balances.set_balance("alice", 100)
    return runtime


@pytest.fixture
def config_path(tmp_path) -> str:
    """Path for a temporary configuration file."""
    return str(tmp_path / "runtime.json")


@pytest.fixture
def demo_config() -> RuntimeConfig:
    """Configuration used by the demo driver."""
    return RuntimeConfig.default()
