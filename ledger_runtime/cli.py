"""
Ledger Runtime Demo Driver

Seeds a fresh runtime, executes one block of transfers and prints the
resulting state.

Usage:
    ledger-runtime-demo                     # Built-in demo block
    ledger-runtime-demo --json              # Dump state as JSON
    ledger-runtime-demo --config cfg.json   # Genesis/counters from file
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from dataclasses import asdict, dataclass, field
from typing import Iterable, List, Optional, Tuple

from ledger_runtime.config import GenesisConfig, RuntimeConfig, setup_logging
from ledger_runtime.errors import InvalidConfigError, RuntimeStateError
from ledger_runtime.runtime import Runtime

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transfer:
    """A balance transfer submitted by sender."""
    sender: str
    receiver: str
    amount: int


@dataclass
class BlockReport:
    """Outcome of execute_block."""
    block_number: int
    applied: List[Transfer] = field(default_factory=list)
    failed: List[Tuple[Transfer, RuntimeStateError]] = field(default_factory=list)


DEMO_TRANSFERS: List[Transfer] = [
    Transfer("alice", "bob", 30),
    Transfer("alice", "charlie", 20),
    Transfer("alice", "bob", 1000),
]


def seed_genesis(runtime: Runtime, genesis: GenesisConfig) -> None:
    """Write genesis balances into the runtime."""
    for account, amount in sorted(genesis.balances.items()):
        runtime.balances.set_balance(account, amount)
    logger.info(f"Seeded {len(genesis.balances)} genesis balances")


def execute_block(runtime: Runtime, transfers: Iterable[Transfer]) -> BlockReport:
    """
    Execute one block.

    1. Increment the block number
    2. For each transfer, bump the sender nonce then apply the transfer
    3. Failed transfers are reported and skipped; they never abort the block.
       A sender whose nonce cannot be bumped is not charged at all.
    """
    report = BlockReport(block_number=int(runtime.system.increment_block_number()))

    for tx in transfers:
        try:
            runtime.system.inc_nonce(tx.sender)
            runtime.balances.transfer(tx.sender, tx.receiver, tx.amount)
        except RuntimeStateError as e:
            logger.warning(f"Transfer {tx.sender} -> {tx.receiver} ({tx.amount}) failed: {e}")
            report.failed.append((tx, e))
        else:
            report.applied.append(tx)

    logger.info(
        f"Executed block {report.block_number}: "
        f"applied={len(report.applied)}, failed={len(report.failed)}"
    )
    return report


def format_state(runtime: Runtime, report: BlockReport) -> str:
    """Human-readable dump of runtime state."""
    lines = [f"Runtime {runtime.config.name}"]
    lines.append(f"  block_number: {int(runtime.system.block_number())}")

    lines.append("  balances:")
    for account, balance in runtime.balances.accounts():
        lines.append(f"    {account}: {int(balance)}")

    lines.append("  nonce:")
    for account, nonce in runtime.system.nonces():
        lines.append(f"    {account}: {int(nonce)}")

    if report.failed:
        lines.append("  failed:")
        for tx, error in report.failed:
            lines.append(f"    {tx.sender} -> {tx.receiver} ({tx.amount}): {error}")

    lines.append(f"  state_root: {runtime.state_root().hex()}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ledger-runtime-demo",
        description="Run one demo block against a fresh ledger runtime",
    )
    parser.add_argument("--config", help="Path to a JSON runtime configuration")
    parser.add_argument("--log-level", help="Override the configured log level")
    parser.add_argument("--json", action="store_true", help="Print state as JSON")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = RuntimeConfig.load(args.config) if args.config else RuntimeConfig.default()
        if args.log_level:
            config.log.level = args.log_level

        setup_logging(config.log)
        runtime = Runtime(config)
    except InvalidConfigError as e:
        parser.error(str(e))

    seed_genesis(runtime, config.genesis)
    report = execute_block(runtime, DEMO_TRANSFERS)

    if runtime.system.block_number() != 1:
        logger.error(f"Unexpected block number {runtime.system.block_number()}")
        return 1

    if args.json:
        dump = runtime.to_dict()
        dump["failed"] = [
            {"transfer": asdict(tx), "error": error.to_dict()}
            for tx, error in report.failed
        ]
        dump["state_root"] = runtime.state_root().hex()
        print(json.dumps(dump, indent=2))
    else:
        print(format_state(runtime, report))

    return 0


if __name__ == "__main__":
    sys.exit(main())
