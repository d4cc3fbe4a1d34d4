#!/usr/bin/env python3
"""
E4C staking commands.

Usage:
    python -m e4c_staking splitCoins [count]
    python -m e4c_staking topUpGamingPool
    python -m e4c_staking transferE4CToPlayer
    python -m e4c_staking stake
    python -m e4c_staking unstake <staking_receipt_id>

Configuration is read from .env and .env.staking (see e4c_staking/sui_rpc/config.py).
"""

from typing import Callable, Optional

import argparse
import logging
import os

from e4c_staking.sui_rpc.actions import (
    SplitCoinsParams,
    UnstakingParams,
    split_coins,
    stake,
    top_up_gaming_pool,
    transfer_e4c_to_player,
    unstake,
)
from e4c_staking.sui_rpc.config import get_config
from e4c_staking.sui_rpc.exceptions import StakingRpcError
from e4c_staking.sui_rpc.types import ActionResult, CommandType

logger = logging.getLogger("e4c_staking.cli")

COMMANDS = [command.value for command in CommandType]


def _split_coins(config: dict, args: list[str]) -> ActionResult:
    if args:
        return split_coins(config, SplitCoinsParams(number_of_coins=int(args[0])))
    return split_coins(config)


def _unstake(config: dict, args: list[str]) -> ActionResult:
    # Provide the staking receipt as an argument
    return unstake(config, UnstakingParams(staking_receipt=args[0] if args else ""))


# Most positional arguments each command accepts
MAX_ARGS = {
    CommandType.SplitCoins: 1,
    CommandType.TopUpGamingPool: 0,
    CommandType.TransferE4CToPlayer: 0,
    CommandType.Stake: 0,
    CommandType.Unstake: 1,
}

HANDLERS: dict[CommandType, Callable[[dict, list[str]], ActionResult]] = {
    CommandType.SplitCoins: _split_coins,
    CommandType.TopUpGamingPool: lambda config, args: top_up_gaming_pool(config),
    CommandType.TransferE4CToPlayer: lambda config, args: transfer_e4c_to_player(config),
    CommandType.Stake: lambda config, args: stake(config),
    CommandType.Unstake: _unstake,
}


def parse_command(command: Optional[str]) -> Optional[CommandType]:
    """Return the CommandType named by ``command``, or None for an absent or unknown command."""
    try:
        return CommandType(command)
    except ValueError:
        return None


def dispatch(command: CommandType, args: list[str], config: dict) -> ActionResult:
    return HANDLERS[command](config, args)


def setup_logging() -> None:
    level = os.environ.get("E4C_LOG_LEVEL", "INFO").upper()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
    root = logging.getLogger("e4c_staking")
    root.handlers = [handler]
    root.setLevel(level)
    root.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="e4c-staking",
        description="Split, transfer, stake and unstake E4C coins",
    )
    parser.add_argument("command", nargs="?", help=f"One of: {', '.join(COMMANDS)}")
    parser.add_argument("args", nargs="*", help="splitCoins: number of coins; unstake: staking receipt id")
    return parser


def report(command: CommandType, result: ActionResult) -> int:
    if result.succeeded:
        logger.info(f"{command.value} succeeded: {result.digest} ({result.execution.status})")
        logger.debug(f"Effects: {result.execution.effects}")
        return 0

    logger.error(f"{command.value} failed: {type(result.error).__name__}: {result.error}")
    if result.digest:
        logger.error(f"Transaction digest: {result.digest}")
    return 1


def main(argv: Optional[list[str]] = None, config_factory: Callable[[], dict] = get_config) -> int:
    parser = build_parser()
    parsed = parser.parse_args(argv)

    command = parse_command(parsed.command)
    if command is None:
        if parsed.command is None:
            print("Please provide a command")
        else:
            print(f"Unknown command: {parsed.command}")
        parser.print_usage()
        return 0

    if len(parsed.args) > MAX_ARGS[command]:
        parser.error(f"{command.value} got unexpected arguments: {' '.join(parsed.args[MAX_ARGS[command]:])}")

    count = parsed.args[0] if command == CommandType.SplitCoins and parsed.args else None
    if count is not None and not (count.isdigit() and int(count) > 0):
        parser.error(f"splitCoins expects a positive number of coins, got '{parsed.args[0]}'")

    setup_logging()

    try:
        config = config_factory()
    except StakingRpcError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        return report(command, dispatch(command, parsed.args, config))
    finally:
        config["client"].close()


if __name__ == "__main__":
    raise SystemExit(main())
