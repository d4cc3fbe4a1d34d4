"""
E4C staking scripts - operational commands for the E4C staking workflow on Sui.

- sui_rpc: actions that split, transfer, stake and unstake E4C coins
- cli: command dispatcher (``python -m e4c_staking <command>``)
"""

from e4c_staking._version import SDK_VERSION
from e4c_staking.sui_rpc import (
    ActionResult,
    SplitCoinsParams,
    StakingParams,
    TopUpParams,
    UnstakingParams,
    get_config,
    split_coins,
    stake,
    top_up_gaming_pool,
    transfer_e4c_to_player,
    unstake,
)

__all__ = [
    "SDK_VERSION",
    "ActionResult",
    "SplitCoinsParams",
    "StakingParams",
    "TopUpParams",
    "UnstakingParams",
    "get_config",
    "split_coins",
    "stake",
    "top_up_gaming_pool",
    "transfer_e4c_to_player",
    "unstake",
]
