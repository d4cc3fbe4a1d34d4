from e4c_staking.sui_rpc.actions.split_coins import SplitCoinsParams, build_split_coins_transaction, split_coins
from e4c_staking.sui_rpc.actions.stake import StakingParams, build_stake_transaction, stake
from e4c_staking.sui_rpc.actions.top_up_pool import TopUpParams, build_top_up_transaction, top_up_gaming_pool
from e4c_staking.sui_rpc.actions.transfer import build_transfer_transaction, transfer_e4c_to_player
from e4c_staking.sui_rpc.actions.unstake import UnstakingParams, build_unstake_transaction, unstake

__all__ = [
    "SplitCoinsParams",
    "build_split_coins_transaction",
    "split_coins",
    "StakingParams",
    "build_stake_transaction",
    "stake",
    "TopUpParams",
    "build_top_up_transaction",
    "top_up_gaming_pool",
    "build_transfer_transaction",
    "transfer_e4c_to_player",
    "UnstakingParams",
    "build_unstake_transaction",
    "unstake",
]
