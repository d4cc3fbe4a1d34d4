# Actions
from e4c_staking.sui_rpc.actions import (
    SplitCoinsParams,
    StakingParams,
    TopUpParams,
    UnstakingParams,
    split_coins,
    stake,
    top_up_gaming_pool,
    transfer_e4c_to_player,
    unstake,
)

# Client
from e4c_staking.sui_rpc.client import NetworkClient, SuiNetworkClient

# Config
from e4c_staking.sui_rpc.config import StakingSettings, build_config, get_config, resolve_network_url

# Types
from e4c_staking.sui_rpc.models import OwnedObject
from e4c_staking.sui_rpc.types import ActionResult, CommandType, ExecutionResult, Signer, TransactionRequest

__all__ = [
    # Actions - Parameter classes
    "SplitCoinsParams",
    "StakingParams",
    "TopUpParams",
    "UnstakingParams",
    # Actions - Functions
    "split_coins",
    "stake",
    "top_up_gaming_pool",
    "transfer_e4c_to_player",
    "unstake",
    # Client
    "NetworkClient",
    "SuiNetworkClient",
    # Config
    "StakingSettings",
    "build_config",
    "get_config",
    "resolve_network_url",
    # Types
    "ActionResult",
    "CommandType",
    "ExecutionResult",
    "OwnedObject",
    "Signer",
    "TransactionRequest",
]
