from typing import Optional

from dataclasses import dataclass

from e4c_staking.sui_rpc.consts import GAS_BUDGET, STAKING_DURATION_DAYS, SUI_CLOCK_OBJECT_ID, staking_target
from e4c_staking.sui_rpc.types import ActionResult, ObjectArg, PureArg, TransactionRequest
from e4c_staking.sui_rpc.utils.object_selection import coin_predicate
from e4c_staking.sui_rpc.utils.transaction_utils import run_action, select_owned_object


@dataclass
class StakingParams:
    """Data class to store staking parameters."""

    duration_days: int = STAKING_DURATION_DAYS  # Staking period passed to new_staking_receipt
    gas_budget: int = GAS_BUDGET


def build_stake_transaction(
    sender: str,
    staking_package: str,
    coin: str,
    pool: str,
    staking_config: str,
    recipient: str,
    params: StakingParams,
) -> TransactionRequest:
    """Stake ``coin`` for a staking receipt and send the receipt to ``recipient``."""
    tx = TransactionRequest(sender=sender)
    staking_receipt = tx.move_call(
        staking_target(staking_package, "new_staking_receipt"),
        [
            ObjectArg(coin),  # The E4C coin to stake
            ObjectArg(pool),
            ObjectArg(SUI_CLOCK_OBJECT_ID),
            ObjectArg(staking_config),
            PureArg(params.duration_days, "u64"),
        ],
    )
    tx.transfer_objects([staking_receipt], recipient)
    tx.set_gas_budget(params.gas_budget)
    return tx


def stake(config: dict, params: Optional[StakingParams] = None) -> ActionResult:
    """
    Stakes an E4C coin owned by the player into the gaming liquidity pool.

    Args:
        config (dict): Configuration dictionary containing the network client and signers. Check out config.py for more details.
        params (StakingParams): Staking duration in days and gas budget.

    Returns:
        ActionResult: Execution result; the staking receipt is transferred to the player.
    """
    params = params or StakingParams()
    player = config["player"]

    def assemble() -> TransactionRequest:
        coin = select_owned_object(config, player, coin_predicate(config["e4c_coin_type"]))
        return build_stake_transaction(
            player.address,
            config["staking_package"],
            coin.object_id,
            config["game_liquidity_pool"],
            config["staking_config"],
            player.address,
            params,
        )

    return run_action(config, player, assemble)
