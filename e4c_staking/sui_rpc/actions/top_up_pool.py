from typing import Optional

from dataclasses import dataclass

from e4c_staking.sui_rpc.consts import POOL_TOP_UP_MIN_BALANCE, staking_target
from e4c_staking.sui_rpc.types import ActionResult, ObjectArg, TransactionRequest
from e4c_staking.sui_rpc.utils.object_selection import coin_predicate
from e4c_staking.sui_rpc.utils.transaction_utils import run_action, select_owned_object


@dataclass
class TopUpParams:
    """Data class to store gaming pool top-up parameters."""

    min_balance: int = POOL_TOP_UP_MIN_BALANCE  # Minimum balance of the E4C coin placed in the pool


def build_top_up_transaction(sender: str, staking_package: str, pool: str, coin: str) -> TransactionRequest:
    """Place ``coin`` in the gaming liquidity ``pool``."""
    tx = TransactionRequest(sender=sender)
    tx.move_call(staking_target(staking_package, "place_in_pool"), [ObjectArg(pool), ObjectArg(coin)])
    return tx


def top_up_gaming_pool(config: dict, params: Optional[TopUpParams] = None) -> ActionResult:
    """
    Tops up the gaming liquidity pool with an E4C coin owned by the admin.

    Args:
        config (dict): Configuration dictionary containing the network client and signers. Check out config.py for more details.
        params (TopUpParams): Minimum balance of the coin to place in the pool.

    Returns:
        ActionResult: Execution result of the place_in_pool call, or the failure cause.
    """
    params = params or TopUpParams()
    admin = config["admin"]

    def assemble() -> TransactionRequest:
        coin = select_owned_object(config, admin, coin_predicate(config["e4c_coin_type"], params.min_balance))
        return build_top_up_transaction(
            admin.address, config["staking_package"], config["game_liquidity_pool"], coin.object_id
        )

    return run_action(config, admin, assemble)
