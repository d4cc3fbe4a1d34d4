from typing import Optional

from dataclasses import dataclass

from e4c_staking.sui_rpc.consts import COIN_SIZE, DEFAULT_NUMBER_OF_COINS
from e4c_staking.sui_rpc.types import ActionResult, TransactionRequest
from e4c_staking.sui_rpc.utils.object_selection import coin_predicate
from e4c_staking.sui_rpc.utils.transaction_utils import run_action, select_owned_object


@dataclass
class SplitCoinsParams:
    """Data class to store coin splitting parameters."""

    number_of_coins: int = DEFAULT_NUMBER_OF_COINS  # Number of pieces split off the source coin
    coin_size: int = COIN_SIZE  # Amount of E4C in each piece


def build_split_coins_transaction(
    sender: str, source_coin: str, recipient: str, params: SplitCoinsParams
) -> TransactionRequest:
    """Split ``params.number_of_coins`` coins of ``params.coin_size`` off ``source_coin`` for ``recipient``."""
    tx = TransactionRequest(sender=sender)
    for _ in range(params.number_of_coins):
        coin = tx.split_coin(source_coin, params.coin_size)
        tx.transfer_objects([coin], recipient)
    return tx


def split_coins(config: dict, params: Optional[SplitCoinsParams] = None) -> ActionResult:
    """
    Splits an E4C coin owned by the admin into fixed-size coins kept by the admin.

    Args:
        config (dict): Configuration dictionary containing the network client and signers. Check out config.py for more details.
        params (SplitCoinsParams): Number of coins and coin size; defaults to 5 coins of 10_000.

    Returns:
        ActionResult: Execution result of the split transaction, or the failure cause.
    """
    params = params or SplitCoinsParams()
    admin = config["admin"]

    def assemble() -> TransactionRequest:
        source = select_owned_object(config, admin, coin_predicate(config["e4c_coin_type"], params.coin_size))
        return build_split_coins_transaction(admin.address, source.object_id, admin.address, params)

    return run_action(config, admin, assemble)
