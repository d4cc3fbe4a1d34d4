from e4c_staking.sui_rpc.utils.object_selection import CoinPredicate, coin_predicate, find_object, select_object
from e4c_staking.sui_rpc.utils.transaction_utils import run_action, select_owned_object, submit_transaction

__all__ = [
    "CoinPredicate",
    "coin_predicate",
    "find_object",
    "select_object",
    "run_action",
    "select_owned_object",
    "submit_transaction",
]
