from e4c_staking.sui_rpc.types import ActionResult, TransactionRequest
from e4c_staking.sui_rpc.utils.object_selection import coin_predicate
from e4c_staking.sui_rpc.utils.transaction_utils import run_action, select_owned_object


def build_transfer_transaction(sender: str, coin: str, recipient: str) -> TransactionRequest:
    tx = TransactionRequest(sender=sender)
    tx.transfer_objects([coin], recipient)
    return tx


def transfer_e4c_to_player(config: dict) -> ActionResult:
    """
    Transfers one E4C coin owned by the admin to the player address.

    Args:
        config (dict): Configuration dictionary containing the network client and signers. Check out config.py for more details.

    Returns:
        ActionResult: Execution result of the transfer, or the failure cause.
    """
    admin = config["admin"]
    player = config["player"]

    def assemble() -> TransactionRequest:
        coin = select_owned_object(config, admin, coin_predicate(config["e4c_coin_type"]))
        return build_transfer_transaction(admin.address, coin.object_id, player.address)

    return run_action(config, admin, assemble)
