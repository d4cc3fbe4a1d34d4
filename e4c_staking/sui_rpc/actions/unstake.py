from dataclasses import dataclass

from e4c_staking.sui_rpc.consts import GAS_BUDGET, SUI_CLOCK_OBJECT_ID, staking_target
from e4c_staking.sui_rpc.exceptions import InvalidReceiptIdError
from e4c_staking.sui_rpc.types import ActionResult, ObjectArg, TransactionRequest
from e4c_staking.sui_rpc.utils.transaction_utils import run_action


@dataclass
class UnstakingParams:
    """Data class to store unstaking parameters."""

    staking_receipt: str  # ID of the StakingReceipt object owned by the player
    gas_budget: int = GAS_BUDGET


def build_unstake_transaction(
    sender: str, staking_package: str, staking_receipt: str, recipient: str, params: UnstakingParams
) -> TransactionRequest:
    """Redeem ``staking_receipt`` and send the rewards to ``recipient``."""
    tx = TransactionRequest(sender=sender)
    rewards = tx.move_call(
        staking_target(staking_package, "unstake"),
        [ObjectArg(staking_receipt), ObjectArg(SUI_CLOCK_OBJECT_ID)],
    )
    tx.transfer_objects([rewards], recipient)
    tx.set_gas_budget(params.gas_budget)
    return tx


def unstake(config: dict, params: UnstakingParams) -> ActionResult:
    """
    Unstakes a staking receipt owned by the player and claims the rewards.

    Args:
        config (dict): Configuration dictionary containing the network client and signers. Check out config.py for more details.
        params (UnstakingParams): The staking receipt to redeem.

    Returns:
        ActionResult: Execution result; the rewards are transferred to the player.
    """
    player = config["player"]

    def assemble() -> TransactionRequest:
        receipt = (params.staking_receipt or "").strip()
        if not receipt:
            raise InvalidReceiptIdError("A staking receipt id is required to unstake.")
        return build_unstake_transaction(player.address, config["staking_package"], receipt, player.address, params)

    return run_action(config, player, assemble)
