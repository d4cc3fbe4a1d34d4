import sys

from e4c_staking.sui_rpc import get_config, stake, transfer_e4c_to_player, unstake
from e4c_staking.sui_rpc.actions import UnstakingParams
from e4c_staking.sui_rpc.types import ActionResult


def show(label: str, result: ActionResult) -> None:
    if result.succeeded:
        print(f"{label}: {result.digest}")
    else:
        print(f"{label} failed: {result.error}")


def main():
    """
    Example script sending an E4C coin from the admin to the player, staking it,
    and optionally unstaking a staking receipt passed as the first argument.
    """

    # Load configuration from .env and .env.staking
    config = get_config()
    print(f"Admin: {config['admin'].address}")
    print(f"Player: {config['player'].address}")

    # Give the player a coin to stake
    result = transfer_e4c_to_player(config)
    show("Transfer to player", result)
    if not result.succeeded:
        return

    # Stake it for 90 days; the staking receipt is sent to the player
    show("Stake", stake(config))

    # Unstaking needs the receipt id created by a previous stake
    if len(sys.argv) > 1:
        show("Unstake", unstake(config, UnstakingParams(staking_receipt=sys.argv[1])))


if __name__ == "__main__":
    main()
