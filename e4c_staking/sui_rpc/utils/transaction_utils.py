"""Transaction utility functions for staking actions."""

from typing import Callable

import logging

from e4c_staking.sui_rpc.exceptions import StakingRpcError
from e4c_staking.sui_rpc.models import OwnedObject
from e4c_staking.sui_rpc.types import ActionResult, Signer, TransactionRequest
from e4c_staking.sui_rpc.utils.object_selection import ObjectPredicate, select_object

logger = logging.getLogger("e4c_staking.transactions")


def select_owned_object(config: dict, owner: Signer, predicate: ObjectPredicate) -> OwnedObject:
    """List the objects owned by ``owner`` and return the first one matching ``predicate``.

    Raises:
        NetworkRequestError: If the objects cannot be listed
        ObjectNotFoundError: If no owned object matches
    """
    objects = config["client"].list_owned_objects(owner.address)
    selected = select_object(objects, predicate)
    logger.info(f"Selected object {selected.object_id} (balance: {selected.balance})")
    return selected


def submit_transaction(config: dict, request: TransactionRequest, signer: Signer) -> ActionResult:
    """Sign and execute ``request``, folding a submission failure into the returned ActionResult."""
    logger.debug(f"Submitting {len(request.operations)} operations from {request.sender}: {request.operations}")

    try:
        execution = config["client"].sign_and_execute(request, signer)
    except StakingRpcError as e:
        return ActionResult(request=request, error=e)

    return ActionResult(request=request, execution=execution)


def run_action(config: dict, signer: Signer, assemble: Callable[[], TransactionRequest]) -> ActionResult:
    """Assemble a transaction and submit it as ``signer``.

    Any StakingRpcError raised while assembling (listing or selecting objects) or
    submitting is returned as a failed ActionResult rather than raised.
    """
    try:
        request = assemble()
    except StakingRpcError as e:
        return ActionResult(error=e)

    return submit_transaction(config, request, signer)
