"""
Sui network client used by the staking actions.

Listing owned objects goes straight to the fullnode JSON-RPC API over httpx.
Key derivation, transaction building, signing and execution go through pysui.
"""

from typing import Any, Optional, Protocol

import itertools
import logging

import httpx
from pysui import SuiConfig, SyncClient
from pysui.abstracts.client_keypair import SignatureScheme
from pysui.sui.sui_txn.sync_transaction import SuiTransaction as SyncTransaction
from pysui.sui.sui_types.address import SuiAddress
from pysui.sui.sui_types.scalars import ObjectID, SuiU64

from e4c_staking._version import SDK_VERSION
from e4c_staking.sui_rpc.consts import DEFAULT_DERIVATION_PATH, OWNED_OBJECTS_PAGE_SIZE
from e4c_staking.sui_rpc.exceptions import NetworkRequestError, TransactionSubmissionError
from e4c_staking.sui_rpc.models import OwnedObject
from e4c_staking.sui_rpc.types import (
    ExecutionResult,
    MoveCall,
    ObjectArg,
    PureArg,
    Result,
    Signer,
    SplitCoin,
    TransactionRequest,
    TransferObjects,
)


class NetworkClient(Protocol):
    """Capabilities the staking actions need from the network."""

    def list_owned_objects(self, address: str) -> list[OwnedObject]: ...

    def sign_and_execute(self, request: TransactionRequest, signer: Signer) -> ExecutionResult: ...

    def derive_signer(self, mnemonic_phrase: str) -> Signer: ...

    def close(self) -> None: ...


class SuiNetworkClient:
    """NetworkClient backed by a Sui fullnode."""

    def __init__(
        self,
        rpc_url: str,
        derivation_path: str = DEFAULT_DERIVATION_PATH,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.rpc_url = rpc_url
        self.derivation_path = derivation_path
        self.logger = logging.getLogger("e4c_staking.client")
        self.logger.info(f"Connecting to {rpc_url}")

        self._http = httpx.Client(
            timeout=timeout,
            transport=transport,
            headers={
                "Content-Type": "application/json",
                "User-Agent": f"e4c-staking-scripts/{SDK_VERSION}",
            },
        )
        self._request_ids = itertools.count(1)
        self._signers: dict[str, Signer] = {}
        self._sui_config: Optional[SuiConfig] = None
        self._sui_client: Optional[SyncClient] = None

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "SuiNetworkClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -- JSON-RPC ---------------------------------------------------------

    def _rpc(self, method: str, params: list[Any]) -> Any:
        payload = {"jsonrpc": "2.0", "id": next(self._request_ids), "method": method, "params": params}
        self.logger.debug(f"RPC request: {payload}")

        try:
            response = self._http.post(self.rpc_url, json=payload)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as e:
            raise NetworkRequestError(f"{method} request failed: {e}") from e
        except ValueError as e:
            raise NetworkRequestError(f"{method} returned a non-JSON response") from e

        if not isinstance(body, dict):
            raise NetworkRequestError(f"{method} returned a malformed response: {body!r}")

        if body.get("error"):
            error = body["error"]
            message = error.get("message", error) if isinstance(error, dict) else error
            raise NetworkRequestError(f"{method} failed: {message}")

        if not isinstance(body.get("result"), dict):
            raise NetworkRequestError(f"{method} returned no result")

        return body["result"]

    def list_owned_objects(self, address: str) -> list[OwnedObject]:
        """List every object owned by ``address``, following pagination cursors."""
        query = {"options": {"showType": True, "showContent": True}}
        objects: list[OwnedObject] = []
        cursor = None

        while True:
            page = self._rpc("suix_getOwnedObjects", [address, query, cursor, OWNED_OBJECTS_PAGE_SIZE])
            for item in page.get("data", []):
                if item.get("data"):
                    objects.append(OwnedObject.model_validate(item["data"]))
                else:
                    self.logger.debug(f"Skipping unreadable object entry: {item.get('error')}")

            cursor = page.get("nextCursor")
            if not page.get("hasNextPage") or cursor is None:
                break

        self.logger.debug(f"Address {address} owns {len(objects)} objects")
        return objects

    # -- Keys and transactions (pysui) ------------------------------------

    @property
    def sui_config(self) -> SuiConfig:
        if self._sui_config is None:
            self._sui_config = SuiConfig.user_config(rpc_url=self.rpc_url)
        return self._sui_config

    @property
    def sui_client(self) -> SyncClient:
        # SyncClient queries the node on construction, so build it only when a transaction is sent
        if self._sui_client is None:
            self._sui_client = SyncClient(self.sui_config)
        return self._sui_client

    def derive_signer(self, mnemonic_phrase: str) -> Signer:
        """Recover the Ed25519 keypair for ``mnemonic_phrase`` and register it for signing."""
        if mnemonic_phrase not in self._signers:
            _, address = self.sui_config.recover_keypair_and_address(
                SignatureScheme.ED25519, mnemonic_phrase, self.derivation_path
            )
            # The keypair stays registered in the pysui config, which signs for the sender address
            self._signers[mnemonic_phrase] = Signer(address=address.address)
        return self._signers[mnemonic_phrase]

    def _to_pysui_argument(self, argument, results: list):
        if isinstance(argument, Result):
            return results[argument.index]
        if isinstance(argument, ObjectArg):
            return ObjectID(argument.object_id)
        if isinstance(argument, PureArg):
            if argument.type_tag == "u64":
                return SuiU64(int(argument.value))
            return argument.value
        if isinstance(argument, str):
            return ObjectID(argument)
        raise TypeError(f"Unsupported transaction argument: {argument!r}")

    def _build_transaction(self, request: TransactionRequest) -> SyncTransaction:
        txn = SyncTransaction(client=self.sui_client, initial_sender=SuiAddress(request.sender))
        results: list = []

        for operation in request.operations:
            if isinstance(operation, SplitCoin):
                results.append(txn.split_coin(coin=ObjectID(operation.coin), amounts=[operation.amount]))
            elif isinstance(operation, TransferObjects):
                txn.transfer_objects(
                    transfers=[self._to_pysui_argument(obj, results) for obj in operation.objects],
                    recipient=SuiAddress(operation.recipient),
                )
                results.append(None)
            elif isinstance(operation, MoveCall):
                results.append(
                    txn.move_call(
                        target=operation.target,
                        arguments=[self._to_pysui_argument(arg, results) for arg in operation.arguments],
                    )
                )
            else:
                raise TypeError(f"Unsupported transaction operation: {operation!r}")

        return txn

    def sign_and_execute(self, request: TransactionRequest, signer: Signer) -> ExecutionResult:
        """Sign ``request`` as ``signer`` and execute it, waiting for local execution.

        Raises:
            TransactionSubmissionError: If the node rejects the transaction or its effects report a failure
        """
        if signer.address != request.sender:
            raise TransactionSubmissionError(f"Signer {signer.address} is not the transaction sender {request.sender}")

        gas_budget = str(request.gas_budget) if request.gas_budget is not None else ""

        # Building resolves object references against the node, so it fails like execution does
        try:
            txn = self._build_transaction(request)
            result = txn.execute(gas_budget=gas_budget)
        except (httpx.HTTPError, ValueError) as e:
            raise TransactionSubmissionError(f"Transaction could not be submitted: {e}") from e

        if isinstance(result, ValueError):
            raise TransactionSubmissionError(f"Transaction could not be submitted: {result}") from result

        if not result.is_ok():
            raise TransactionSubmissionError(f"Transaction rejected: {result.result_string}")

        response = result.result_data
        status = response.effects.status
        effects = response.effects.to_dict()

        if status.status != "success":
            raise TransactionSubmissionError(
                f"Transaction {response.digest} failed: {status.error}", digest=response.digest
            )

        return ExecutionResult(digest=response.digest, status=status.status, effects=effects)
