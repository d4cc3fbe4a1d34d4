from typing import Any, Optional, Union

from dataclasses import dataclass, field
from enum import Enum

from e4c_staking.sui_rpc.exceptions import StakingRpcError


class CommandType(Enum):
    """Command names accepted on the command line."""

    SplitCoins = "splitCoins"
    TopUpGamingPool = "topUpGamingPool"
    TransferE4CToPlayer = "transferE4CToPlayer"
    Stake = "stake"
    Unstake = "unstake"


@dataclass(frozen=True)
class ObjectArg:
    """Reference to an on-chain object (owned or shared) by id."""

    object_id: str


@dataclass(frozen=True)
class PureArg:
    """Literal value passed to a Move call, serialized with the given type tag."""

    value: Any
    type_tag: str = "u64"


@dataclass(frozen=True)
class Result:
    """Handle on the value produced by the operation at ``index`` in the same transaction."""

    index: int


Argument = Union[ObjectArg, PureArg, Result]


@dataclass(frozen=True)
class SplitCoin:
    coin: str
    amount: int


@dataclass(frozen=True)
class TransferObjects:
    objects: tuple[Union[str, Result], ...]
    recipient: str


@dataclass(frozen=True)
class MoveCall:
    target: str
    arguments: tuple[Argument, ...]


Operation = Union[SplitCoin, TransferObjects, MoveCall]


@dataclass
class TransactionRequest:
    """Ordered list of operations signed and submitted as one programmable transaction."""

    sender: str
    operations: list[Operation] = field(default_factory=list)
    gas_budget: Optional[int] = None

    def _append(self, operation: Operation) -> Result:
        self.operations.append(operation)
        return Result(len(self.operations) - 1)

    def split_coin(self, coin: str, amount: int) -> Result:
        return self._append(SplitCoin(coin=coin, amount=amount))

    def transfer_objects(self, objects: list[Union[str, Result]], recipient: str) -> None:
        self._append(TransferObjects(objects=tuple(objects), recipient=recipient))

    def move_call(self, target: str, arguments: list[Argument]) -> Result:
        return self._append(MoveCall(target=target, arguments=tuple(arguments)))

    def set_gas_budget(self, gas_budget: int) -> None:
        self.gas_budget = gas_budget

    def operations_of(self, kind: type) -> list:
        return [op for op in self.operations if isinstance(op, kind)]


@dataclass(frozen=True)
class Signer:
    """Address derived from a mnemonic phrase; the client that derived it holds the signing key."""

    address: str


@dataclass(frozen=True)
class ExecutionResult:
    digest: str
    status: str
    effects: dict[str, Any] = field(default_factory=dict)


@dataclass
class ActionResult:
    """Outcome of one staking action: the submitted request and either its execution or the failure cause."""

    request: Optional[TransactionRequest] = None
    execution: Optional[ExecutionResult] = None
    error: Optional[StakingRpcError] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None and self.execution is not None

    @property
    def digest(self) -> Optional[str]:
        if self.execution is not None:
            return self.execution.digest
        return getattr(self.error, "digest", None)
