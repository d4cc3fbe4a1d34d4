"""Selection of owned objects by type tag and balance."""

from typing import Callable, Iterable, Optional

from dataclasses import dataclass

from e4c_staking.sui_rpc.exceptions import ObjectNotFoundError
from e4c_staking.sui_rpc.models import OwnedObject

ObjectPredicate = Callable[[OwnedObject], bool]


@dataclass(frozen=True)
class CoinPredicate:
    """Matches objects of ``coin_type`` holding at least ``min_balance`` (inclusive) when it is set."""

    coin_type: str
    min_balance: Optional[int] = None

    def __call__(self, obj: OwnedObject) -> bool:
        if obj.object_type != self.coin_type:
            return False
        if self.min_balance is None:
            return True
        balance = obj.balance
        return balance is not None and balance >= self.min_balance

    def __str__(self) -> str:
        if self.min_balance is None:
            return self.coin_type
        return f"{self.coin_type} with balance >= {self.min_balance}"


def coin_predicate(coin_type: str, min_balance: Optional[int] = None) -> CoinPredicate:
    """Build a predicate matching objects of ``coin_type`` holding at least ``min_balance``.

    Args:
        coin_type: Full Move type tag the object must carry
        min_balance: Optional inclusive lower bound on the object's balance field

    Returns:
        CoinPredicate usable with ``find_object`` / ``select_object``
    """
    return CoinPredicate(coin_type=coin_type, min_balance=min_balance)


def find_object(objects: Iterable[OwnedObject], predicate: ObjectPredicate) -> Optional[OwnedObject]:
    """Return the first object satisfying ``predicate`` in input order, or None."""
    return next((obj for obj in objects if predicate(obj)), None)


def select_object(objects: Iterable[OwnedObject], predicate: ObjectPredicate) -> OwnedObject:
    """Return the first object satisfying ``predicate`` in input order.

    Raises:
        ObjectNotFoundError: If no object matches
    """
    objects = list(objects)
    selected = find_object(objects, predicate)
    if selected is None:
        raise ObjectNotFoundError(f"No owned object matches {predicate} (searched {len(objects)} objects)")
    return selected
