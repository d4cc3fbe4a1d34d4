import pytest

from e4c_staking.sui_rpc.exceptions import ObjectNotFoundError
from e4c_staking.sui_rpc.models import OwnedObject
from e4c_staking.sui_rpc.utils.object_selection import CoinPredicate, coin_predicate, find_object, select_object
from tests.helpers import make_coin

OTHER_TYPE = "0x2::coin::Coin<0x2::sui::SUI>"


@pytest.mark.selection
def test_select_returns_first_match_in_input_order(coin_type):
    objects = [
        make_coin("0x1", OTHER_TYPE, 50_000),
        make_coin("0x2", coin_type, 500),
        make_coin("0x3", coin_type, 20_000),
        make_coin("0x4", coin_type, 30_000),
    ]

    assert select_object(objects, coin_predicate(coin_type)).object_id == "0x2"
    assert select_object(objects, coin_predicate(coin_type, 10_000)).object_id == "0x3"


@pytest.mark.selection
def test_select_without_match_raises_not_found(coin_type):
    objects = [make_coin("0x1", OTHER_TYPE, 50_000), make_coin("0x2", coin_type, 199)]

    with pytest.raises(ObjectNotFoundError, match="balance >= 200"):
        select_object(objects, coin_predicate(coin_type, 200))

    with pytest.raises(ObjectNotFoundError):
        select_object([], coin_predicate(coin_type))


@pytest.mark.selection
def test_find_object_returns_none_without_match(coin_type):
    assert find_object([make_coin("0x1", OTHER_TYPE)], coin_predicate(coin_type)) is None


@pytest.mark.selection
def test_min_balance_is_inclusive_and_requires_a_balance(coin_type):
    predicate = coin_predicate(coin_type, 200)

    assert predicate(make_coin("0x1", coin_type, 200))
    assert not predicate(make_coin("0x2", coin_type, 199))
    # Objects without a balance field never satisfy a balance threshold
    assert not predicate(make_coin("0x3", coin_type))


@pytest.mark.selection
def test_select_accepts_any_iterable(coin_type):
    objects = (make_coin(f"0x{i}", coin_type, i) for i in range(1, 4))

    assert select_object(objects, coin_predicate(coin_type, 2)).object_id == "0x2"


def test_owned_object_parses_rpc_shape():
    obj = OwnedObject.model_validate(
        {
            "objectId": "0xabc",
            "version": "7",
            "digest": "D1",
            "type": OTHER_TYPE,
            "content": {"dataType": "moveObject", "fields": {"balance": "12345", "id": {"id": "0xabc"}}},
        }
    )

    assert obj.object_id == "0xabc"
    assert obj.object_type == OTHER_TYPE
    assert obj.balance == 12345


def test_owned_object_balance_is_none_when_not_numeric():
    assert OwnedObject.model_validate({"objectId": "0x1", "content": {"fields": {"balance": "abc"}}}).balance is None
    assert OwnedObject.model_validate({"objectId": "0x1", "content": None}).balance is None
    assert OwnedObject.model_validate({"objectId": "0x1"}).balance is None


@pytest.mark.selection
def test_coin_predicate_describes_itself(coin_type):
    predicate = coin_predicate(coin_type, 200)

    assert isinstance(predicate, CoinPredicate)
    assert predicate == CoinPredicate(coin_type, 200)
    assert str(predicate) == f"{coin_type} with balance >= 200"
    assert str(coin_predicate(coin_type)) == coin_type
