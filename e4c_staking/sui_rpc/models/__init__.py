from e4c_staking.sui_rpc.models.owned_object import OwnedObject

__all__ = ["OwnedObject"]
