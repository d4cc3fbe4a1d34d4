"""Test helpers for the E4C staking scripts."""

from .fake_client import (
    ADMIN_ADDRESS,
    ADMIN_PHRASE,
    PLAYER_ADDRESS,
    PLAYER_PHRASE,
    FakeNetworkClient,
    make_coin,
)

__all__ = [
    "ADMIN_ADDRESS",
    "ADMIN_PHRASE",
    "PLAYER_ADDRESS",
    "PLAYER_PHRASE",
    "FakeNetworkClient",
    "make_coin",
]
