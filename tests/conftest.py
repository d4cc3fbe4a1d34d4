"""
Pytest fixtures for the E4C staking scripts.

Every fixture works offline: the network client is an in-memory fake and the
signers are plain addresses, so no key material or fullnode is needed.
"""

import pytest

from e4c_staking.sui_rpc.config import StakingSettings, build_config
from tests.helpers import ADMIN_PHRASE, PLAYER_PHRASE, FakeNetworkClient

E4C_PACKAGE = "0xe4c0"
STAKING_PACKAGE = "0x5a4e"
GAME_LIQUIDITY_POOL = "0x9001"
STAKING_CONFIG = "0xc0f1"

STAKING_ENV_VARS = [
    "SUI_NETWORK",
    "E4C_PACKAGE",
    "STAKING_PACKAGE",
    "GAME_LIQUIDITY_POOL",
    "STAKING_CONFIG",
    "ADMIN_MNEMOMIC_PHRASE",
    "PLAYER_MNEMOMIC_PHRASE",
    "SUI_DERIVATION_PATH",
]


@pytest.fixture
def settings() -> StakingSettings:
    return StakingSettings(
        network_url="http://127.0.0.1:9000",
        e4c_package=E4C_PACKAGE,
        staking_package=STAKING_PACKAGE,
        game_liquidity_pool=GAME_LIQUIDITY_POOL,
        staking_config=STAKING_CONFIG,
        admin_phrase=ADMIN_PHRASE,
        player_phrase=PLAYER_PHRASE,
    )


@pytest.fixture
def coin_type(settings) -> str:
    return settings.e4c_coin_type


@pytest.fixture
def fake_client() -> FakeNetworkClient:
    return FakeNetworkClient()


@pytest.fixture
def config(settings, fake_client) -> dict:
    return build_config(settings, fake_client)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory with none of the staking variables set."""
    for name in STAKING_ENV_VARS:
        # setenv first so monkeypatch restores the original state, including values set by load_dotenv
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path
