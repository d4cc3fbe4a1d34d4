"""Gathering configuration from environment variables and .env files"""

from typing import Optional

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from e4c_staking.sui_rpc.client import NetworkClient, SuiNetworkClient
from e4c_staking.sui_rpc.consts import DEFAULT_DERIVATION_PATH, SUI_NETWORK_URLS, e4c_coin_type
from e4c_staking.sui_rpc.exceptions import InvalidNetworkError, MissingConfigurationError

logger = logging.getLogger("e4c_staking.config")

ENV_FILES = (".env", ".env.staking")


def resolve_network_url(network: str) -> str:
    """Map a network alias (mainnet, testnet, devnet, localnet) or an http(s) URL to a fullnode URL."""
    alias = network.strip().lower()
    if alias in SUI_NETWORK_URLS:
        return SUI_NETWORK_URLS[alias]
    if network.startswith(("http://", "https://")):
        return network
    raise InvalidNetworkError(
        f"Invalid SUI_NETWORK '{network}'! Use an http(s) URL or one of: {', '.join(SUI_NETWORK_URLS)}."
    )


def _require(name: str) -> str:
    value = os.environ.get(name, "").strip()
    if not value:
        raise MissingConfigurationError(f"{name} environment variable is required.")
    return value


@dataclass
class StakingSettings:
    """Deployment parameters of the E4C staking setup"""

    network_url: str
    e4c_package: str
    staking_package: str
    game_liquidity_pool: str
    staking_config: str
    admin_phrase: str
    player_phrase: str
    derivation_path: str = DEFAULT_DERIVATION_PATH

    def __repr__(self) -> str:
        return (
            f"StakingSettings(network_url={self.network_url!r}, e4c_package={self.e4c_package!r}, "
            f"staking_package={self.staking_package!r}, game_liquidity_pool={self.game_liquidity_pool!r}, "
            f"staking_config={self.staking_config!r})"
        )

    @property
    def e4c_coin_type(self) -> str:
        return e4c_coin_type(self.e4c_package)

    @classmethod
    def from_env(cls) -> "StakingSettings":
        """Create a settings instance from environment variables.

        Variables are read from the process environment after loading ``.env`` and
        ``.env.staking``; values already present in the environment win.
        """
        for env_file in ENV_FILES:
            load_dotenv(env_file)

        return cls(
            network_url=resolve_network_url(_require("SUI_NETWORK")),
            e4c_package=_require("E4C_PACKAGE"),
            staking_package=_require("STAKING_PACKAGE"),
            game_liquidity_pool=_require("GAME_LIQUIDITY_POOL"),
            staking_config=_require("STAKING_CONFIG"),
            admin_phrase=_require("ADMIN_MNEMOMIC_PHRASE"),
            player_phrase=_require("PLAYER_MNEMOMIC_PHRASE"),
            derivation_path=os.environ.get("SUI_DERIVATION_PATH") or DEFAULT_DERIVATION_PATH,
        )


def build_config(settings: StakingSettings, client: NetworkClient) -> dict:
    """Derive both signers once and assemble the dict consumed by the actions."""
    admin = client.derive_signer(settings.admin_phrase)
    player = client.derive_signer(settings.player_phrase)
    logger.info(f"Admin address: {admin.address}")
    logger.info(f"Player address: {player.address}")

    return {
        "settings": settings,
        "client": client,
        "admin": admin,
        "player": player,
        "e4c_coin_type": settings.e4c_coin_type,
        "staking_package": settings.staking_package,
        "game_liquidity_pool": settings.game_liquidity_pool,
        "staking_config": settings.staking_config,
    }


def get_config(client: Optional[NetworkClient] = None) -> dict:
    """Get complete configuration for staking operations."""
    settings = StakingSettings.from_env()

    if client is not None:
        return build_config(settings, client)

    # The caller closes the client held in the returned config
    client = SuiNetworkClient(settings.network_url, derivation_path=settings.derivation_path)
    try:
        return build_config(settings, client)
    except Exception:
        client.close()
        raise
