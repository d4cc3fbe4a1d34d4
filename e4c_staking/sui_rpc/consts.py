SUI_CLOCK_OBJECT_ID = "0x6"

# Size of one split E4C coin
COIN_SIZE = 10_000
DEFAULT_NUMBER_OF_COINS = 5

# Minimum balance of the coin placed in the gaming liquidity pool
POOL_TOP_UP_MIN_BALANCE = 200

STAKING_DURATION_DAYS = 90
GAS_BUDGET = 1_000_000_000

DEFAULT_DERIVATION_PATH = "m/44'/784'/0'/0'/0'"

SUI_NETWORK_URLS = {
    "mainnet": "https://fullnode.mainnet.sui.io:443",
    "testnet": "https://fullnode.testnet.sui.io:443",
    "devnet": "https://fullnode.devnet.sui.io:443",
    "localnet": "http://127.0.0.1:9000",
}

# Page size requested from suix_getOwnedObjects (the node caps it at 50)
OWNED_OBJECTS_PAGE_SIZE = 50


def e4c_coin_type(e4c_package: str) -> str:
    return f"0x2::coin::Coin<{e4c_package}::e4c::E4C>"


def staking_target(staking_package: str, function: str) -> str:
    return f"{staking_package}::staking::{function}"
