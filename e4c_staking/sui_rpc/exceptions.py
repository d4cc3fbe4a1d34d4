"""Custom exceptions for the E4C staking scripts."""


class StakingRpcError(Exception):
    """Base exception for staking RPC operations."""


class MissingConfigurationError(StakingRpcError):
    """Raised when a required environment variable is missing or empty."""


class InvalidNetworkError(StakingRpcError):
    """Raised when SUI_NETWORK is neither a known alias nor an http(s) URL."""


class NetworkRequestError(StakingRpcError):
    """Raised when a JSON-RPC request fails at the transport or RPC level."""


class ObjectNotFoundError(StakingRpcError):
    """Raised when no owned object satisfies a selection predicate."""


class InvalidReceiptIdError(StakingRpcError):
    """Raised when an unstake is requested without a staking receipt id."""


class TransactionSubmissionError(StakingRpcError):
    """Raised when the network rejects a transaction or its effects report a failure."""

    def __init__(self, message: str, digest=None):
        super().__init__(message)
        self.digest = digest
