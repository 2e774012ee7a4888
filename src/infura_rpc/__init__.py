__version__ = "0.1.0"

__all__ = [
    # Client
    "InfuraClient",
    "RpcClient",
    "NETWORK_URLS",
    "DEFAULT_NETWORK",
    # Errors
    "InfuraError",
    "InfuraCallError",
    "InvalidApiKeyError",
    "InvalidNetworkError",
    "InvalidEthereumAddressError",
    # Address validation
    "ETHEREUM_ADDRESS_REGEX",
    "is_ethereum_address",
    "validate_ethereum_address",
    "to_checksum",
    # Configuration
    "client_from_env",
]

from .address import (
    ETHEREUM_ADDRESS_REGEX,
    is_ethereum_address,
    to_checksum,
    validate_ethereum_address,
)
from .client import DEFAULT_NETWORK, NETWORK_URLS, InfuraClient, RpcClient
from .config import client_from_env
from .errors import (
    InfuraCallError,
    InfuraError,
    InvalidApiKeyError,
    InvalidEthereumAddressError,
    InvalidNetworkError,
)
