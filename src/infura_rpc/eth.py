"""
Convenience wrappers for common eth_* read methods.

Each helper issues a single InfuraClient.call and decodes hex quantities.
Address arguments are validated before any request is made.
"""

from __future__ import annotations

import time
from typing import Any, Optional

from .address import validate_ethereum_address
from .client import InfuraClient


def hex_to_int(value: str) -> int:
    """Decode a JSON-RPC hex quantity (e.g. "0x10") to an int."""
    return int(value, 16)


def block_number(client: InfuraClient) -> int:
    """
    Get the number of the most recent block.

    Returns:
        Block number
    """
    return hex_to_int(client.call("eth_blockNumber", []))


def get_balance(client: InfuraClient, address: str, block: str = "latest") -> int:
    """
    Get ETH balance for an address.

    Args:
        client: InfuraClient to call through
        address: 0x-prefixed address
        block: Block tag or hex block number

    Returns:
        Balance in wei

    Raises:
        InvalidEthereumAddressError: If address is malformed
    """
    validate_ethereum_address(address)
    return hex_to_int(client.call("eth_getBalance", [address, block]))


def get_nonce(client: InfuraClient, address: str, block: str = "latest") -> int:
    """
    Get transaction count (nonce) for an address.

    Raises:
        InvalidEthereumAddressError: If address is malformed
    """
    validate_ethereum_address(address)
    return hex_to_int(client.call("eth_getTransactionCount", [address, block]))


def get_gas_price(client: InfuraClient) -> int:
    """Get current gas price in wei."""
    return hex_to_int(client.call("eth_gasPrice", []))


def send_raw_transaction(client: InfuraClient, raw_tx: str) -> str:
    """Broadcast an already-signed transaction and return its hash."""
    return client.call("eth_sendRawTransaction", [raw_tx])


def get_transaction_receipt(client: InfuraClient, tx_hash: str) -> Optional[dict[str, Any]]:
    return client.call("eth_getTransactionReceipt", [tx_hash])


def wait_for_receipt(
    client: InfuraClient,
    tx_hash: str,
    timeout: float = 120,
    poll_interval: float = 2.0,
) -> dict[str, Any]:
    """
    Poll eth_getTransactionReceipt until the transaction is mined.

    Every poll is a separate call(); nothing is retried on error, so a
    provider or transport failure ends the wait immediately.

    Raises:
        TimeoutError: If no receipt appeared before the deadline
    """
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        receipt = get_transaction_receipt(client, tx_hash)
        if receipt is not None:
            return receipt
        time.sleep(poll_interval)

    raise TimeoutError(f"No receipt for {tx_hash} after {timeout}s")
