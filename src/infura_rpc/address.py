"""Ethereum address validation."""

from __future__ import annotations

import re
from typing import Any

from eth_utils import to_checksum_address

from .errors import InvalidEthereumAddressError

ETHEREUM_ADDRESS_REGEX = re.compile(r"^0x[0-9a-fA-F]{40}$")


def is_ethereum_address(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return ETHEREUM_ADDRESS_REGEX.fullmatch(value) is not None


def validate_ethereum_address(value: Any) -> str:
    """
    Check that a value is address-shaped.

    Args:
        value: Candidate address string

    Returns:
        The value, unchanged

    Raises:
        InvalidEthereumAddressError: If value is not 0x + 40 hex characters
    """
    if not is_ethereum_address(value):
        raise InvalidEthereumAddressError(f"Invalid Ethereum address: {value!r}")
    return value


def to_checksum(value: Any) -> str:
    """Validate an address and return its EIP-55 checksummed form."""
    return to_checksum_address(validate_ethereum_address(value))
