"""Unit tests for address validation."""

from __future__ import annotations

import pytest

from infura_rpc.address import (
    ETHEREUM_ADDRESS_REGEX,
    is_ethereum_address,
    to_checksum,
    validate_ethereum_address,
)
from infura_rpc.errors import InvalidEthereumAddressError

VALID = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"


class TestIsEthereumAddress:
    @pytest.mark.parametrize(
        "value",
        [
            VALID,
            VALID.lower(),
            "0x" + "0" * 40,
            "0x" + "F" * 40,
        ],
    )
    def test_accepts(self, value: str) -> None:
        assert is_ethereum_address(value)
        assert ETHEREUM_ADDRESS_REGEX.fullmatch(value)

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "0x",
            "0x" + "0" * 39,
            "0x" + "0" * 41,
            "5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
            "0X" + "0" * 40,
            "0x" + "g" * 40,
            "0x" + "0" * 39 + " ",
            VALID + "\n",
        ],
    )
    def test_rejects(self, value: str) -> None:
        assert not is_ethereum_address(value)

    @pytest.mark.parametrize("value", [None, 0, b"0x" + b"0" * 40])
    def test_rejects_non_strings(self, value: object) -> None:
        assert not is_ethereum_address(value)


class TestValidateEthereumAddress:
    def test_returns_value_unchanged(self) -> None:
        assert validate_ethereum_address(VALID.lower()) == VALID.lower()

    def test_raises(self) -> None:
        with pytest.raises(InvalidEthereumAddressError, match="0xabc"):
            validate_ethereum_address("0xabc")

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            validate_ethereum_address("nope")


class TestToChecksum:
    def test_checksums_lowercase(self) -> None:
        assert to_checksum(VALID.lower()) == VALID

    def test_rejects_malformed(self) -> None:
        with pytest.raises(InvalidEthereumAddressError):
            to_checksum("0x1234")
