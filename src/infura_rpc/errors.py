"""
Error types raised by the Infura client.

Local validation errors subclass ValueError; provider-reported JSON-RPC
errors subclass RuntimeError. Transport (httpx) and JSON parse errors are
never wrapped and reach the caller unchanged.
"""

from __future__ import annotations

from typing import Any, Optional


def _text(value: Any) -> str:
    return "" if value is None else str(value)


class InfuraError(Exception):
    """Base class for all infura_rpc errors."""


class InvalidApiKeyError(InfuraError, ValueError):
    """API key is not exactly 32 ASCII letters or digits."""


class InvalidNetworkError(InfuraError, ValueError):
    """Network identifier is not one of the supported networks."""


class InvalidEthereumAddressError(InfuraError, ValueError):
    """String is not a 0x-prefixed, 40 hex character address."""


class InfuraCallError(InfuraError, RuntimeError):
    """The provider answered a call with a JSON-RPC error object."""

    def __init__(self, method: str, error: Any) -> None:
        self.method = method
        self.error = error
        self.code: Optional[Any] = error.get("code") if isinstance(error, dict) else None
        self.message: Optional[Any] = error.get("message") if isinstance(error, dict) else error
        super().__init__(
            f"Error ({_text(self.code)}): Infura API call "
            f"{method} gave message: '{_text(self.message)}'"
        )

    def __reduce__(self):
        return (type(self), (self.method, self.error))


__all__ = [
    "InfuraError",
    "InvalidApiKeyError",
    "InvalidNetworkError",
    "InvalidEthereumAddressError",
    "InfuraCallError",
]
