"""
JSON-RPC client for Infura Ethereum endpoints.

One InfuraClient per (api key, network) pair. Each call() performs exactly
one HTTPS POST through a lazily created httpx.Client and returns the
`result` member of the response, or raises InfuraCallError when the
provider returns an `error` member.
"""

from __future__ import annotations

import logging
import re
import threading
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence, Union

import httpx

from .errors import InfuraCallError, InvalidApiKeyError, InvalidNetworkError

logger = logging.getLogger(__name__)

NETWORK_URLS: Mapping[str, str] = MappingProxyType({
    "main": "https://mainnet.infura.io/v3",
    "ropsten": "https://ropsten.infura.io/v3",
    "kovan": "https://kovan.infura.io/v3",
    "rinkeby": "https://rinkeby.infura.io/v3",
})

DEFAULT_NETWORK = "main"

API_KEY_REGEX = re.compile(r"^[a-zA-Z0-9]{32}$")

JSONRPC_VERSION = "2.0"
REQUEST_ID = 1

Params = Union[Sequence[Any], Mapping[str, Any]]


def validate_api_key(api_key: Any) -> str:
    if not isinstance(api_key, str) or API_KEY_REGEX.fullmatch(api_key) is None:
        raise InvalidApiKeyError("API key must be 32 ASCII letters or digits")
    return api_key


def validate_network(network: Any) -> str:
    if not isinstance(network, str) or network not in NETWORK_URLS:
        raise InvalidNetworkError(
            f"Unknown network {network!r}; expected one of: {', '.join(NETWORK_URLS)}"
        )
    return network


class InfuraClient:
    """
    Minimal Infura JSON-RPC client.

    Args:
        api_key: Infura project id (32 alphanumeric characters)
        network: Key of NETWORK_URLS (default: "main")
        transport: Optional httpx transport for the underlying client

    Raises:
        InvalidApiKeyError: If api_key is malformed
        InvalidNetworkError: If network is not supported
    """

    def __init__(
        self,
        api_key: str,
        network: str = DEFAULT_NETWORK,
        *,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        validate_api_key(api_key)
        validate_network(network)

        self._api_key = api_key
        self._network = network
        self._transport = transport
        self._conn: Optional[httpx.Client] = None
        self._conn_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"InfuraClient(network={self._network!r})"

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def network(self) -> str:
        return self._network

    @property
    def url(self) -> str:
        """Request endpoint: <network base URL>/<api key>."""
        return f"{NETWORK_URLS[self._network]}/{self._api_key}"

    def _masked_url(self) -> str:
        return f"{NETWORK_URLS[self._network]}/{self._api_key[:4]}..."

    @property
    def conn(self) -> httpx.Client:
        """HTTP client, created on first use and reused afterwards."""
        if self._conn is None:
            with self._conn_lock:
                if self._conn is None:
                    self._conn = httpx.Client(transport=self._transport)
        return self._conn

    def build_request(self, method: str, params: Params) -> dict[str, Any]:
        """Build the JSON-RPC 2.0 request object for a single call."""
        return {
            "jsonrpc": JSONRPC_VERSION,
            "method": method,
            "params": params,
            "id": REQUEST_ID,
        }

    def call(self, method: str, params: Params) -> Any:
        """
        Invoke a JSON-RPC method.

        Args:
            method: RPC method name (e.g., "eth_blockNumber")
            params: RPC parameters, passed through verbatim

        Returns:
            Result member of the RPC response

        Raises:
            InfuraCallError: If the response carries an error member
            httpx.HTTPError: On transport failure
            json.JSONDecodeError: If the response body is not JSON
            ValueError: If the response body is JSON but not an object
        """
        payload = self.build_request(method, params)
        logger.debug("POST %s %s (network=%s)", self._masked_url(), method, self._network)

        response = self.conn.post(
            self.url,
            json=payload,
            headers={"Content-Type": "application/json"},
        )
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(
                f"Infura API call {method} returned a non-object JSON body: {type(data).__name__}"
            )

        error = data.get("error")
        if error is not None:
            logger.debug("Infura call %s failed: %s", method, error)
            raise InfuraCallError(method, error)

        return data.get("result")


RpcClient = InfuraClient
