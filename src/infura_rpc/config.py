"""
Configuration loading for the infura-rpc CLI.

Settings live in ~/.infura-rpc/.env (or the process environment):

    INFURA_API_KEY=<32 alphanumeric characters>
    INFURA_NETWORK=main

The InfuraClient itself never reads the environment; only the CLI and
client_from_env() do.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv, set_key

from .client import DEFAULT_NETWORK, InfuraClient, validate_api_key, validate_network


# Default config directory
INFURA_RPC_DIR = Path.home() / ".infura-rpc"
INFURA_RPC_ENV = INFURA_RPC_DIR / ".env"

API_KEY_VAR = "INFURA_API_KEY"
NETWORK_VAR = "INFURA_NETWORK"


def _load_env(env_path: Optional[Path]) -> Path:
    env_path = env_path or INFURA_RPC_ENV
    if env_path.exists():
        load_dotenv(env_path, override=True)
    return env_path


def load_api_key(env_path: Optional[Path] = None) -> str:
    """
    Load the Infura API key from .env file or environment.

    Args:
        env_path: Path to .env file (default: ~/.infura-rpc/.env)

    Returns:
        API key string (not validated here)

    Raises:
        ValueError: If INFURA_API_KEY is not set
    """
    env_path = _load_env(env_path)

    api_key = os.environ.get(API_KEY_VAR)
    if not api_key:
        raise ValueError(
            f"{API_KEY_VAR} not found. Run 'infura-rpc configure' or set "
            f"{API_KEY_VAR} in {env_path}"
        )
    return api_key


def load_network(env_path: Optional[Path] = None) -> str:
    _load_env(env_path)
    return os.environ.get(NETWORK_VAR) or DEFAULT_NETWORK


def save_api_key(
    api_key: str,
    env_path: Optional[Path] = None,
    network: Optional[str] = None,
) -> Path:
    """
    Store the key (and network, when given) in the settings file.

    Other variables and comments already in the file are left alone;
    the file is restricted to its owner on POSIX systems.

    Returns:
        Path written to

    Raises:
        InvalidApiKeyError: If api_key is malformed
        InvalidNetworkError: If network is given and not supported
    """
    validate_api_key(api_key)
    if network is not None:
        validate_network(network)

    env_path = env_path or INFURA_RPC_ENV
    env_path.parent.mkdir(parents=True, exist_ok=True)

    env_path.touch()
    set_key(env_path, API_KEY_VAR, api_key, quote_mode="never")
    if network is not None:
        set_key(env_path, NETWORK_VAR, network, quote_mode="never")

    if os.name != "nt":
        env_path.chmod(0o600)

    return env_path


def client_from_env(env_path: Optional[Path] = None, **kwargs: Any) -> InfuraClient:
    """Build an InfuraClient from INFURA_API_KEY / INFURA_NETWORK."""
    api_key = load_api_key(env_path)
    network = load_network(env_path)
    return InfuraClient(api_key, network, **kwargs)
