"""
infura-rpc CLI

Command-line interface for calling Infura JSON-RPC endpoints.

Commands:
  call          - Invoke any JSON-RPC method
  block-number  - Show the latest block number
  balance       - Show the wei balance of an address
  networks      - List supported networks
  configure     - Save API key / network to ~/.infura-rpc/.env
"""

from __future__ import annotations

import json
import logging
import sys
from typing import NoReturn, Optional

import click
import httpx

from . import __version__
from . import config
from .client import NETWORK_URLS, InfuraClient
from .errors import InfuraError
from .eth import block_number, get_balance


# ============ Helpers ============


def _fail(message: str) -> NoReturn:
    click.secho(f"ERROR: {message}", fg="red", err=True)
    sys.exit(1)


def _make_client(ctx: click.Context) -> InfuraClient:
    """Build a client from CLI options, falling back to the .env file."""
    obj = ctx.obj
    try:
        api_key = obj["api_key"] or config.load_api_key()
        network = obj["network"] or config.load_network()
        return InfuraClient(api_key, network, transport=obj.get("transport"))
    except ValueError as exc:
        _fail(str(exc))


def _run(ctx: click.Context, fn, *args):
    client = _make_client(ctx)
    try:
        return fn(client, *args)
    except (InfuraError, httpx.HTTPError, ValueError) as exc:
        _fail(str(exc))


# ============ Main CLI Group ============


@click.group()
@click.version_option(version=__version__, prog_name="infura-rpc")
@click.option("--api-key", envvar="INFURA_API_KEY", default=None, help="Infura API key")
@click.option(
    "--network",
    envvar="INFURA_NETWORK",
    type=click.Choice(list(NETWORK_URLS)),
    default=None,
    help="Target network (default: main)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, api_key: Optional[str], network: Optional[str], verbose: bool) -> None:
    """Call Infura Ethereum JSON-RPC endpoints."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    ctx.ensure_object(dict)
    ctx.obj["api_key"] = api_key
    ctx.obj["network"] = network


# ============ Commands ============


@cli.command()
@click.argument("method")
@click.option("--params", "params_json", default="[]", help="Params as JSON array or object")
@click.pass_context
def call(ctx: click.Context, method: str, params_json: str) -> None:
    """Invoke METHOD and print the JSON result."""
    try:
        params = json.loads(params_json)
        if not isinstance(params, (list, dict)):
            raise ValueError("Params must be a JSON array or object")
    except (json.JSONDecodeError, ValueError) as exc:
        _fail(f"Invalid params: {exc}")

    result = _run(ctx, lambda client: client.call(method, params))
    click.echo(json.dumps(result, indent=2))


@cli.command("block-number")
@click.pass_context
def block_number_cmd(ctx: click.Context) -> None:
    """Show the latest block number."""
    click.echo(_run(ctx, block_number))


@cli.command()
@click.argument("address")
@click.option("--block", default="latest", help="Block tag or hex block number")
@click.pass_context
def balance(ctx: click.Context, address: str, block: str) -> None:
    """Show the wei balance of ADDRESS."""
    click.echo(_run(ctx, get_balance, address, block))


@cli.command()
def networks() -> None:
    """List supported networks."""
    for name, url in NETWORK_URLS.items():
        click.echo(f"  {name:<8} {url}")


@cli.command()
@click.option("--api-key", "key", required=True, help="Infura API key to store")
@click.option("--network", "net", type=click.Choice(list(NETWORK_URLS)), default=None)
def configure(key: str, net: Optional[str]) -> None:
    """Save API key (and network) to ~/.infura-rpc/.env."""
    try:
        path = config.save_api_key(key, network=net)
    except ValueError as exc:
        _fail(str(exc))
    click.echo(f"Saved to {path}")


# ============ Entry Points ============


def main() -> None:
    """infura-rpc CLI entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
