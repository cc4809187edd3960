"""
Theurgy Impersonate - Drive a local development node.

Commands: impersonate, stop-impersonating, set-balance.  The node flavour
is chosen with --mode (anvil, hardhat, ganache).
"""

from __future__ import annotations

from typing import Optional

import click

from ..actions.testing import (
    impersonate_account,
    set_balance as set_balance_action,
    stop_impersonating_account,
)
from ..pneuma.client import TEST_CLIENT_MODES, TestClient, create_test_client
from .query import COMMAND_ERRORS, fail, rpc_url_option


mode_option = click.option(
    "--mode",
    type=click.Choice(TEST_CLIENT_MODES),
    envvar="PRAXIS_MODE",
    default=None,
    help="Development node flavour (default: PRAXIS_MODE or anvil)",
)


def _client(mode: Optional[str], rpc_url: Optional[str]) -> TestClient:
    return create_test_client(mode=mode, url=rpc_url)


@click.command()
@click.argument("address")
@mode_option
@rpc_url_option
def impersonate(address: str, mode: Optional[str], rpc_url: Optional[str]) -> None:
    """Start impersonating ADDRESS."""
    try:
        with _client(mode, rpc_url) as client:
            impersonate_account(client, address)
    except COMMAND_ERRORS as exc:
        fail(exc)
    click.secho(f"Impersonating {address} ({client.mode})", fg="green")


@click.command("stop-impersonating")
@click.argument("address")
@mode_option
@rpc_url_option
def stop_impersonating(address: str, mode: Optional[str], rpc_url: Optional[str]) -> None:
    """Stop impersonating ADDRESS."""
    try:
        with _client(mode, rpc_url) as client:
            stop_impersonating_account(client, address)
    except COMMAND_ERRORS as exc:
        fail(exc)
    click.secho(f"Stopped impersonating {address} ({client.mode})", fg="green")


@click.command("set-balance")
@click.argument("address")
@click.argument("wei", type=int)
@mode_option
@rpc_url_option
def set_balance(address: str, wei: int, mode: Optional[str], rpc_url: Optional[str]) -> None:
    """Set the balance of ADDRESS to WEI."""
    try:
        with _client(mode, rpc_url) as client:
            set_balance_action(client, address, wei)
    except COMMAND_ERRORS as exc:
        fail(exc)
    click.secho(f"Balance of {address} set to {wei} wei ({client.mode})", fg="green")
