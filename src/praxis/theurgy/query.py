"""
Theurgy Query - Read chain state from the command line.

Commands: nonce, balance, block-number, chain-id.
"""

from __future__ import annotations

import sys
from typing import NoReturn, Optional

import click

from ..actions.public import (
    BLOCK_TAGS,
    get_balance,
    get_block_number,
    get_chain_id,
    get_transaction_count,
)
from ..chains import assert_current_chain, get_chain
from ..errors import BaseError
from ..pneuma.client import create_public_client
from ..pneuma.rpc import TransportError


rpc_url_option = click.option(
    "--rpc-url",
    envvar="PRAXIS_RPC_URL",
    default=None,
    help="Node JSON-RPC URL (default: PRAXIS_RPC_URL or http://127.0.0.1:8545)",
)
block_number_option = click.option(
    "--block-number", type=int, default=None, help="Query at this block number"
)
block_tag_option = click.option(
    "--block-tag",
    type=click.Choice(BLOCK_TAGS),
    default=None,
    help="Query at this block tag (default: latest)",
)


# Decoding a null or non-hex result raises TypeError / ValueError.
COMMAND_ERRORS = (ValueError, TypeError, TransportError)


def fail(exc: Exception) -> NoReturn:
    message = exc.args[0] if isinstance(exc, KeyError) else exc
    click.secho(f"ERROR: {message}", fg="red", err=True)
    sys.exit(1)


@click.command()
@click.argument("address")
@block_number_option
@block_tag_option
@rpc_url_option
def nonce(
    address: str,
    block_number: Optional[int],
    block_tag: Optional[str],
    rpc_url: Optional[str],
) -> None:
    """Show the transaction count of ADDRESS."""
    try:
        with create_public_client(rpc_url) as client:
            count = get_transaction_count(
                client, address, block_number=block_number, block_tag=block_tag
            )
    except COMMAND_ERRORS as exc:
        fail(exc)
    click.echo(str(count))


@click.command()
@click.argument("address")
@block_number_option
@block_tag_option
@rpc_url_option
def balance(
    address: str,
    block_number: Optional[int],
    block_tag: Optional[str],
    rpc_url: Optional[str],
) -> None:
    """Show the balance of ADDRESS in wei."""
    try:
        with create_public_client(rpc_url) as client:
            wei = get_balance(
                client, address, block_number=block_number, block_tag=block_tag
            )
    except COMMAND_ERRORS as exc:
        fail(exc)
    click.echo(str(wei))


@click.command("block-number")
@rpc_url_option
def block_number(rpc_url: Optional[str]) -> None:
    """Show the latest block number."""
    try:
        with create_public_client(rpc_url) as client:
            number = get_block_number(client)
    except COMMAND_ERRORS as exc:
        fail(exc)
    click.echo(str(number))


@click.command("chain-id")
@click.option(
    "--expect",
    default=None,
    help="Fail unless the node is on this chain (name like 'sepolia' or a chain ID)",
)
@rpc_url_option
def chain_id(expect: Optional[str], rpc_url: Optional[str]) -> None:
    """Show the chain ID of the node, optionally checking it."""
    try:
        with create_public_client(rpc_url) as client:
            current = get_chain_id(client)
    except COMMAND_ERRORS as exc:
        fail(exc)

    if expect is not None:
        try:
            assert_current_chain(get_chain(expect), current)
        except KeyError as exc:
            fail(exc)
        except BaseError as exc:
            click.secho(exc.message, fg="red", err=True)
            sys.exit(1)

    click.echo(str(current))
