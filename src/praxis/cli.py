"""
praxis CLI

Command-line interface over the praxis actions.

Commands:
  nonce               - Transaction count of an address
  balance             - Balance of an address (wei)
  block-number        - Latest block number
  chain-id            - Chain ID of the node (optionally checked)
  impersonate         - Start impersonating an address (test node)
  stop-impersonating  - Stop impersonating an address (test node)
  set-balance         - Set an address balance (test node)
  info                - Show configuration
"""

from __future__ import annotations

import logging
import sys

import click

from .pneuma.rpc import PRAXIS_ENV, get_mode, get_rpc_url


# ============ Constants ============

VERSION = "0.3.0"


# ============ Banner ============


def _print_banner() -> None:
    border = click.style("  ◆ ═══════════════════════════════ ◆", fg="cyan")
    click.echo()
    click.echo(border)
    click.echo(
        click.style("        P R A X I S", fg="bright_white", bold=True)
        + click.style(f"    v{VERSION}", dim=True)
    )
    click.echo(border)
    click.echo()


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=VERSION, prog_name="praxis")
@click.option("--verbose", "-v", is_flag=True, help="Log JSON-RPC traffic to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """praxis: typed actions over Ethereum JSON-RPC."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    if ctx.invoked_subcommand is None:
        _print_banner()
        click.echo(ctx.get_help())


# ============ Top-level Commands ============

from .theurgy.query import balance, block_number, chain_id, nonce
from .theurgy.impersonate import impersonate, set_balance, stop_impersonating

cli.add_command(nonce)
cli.add_command(balance)
cli.add_command(block_number)
cli.add_command(chain_id)
cli.add_command(impersonate)
cli.add_command(stop_impersonating)
cli.add_command(set_balance)


# ============ Info ============


@cli.command()
def info() -> None:
    """Show configuration."""
    _print_banner()

    click.secho("  Config ─────────────────────────────", fg="cyan")
    click.echo()
    click.echo(click.style("  RPC URL:  ", dim=True) + click.style(get_rpc_url(), fg="bright_white"))
    click.echo(click.style("  Mode:     ", dim=True) + click.style(get_mode(), fg="bright_white"))
    env_state = "found" if PRAXIS_ENV.exists() else "not found"
    click.echo(click.style("  Env file: ", dim=True) + f"{PRAXIS_ENV} ({env_state})")
    click.echo()


# ============ Entry Points ============


def main() -> None:
    """praxis CLI entry point."""
    # Ensure UTF-8 output on Windows (for box-drawing symbols)
    if sys.platform == "win32":
        try:
            sys.stdout.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
            sys.stderr.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
        except (AttributeError, OSError):
            pass
    cli()


if __name__ == "__main__":
    main()
