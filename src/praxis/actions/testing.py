"""
Test actions - Mutate state on a local development node.

These map to node-specific methods named ``<mode>_<suffix>``, e.g.
``anvil_stopImpersonatingAccount`` or ``hardhat_stopImpersonatingAccount``.
The raw reply is discarded.
"""

from __future__ import annotations

from typing import Any, Optional

from ..pneuma.client import TestClient
from ..utils import number_to_hex


def request_with_mode(client: TestClient, suffix: str, params: Optional[list] = None) -> Any:
    """Send ``<client.mode>_<suffix>`` with params."""
    return client.request(f"{client.mode}_{suffix}", list(params or []))


def impersonate_account(client: TestClient, address: str) -> None:
    """Send transactions as address without its private key."""
    request_with_mode(client, "impersonateAccount", [address])


def stop_impersonating_account(client: TestClient, address: str) -> None:
    """
    Stop impersonating an account after impersonate_account().

    Args:
        client: Test client to use
        address: 0x-prefixed address that was impersonated
    """
    request_with_mode(client, "stopImpersonatingAccount", [address])


def set_balance(client: TestClient, address: str, value: int) -> None:
    """Set the balance of address to value (wei)."""
    request_with_mode(client, "setBalance", [address, number_to_hex(value)])


def set_nonce(client: TestClient, address: str, nonce: int) -> None:
    request_with_mode(client, "setNonce", [address, number_to_hex(nonce)])
